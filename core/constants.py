"""
Application-wide constants.
Centralized constants following DRY principle.
"""

MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]


# Room Status
class RoomStatus:
    VACANT = 'Vacant'
    PARTIALLY_OCCUPIED = 'Partially Occupied'
    OCCUPIED = 'Occupied'

    CHOICES = [
        (VACANT, 'Vacant'),
        (PARTIALLY_OCCUPIED, 'Partially Occupied'),
        (OCCUPIED, 'Occupied'),
    ]


# Bill Types
class BillType:
    RENT = 'Rent'
    ELECTRICITY = 'Electricity'

    CHOICES = [
        (RENT, 'Rent'),
        (ELECTRICITY, 'Electricity'),
    ]


# Bill Status
class BillStatus:
    UNPAID = 'Unpaid'
    PAID = 'Paid'

    CHOICES = [
        (UNPAID, 'Unpaid'),
        (PAID, 'Paid'),
    ]


# Manual rent proof status
class RentProofStatus:
    PENDING = 'Pending'
    APPROVED = 'Approved'
    REJECTED = 'Rejected'

    CHOICES = [
        (PENDING, 'Pending'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
    ]


# Rent report row status (manual proof statuses are used verbatim)
class ReportStatus:
    PAID_ONLINE = 'Paid (Online)'
    UNPAID = 'Unpaid'
    NOT_PAID = 'Not Paid'


# Complaint Status
class ComplaintStatus:
    OPEN = 'Open'
    RESOLVED = 'Resolved'

    CHOICES = [
        (OPEN, 'Open'),
        (RESOLVED, 'Resolved'),
    ]


# Identity document types
class IdType:
    AADHAR = 'aadhar'
    PAN = 'pan'
    VOTER = 'voter'

    CHOICES = [
        (AADHAR, 'Aadhar'),
        (PAN, 'PAN'),
        (VOTER, 'Voter ID'),
    ]


# Default Limits
class DefaultLimits:
    ROOM_CAPACITY = 2
    DEFAULT_ROOM_PRICE = 1500
    RENT_DUE_DAY = 5
    ELECTRICITY_DUE_DAYS = 7


# Room layout created by the seed operation
class RoomLayout:
    FLOORS = 3
    ROOMS_PER_FLOOR = 5

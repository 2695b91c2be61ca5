"""
Custom exceptions for the application.
Following domain-driven design principles with specific exception types.
"""


class BaseApplicationException(Exception):
    """Base exception for all application-specific exceptions"""
    default_message = "An application error occurred"
    default_code = "APPLICATION_ERROR"

    def __init__(self, message=None, code=None, details=None):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseApplicationException):
    """Raised when required input is missing or malformed"""
    default_message = "Validation failed"
    default_code = "INVALID_INPUT"


class NotFoundError(BaseApplicationException):
    """Raised when a resource is not found"""
    default_message = "Resource not found"
    default_code = "NOT_FOUND"

    def __init__(self, resource_type=None, resource_id=None, **kwargs):
        self.resource_type = resource_type
        self.resource_id = resource_id
        if 'message' not in kwargs and resource_type:
            kwargs['message'] = f"{resource_type} {resource_id} not found"
        super().__init__(**kwargs)


class PermissionDeniedError(BaseApplicationException):
    """Raised when user doesn't have permission"""
    default_message = "Permission denied"
    default_code = "PERMISSION_DENIED"


class BusinessLogicError(BaseApplicationException):
    """Raised when business rule is violated"""
    default_message = "Business rule violation"
    default_code = "BUSINESS_RULE_VIOLATION"


class CapacityExceededError(BusinessLogicError):
    """Raised when a room already holds its maximum number of tenants"""
    default_message = "Room is already fully occupied"
    default_code = "CAPACITY_EXCEEDED"


class TargetFullError(CapacityExceededError):
    """Raised when the destination room of a transfer is full"""
    default_message = "Target room is already full"
    default_code = "TARGET_FULL"


class IdempotentConditionError(BaseApplicationException):
    """
    Raised for conditions that leave the system unchanged.
    Callers treat these as success with no effect.
    """
    default_message = "Nothing to do"
    default_code = "NO_OP"


class AlreadyPaidError(IdempotentConditionError):
    """Raised when a bill is already marked as paid"""
    default_message = "Bill is already paid"
    default_code = "ALREADY_PAID"


class DuplicateError(IdempotentConditionError):
    """Raised when a record for the same key already exists"""
    default_message = "Record already exists"
    default_code = "DUPLICATE"


class SignatureMismatchError(BaseApplicationException):
    """Raised when a payment callback signature does not verify"""
    default_message = "Invalid payment signature"
    default_code = "SIGNATURE_MISMATCH"

"""
Utilities for rent tracking - report export.
"""
import csv
from django.http import HttpResponse


def export_rent_report(rows, month, year):
    """
    Export rent tracking rows to CSV

    Args:
        rows: ReportRow list built by RentReportMerger
        month, year: period shown in the file name

    Returns:
        HttpResponse with file
    """
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename="rent_report_{month}_{year}.csv"'

    writer = csv.writer(response)
    writer.writerow(['Room', 'Tenant', 'Phone', 'Status', 'Amount', 'Record', 'Proof'])

    for row in rows:
        writer.writerow([
            row.room_no,
            row.name,
            row.phone,
            row.status,
            str(row.amount),
            row.record_id if row.record_id is not None else '',
            row.proof_url or '',
        ])

    return response

"""
Management command to generate monthly rent bills for all housed tenants.
Run this command at the start of each month to ensure all tenants have rent bills.
The background scheduler runs the same logic on the 1st of every month.

Usage:
    python manage.py generate_monthly_rent
    python manage.py generate_monthly_rent --date 2025-01-01 --dry-run

Can be added to crontab to run automatically:
    0 0 1 * * cd /path/to/project && python manage.py generate_monthly_rent
"""

from datetime import datetime
from django.core.management.base import BaseCommand, CommandError
from billing.services import BillingService


class Command(BaseCommand):
    help = 'Generate monthly rent bills for all tenants with a room'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be created without actually creating bills',
        )
        parser.add_argument(
            '--date',
            help='Billing date (YYYY-MM-DD); defaults to today',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        as_of = None
        if options.get('date'):
            try:
                as_of = datetime.strptime(options['date'], '%Y-%m-%d').date()
            except ValueError:
                raise CommandError("--date must be in YYYY-MM-DD format")

        result = BillingService().generate_monthly_rent(as_of=as_of, dry_run=dry_run)

        self.stdout.write(f"\n{'='*60}")
        self.stdout.write(f"  MONTHLY RENT GENERATION - {result.month} {result.year}")
        self.stdout.write(f"{'='*60}\n")

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No bills were created\n"))

        for bill in result.created:
            self.stdout.write(
                self.style.SUCCESS(f"  + {bill.tenant.name} (Room {bill.room_no}) - Rent: ₹{bill.amount}")
            )

        # Summary
        self.stdout.write(f"\n{'='*60}")
        self.stdout.write("  SUMMARY")
        self.stdout.write(f"{'='*60}")
        self.stdout.write(f"  Already had bills: {result.skipped}")

        if dry_run:
            self.stdout.write(self.style.WARNING(f"  Would create: {result.created_count}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"  Created: {result.created_count}"))

        self.stdout.write(f"{'='*60}\n")

"""
Management command to repair room occupancy counts and status.
Drops tenant references that no longer exist and recomputes derived fields.

Usage:
    python manage.py reconcile_rooms
    python manage.py reconcile_rooms --dry-run
"""

from django.core.management.base import BaseCommand
from rooms.models import Room
from rooms.services import OccupancyService


class Command(BaseCommand):
    help = 'Reconcile room occupant counts and status with the tenant list'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report rooms that drifted without writing corrections',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        rooms = list(Room.objects.all())

        self.stdout.write(f"Starting room occupancy reconciliation ({len(rooms)} rooms)...")
        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No rooms will be updated"))

        changed = OccupancyService().reconcile(rooms, dry_run=dry_run)

        if dry_run:
            self.stdout.write(self.style.WARNING(f"Rooms checked: {len(rooms)}. Rooms that would be updated: {changed}."))
        else:
            self.stdout.write(self.style.SUCCESS(f"Rooms checked: {len(rooms)}. Rooms updated: {changed}."))

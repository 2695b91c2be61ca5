"""
Management command to create the fixed room layout (3 floors x 5 rooms).
Safe to run more than once: rooms that already exist are left untouched.

Usage:
    python manage.py seed_rooms
"""

from django.core.management.base import BaseCommand
from rooms.models import Room
from rooms.services import OccupancyService


class Command(BaseCommand):
    help = 'Create the PG room layout'

    def handle(self, *args, **options):
        created = OccupancyService().seed_rooms()
        total = Room.objects.count()

        if created:
            self.stdout.write(self.style.SUCCESS(f"Created {created} rooms ({total} total)"))
        else:
            self.stdout.write(self.style.WARNING(f"All rooms already exist ({total} total)"))

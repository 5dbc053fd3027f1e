"""
Management command to seed the default processing methods.

Safe to run repeatedly; existing methods and their usage counts are kept.

Usage:
    python manage.py seed_processing_methods
"""

from django.core.management.base import BaseCommand

from apps.coffees.services import seed_default_processing_methods


class Command(BaseCommand):
    help = 'Create the default coffee processing methods if missing'

    def handle(self, *args, **options):
        created = seed_default_processing_methods()

        if created == 0:
            self.stdout.write(
                self.style.SUCCESS('All default processing methods already exist.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(f'✓ Created {created} processing method(s).')
        )

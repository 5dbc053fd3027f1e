"""
Management command to create sample data for trying out the journal.

Usage:
    python manage.py create_sample_data

This creates:
- Default processing methods
- 3 coffees
- 3 recipes (V60, espresso, French press)
- Brewing notes for them
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal

from apps.coffees.models import Coffee, ProcessingMethod
from apps.coffees.services import create_coffee, seed_default_processing_methods
from apps.notes.models import BrewingNote
from apps.notes.services import create_brewing_note
from apps.recipes.models import Recipe
from apps.recipes.services import create_recipe


class Command(BaseCommand):
    help = 'Create sample coffees, recipes and brewing notes'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        seed_default_processing_methods()
        coffees = self.create_coffees()
        recipes = self.create_recipes()
        self.create_notes(coffees, recipes)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write(f'  {Coffee.objects.count()} coffees')
        self.stdout.write(f'  {Recipe.objects.count()} recipes')
        self.stdout.write(f'  {BrewingNote.objects.count()} brewing notes')

    def clear_data(self):
        """Clear all journal data from the database."""
        BrewingNote.objects.all().delete()
        Recipe.objects.all().delete()
        Coffee.objects.all().delete()
        ProcessingMethod.objects.all().delete()

    def create_coffees(self):
        coffees = {
            'blue_mountain': create_coffee(
                name='Blue Mountain',
                roaster='Blue Bottle Coffee',
                processing='Washed',
                roast_level='Medium',
                origin='Jamaica',
            ),
            'yirgacheffe': create_coffee(
                name='Yirgacheffe Kochere',
                roaster='Square Mile',
                processing='Washed',
                roast_level='Light',
                origin='Ethiopia',
            ),
            'cerrado': create_coffee(
                name='Cerrado Mineiro',
                roaster='Local Roastery',
                processing='Natural',
                roast_level='Medium-Dark',
                origin='Brazil',
            ),
        }
        self.stdout.write(f'  ✓ Created {len(coffees)} coffees')
        return coffees

    def create_recipes(self):
        recipes = {
            'v60': create_recipe(
                name='My V60 Recipe',
                brewing_method='V60-01',
                grinder='Baratza Encore',
                grind_size=20,
                water_temp=93,
                dose=Decimal('20.0'),
                brew_time=240,
                pours=[Decimal('40'), Decimal('100'), Decimal('180')],
                bloom_time=30,
            ),
            'espresso': create_recipe(
                name='Daily Shot',
                brewing_method='Espresso (Gaggia Classic Pro)',
                grinder='Turin DF64',
                grind_size=8,
                dose=Decimal('18.0'),
                brew_time=28,
                water_out=Decimal('36.0'),
            ),
            'french_press': create_recipe(
                brewing_method='French Press',
                grinder='1Zpresso J-Ultra',
                grind_size=90,
                dose=Decimal('30.0'),
                brew_time=240,
            ),
        }
        self.stdout.write(f'  ✓ Created {len(recipes)} recipes')
        return recipes

    def create_notes(self, coffees, recipes):
        sessions = [
            ('blue_mountain', 'v60', 4,
             'Great brew today! Sweet and bright with notes of citrus. Perfect extraction.'),
            ('yirgacheffe', 'v60', 5, 'Jasmine and bergamot, very clean cup.'),
            ('cerrado', 'espresso', 3, 'A little bitter, grind one step coarser next time.'),
            ('cerrado', 'french_press', 0, ''),
        ]
        for coffee_key, recipe_key, rating, notes in sessions:
            create_brewing_note(
                coffee_id=coffees[coffee_key].id,
                recipe_id=recipes[recipe_key].id,
                rating=rating,
                notes=notes,
            )
        self.stdout.write(f'  ✓ Created {len(sessions)} brewing notes')

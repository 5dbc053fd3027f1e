# ==========================================
# apps/coffees/models.py
# ==========================================

from django.db import models
from django.db.models import Avg
import uuid

from apps.common.display import (
    or_default,
    UNKNOWN_COFFEE,
    UNKNOWN_ORIGIN,
    UNKNOWN_PROCESSING,
    UNKNOWN_ROAST,
    UNKNOWN_ROASTER,
)


class RoastLevel(models.TextChoices):
    LIGHT = 'Light', 'Light'
    MEDIUM_LIGHT = 'Medium-Light', 'Medium-Light'
    MEDIUM = 'Medium', 'Medium'
    MEDIUM_DARK = 'Medium-Dark', 'Medium-Dark'
    DARK = 'Dark', 'Dark'
    EXTRA_DARK = 'Extra Dark', 'Extra Dark'


PROCESSING_OPTIONS = [
    'Washed',
    'Natural',
    'Honey',
    'Semi-washed',
    'Pulped Natural',
    'Anaerobic',
    'Other',
]


class Coffee(models.Model):
    """A bag of coffee in the journal."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    roaster = models.CharField(max_length=200, blank=True, db_index=True)
    processing = models.CharField(max_length=100, blank=True)
    roast_level = models.CharField(max_length=20, choices=RoastLevel.choices, default=RoastLevel.MEDIUM)
    origin = models.CharField(max_length=200, blank=True)
    date_added = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'coffees'
        indexes = [
            models.Index(fields=['name'], name='coffees_name_idx'),
            models.Index(fields=['date_added'], name='coffees_date_added_idx'),
        ]
        ordering = ['-date_added']

    def __str__(self):
        return self.display_name

    @property
    def display_name(self):
        return f"{or_default(self.name, UNKNOWN_COFFEE)} - {or_default(self.roaster, UNKNOWN_ROASTER)}"

    @property
    def detail_text(self):
        return " • ".join([
            or_default(self.origin, UNKNOWN_ORIGIN),
            or_default(self.processing, UNKNOWN_PROCESSING),
            or_default(self.roast_level, UNKNOWN_ROAST),
        ])

    @property
    def brewing_notes_count(self):
        return self.brewing_notes.count()

    @property
    def average_rating(self):
        """Mean rating over rated notes; unrated (0) notes are ignored."""
        avg = self.brewing_notes.filter(rating__gt=0).aggregate(avg=Avg('rating'))['avg']
        return float(avg) if avg is not None else 0.0

    @property
    def has_ratings(self):
        return self.brewing_notes.filter(rating__gt=0).exists()

    def matches_search(self, text):
        """Case-insensitive match on name, roaster or origin. Blank text matches."""
        needle = (text or '').lower()
        return any(
            needle in (value or '').lower()
            for value in (self.name, self.roaster, self.origin)
        )


class ProcessingMethod(models.Model):
    """Processing methods offered when adding a coffee, ranked by use."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    usage_count = models.IntegerField(default=0)
    date_created = models.DateTimeField(auto_now_add=True)

    DEFAULT_METHODS = [
        'Washed',
        'Honey',
        'Natural',
        'Semi-Washed',
        'Pulped Natural',
        'Anaerobic',
        'Carbonic Maceration',
    ]

    class Meta:
        db_table = 'processing_methods'
        ordering = ['-usage_count', 'name']

    def __str__(self):
        return self.name

    def increment_usage_count(self):
        self.usage_count += 1

# ==========================================
# apps/recipes/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.common.display import or_default, UNKNOWN_GRINDER, UNKNOWN_METHOD
from . import brewing


class AeropressType(models.TextChoices):
    NORMAL = 'Normal', 'Normal'
    INVERTED = 'Inverted', 'Inverted'


DEFAULT_BREWING_METHOD = 'V60-01'
DEFAULT_GRINDER = 'Baratza Encore'


def _grams(**kwargs):
    return models.DecimalField(
        max_digits=7,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
        **kwargs
    )


class Recipe(models.Model):
    """
    A brewing recipe for one method and grinder.

    Pours are cumulative scale readings in grams. The bloom is the first
    one, followed by up to nine more. Which of the method-specific fields
    matter depends on the brewing method category, see ``brewing``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, blank=True)
    brewing_method = models.CharField(max_length=100, default=DEFAULT_BREWING_METHOD, db_index=True)
    grinder = models.CharField(max_length=100, default=DEFAULT_GRINDER)
    grind_size = models.IntegerField(default=0)
    water_temp = models.IntegerField(default=93)
    dose = models.DecimalField(max_digits=6, decimal_places=1, default=Decimal('20.0'), validators=[MinValueValidator(Decimal('0'))])
    brew_time = models.IntegerField(default=0)
    usage_count = models.IntegerField(default=0)

    # Pour schedule (pour-over, French press, Aeropress)
    bloom_amount = _grams()
    bloom_time = models.IntegerField(default=0)
    second_pour = _grams()
    third_pour = _grams()
    fourth_pour = _grams()
    fifth_pour = _grams()
    sixth_pour = _grams()
    seventh_pour = _grams()
    eighth_pour = _grams()
    ninth_pour = _grams()
    tenth_pour = _grams()

    # Espresso
    water_out = _grams()

    # Aeropress
    aeropress_type = models.CharField(max_length=20, choices=AeropressType.choices, default=AeropressType.NORMAL)
    plunge_time = models.IntegerField(default=0)

    date_created = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipes'
        indexes = [
            models.Index(fields=['usage_count'], name='recipes_usage_count_idx'),
            models.Index(fields=['date_created'], name='recipes_date_created_idx'),
        ]
        ordering = ['-usage_count', 'name']

    def __str__(self):
        return self.display_name

    @property
    def display_name(self):
        """Explicit name, or "{method} - {grinder}" when left blank."""
        if self.name and self.name.strip():
            return self.name
        return (
            f"{or_default(self.brewing_method, UNKNOWN_METHOD)} - "
            f"{or_default(self.grinder, UNKNOWN_GRINDER)}"
        )

    # Method classification

    @property
    def category(self) -> brewing.BrewingCategory:
        return brewing.classify_brewing_method(self.brewing_method)

    @property
    def is_pour_over(self):
        return self.category is brewing.BrewingCategory.POUR_OVER

    @property
    def is_espresso(self):
        return self.category is brewing.BrewingCategory.ESPRESSO

    @property
    def is_french_press(self):
        return self.category is brewing.BrewingCategory.FRENCH_PRESS

    @property
    def is_aeropress(self):
        return self.category is brewing.BrewingCategory.AEROPRESS

    @property
    def supports_pours(self):
        return self.category.supports_pours

    @property
    def supports_bloom(self):
        return self.category.supports_bloom

    # Pour schedule

    @property
    def pours(self) -> list:
        """All ten pour fields in order, bloom first; unset entries are None."""
        return [getattr(self, field) for field in brewing.POUR_FIELDS]

    def assign_pours(self, amounts):
        """Assign pours in order starting with the bloom; the rest are cleared."""
        amounts = list(amounts)
        if len(amounts) > brewing.MAX_POURS:
            raise ValueError(f"A recipe holds at most {brewing.MAX_POURS} pours")
        amounts += [None] * (brewing.MAX_POURS - len(amounts))
        for field, amount in zip(brewing.POUR_FIELDS, amounts):
            setattr(self, field, amount)

    @property
    def pour_count(self):
        return brewing.count_pours(self.category, self.pours)

    @property
    def has_valid_pour_sequence(self):
        return brewing.is_valid_pour_sequence(self.bloom_amount, self.pours[1:])

    @property
    def final_weight(self):
        return brewing.final_weight(
            self.category,
            pours=self.pours,
            dose=self.dose,
            water_out=self.water_out,
        )

    @property
    def final_weight_display(self):
        return brewing.format_weight(self.final_weight)

    @property
    def formatted_brewing_method(self):
        return brewing.format_brewing_method(
            self.brewing_method,
            category=self.category,
            pour_count=self.pour_count,
            aeropress_type=self.aeropress_type,
        )

    # Usage tracking

    def increment_usage_count(self):
        self.usage_count += 1

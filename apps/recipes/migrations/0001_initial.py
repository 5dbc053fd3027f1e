# Generated manually for the recipes app

import uuid
import django.core.validators
from decimal import Decimal
from django.db import migrations, models


def grams():
    return models.DecimalField(
        blank=True,
        decimal_places=1,
        max_digits=7,
        null=True,
        validators=[django.core.validators.MinValueValidator(Decimal('0'))],
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Recipe',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(blank=True, max_length=200)),
                ('brewing_method', models.CharField(db_index=True, default='V60-01', max_length=100)),
                ('grinder', models.CharField(default='Baratza Encore', max_length=100)),
                ('grind_size', models.IntegerField(default=0)),
                ('water_temp', models.IntegerField(default=93)),
                ('dose', models.DecimalField(decimal_places=1, default=Decimal('20.0'), max_digits=6, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('brew_time', models.IntegerField(default=0)),
                ('usage_count', models.IntegerField(default=0)),
                ('bloom_amount', grams()),
                ('bloom_time', models.IntegerField(default=0)),
                ('second_pour', grams()),
                ('third_pour', grams()),
                ('fourth_pour', grams()),
                ('fifth_pour', grams()),
                ('sixth_pour', grams()),
                ('seventh_pour', grams()),
                ('eighth_pour', grams()),
                ('ninth_pour', grams()),
                ('tenth_pour', grams()),
                ('water_out', grams()),
                ('aeropress_type', models.CharField(choices=[('Normal', 'Normal'), ('Inverted', 'Inverted')], default='Normal', max_length=20)),
                ('plunge_time', models.IntegerField(default=0)),
                ('date_created', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'recipes',
                'ordering': ['-usage_count', 'name'],
                'indexes': [
                    models.Index(fields=['usage_count'], name='recipes_usage_count_idx'),
                    models.Index(fields=['date_created'], name='recipes_date_created_idx'),
                ],
            },
        ),
    ]

# Generated manually for the coffees app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Coffee',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('roaster', models.CharField(blank=True, db_index=True, max_length=200)),
                ('processing', models.CharField(blank=True, max_length=100)),
                ('roast_level', models.CharField(choices=[('Light', 'Light'), ('Medium-Light', 'Medium-Light'), ('Medium', 'Medium'), ('Medium-Dark', 'Medium-Dark'), ('Dark', 'Dark'), ('Extra Dark', 'Extra Dark')], default='Medium', max_length=20)),
                ('origin', models.CharField(blank=True, max_length=200)),
                ('date_added', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'coffees',
                'ordering': ['-date_added'],
                'indexes': [
                    models.Index(fields=['name'], name='coffees_name_idx'),
                    models.Index(fields=['date_added'], name='coffees_date_added_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ProcessingMethod',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('usage_count', models.IntegerField(default=0)),
                ('date_created', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'processing_methods',
                'ordering': ['-usage_count', 'name'],
            },
        ),
    ]

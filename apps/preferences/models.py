# ==========================================
# apps/preferences/models.py
# ==========================================

from django.db import models


class PreferenceSetting(models.Model):
    """One JSON document of user settings, stored under a key."""

    key = models.CharField(max_length=100, unique=True)
    value = models.JSONField(default=dict)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'preference_settings'
        ordering = ['key']

    def __str__(self):
        return self.key

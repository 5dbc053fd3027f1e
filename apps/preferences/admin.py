# ==========================================
# apps/preferences/admin.py
# ==========================================

from django.contrib import admin
from apps.preferences.models import PreferenceSetting


@admin.register(PreferenceSetting)
class PreferenceSettingAdmin(admin.ModelAdmin):
    list_display = ['key', 'updated_at']
    readonly_fields = ['updated_at']

# ==========================================
# apps/coffees/admin.py
# ==========================================

from django.contrib import admin
from apps.coffees.models import Coffee, ProcessingMethod


@admin.register(Coffee)
class CoffeeAdmin(admin.ModelAdmin):
    """Admin interface for Coffees."""

    list_display = [
        'name',
        'roaster',
        'origin',
        'processing',
        'roast_level',
        'get_average_rating',
        'date_added'
    ]
    list_filter = [
        'roast_level',
        'processing',
        'date_added'
    ]
    search_fields = [
        'name',
        'roaster',
        'origin'
    ]
    readonly_fields = ['date_added', 'updated_at']
    date_hierarchy = 'date_added'
    ordering = ['-date_added']

    fieldsets = (
        ('Basic Information', {
            'fields': (
                'name',
                'roaster',
                'origin'
            )
        }),
        ('Processing & Roasting', {
            'fields': (
                'processing',
                'roast_level'
            )
        }),
        ('Metadata', {
            'fields': ('date_added', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_average_rating(self, obj):
        """Average star rating over rated notes."""
        return f"{obj.average_rating:.1f}" if obj.has_ratings else '—'
    get_average_rating.short_description = 'Avg rating'


@admin.register(ProcessingMethod)
class ProcessingMethodAdmin(admin.ModelAdmin):
    """Admin interface for Processing Methods."""

    list_display = ['name', 'usage_count', 'date_created']
    search_fields = ['name']
    readonly_fields = ['date_created']
    ordering = ['-usage_count', 'name']

    actions = ['reset_usage']

    def reset_usage(self, request, queryset):
        """Reset usage counters of selected methods."""
        count = queryset.update(usage_count=0)
        self.message_user(request, f"Reset usage of {count} processing methods")
    reset_usage.short_description = "Reset usage count"

# ==========================================
# apps/recipes/admin.py
# ==========================================

from django.contrib import admin
from apps.recipes.models import Recipe


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin interface for Recipes."""

    list_display = [
        'get_display_name',
        'brewing_method',
        'grinder',
        'grind_size',
        'dose',
        'get_pour_count',
        'usage_count',
        'date_created'
    ]
    list_filter = [
        'brewing_method',
        'grinder',
        'date_created'
    ]
    search_fields = [
        'name',
        'brewing_method',
        'grinder'
    ]
    readonly_fields = ['usage_count', 'date_created', 'updated_at']
    ordering = ['-usage_count', 'name']

    fieldsets = (
        ('Basic Information', {
            'fields': (
                'name',
                'brewing_method',
                'grinder',
                'grind_size',
                'water_temp',
                'dose',
                'brew_time'
            )
        }),
        ('Pours', {
            'fields': (
                ('bloom_amount', 'bloom_time'),
                'second_pour',
                'third_pour',
                'fourth_pour',
                'fifth_pour',
                'sixth_pour',
                'seventh_pour',
                'eighth_pour',
                'ninth_pour',
                'tenth_pour'
            ),
            'classes': ('collapse',)
        }),
        ('Espresso & Aeropress', {
            'fields': (
                'water_out',
                'aeropress_type',
                'plunge_time'
            ),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('usage_count', 'date_created', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_display_name(self, obj):
        return obj.display_name
    get_display_name.short_description = 'Recipe'

    def get_pour_count(self, obj):
        return obj.pour_count
    get_pour_count.short_description = 'Pours'

# ==========================================
# apps/notes/admin.py
# ==========================================

from django.contrib import admin
from apps.notes.models import BrewingNote


@admin.register(BrewingNote)
class BrewingNoteAdmin(admin.ModelAdmin):
    """Admin interface for Brewing Notes."""

    list_display = [
        'get_coffee_name',
        'get_recipe_name',
        'rating_stars',
        'short_notes',
        'date_created'
    ]
    list_filter = [
        'rating',
        'date_created'
    ]
    search_fields = [
        'coffee__name',
        'coffee__roaster',
        'recipe__name',
        'recipe__brewing_method',
        'notes'
    ]
    raw_id_fields = ['coffee', 'recipe']
    readonly_fields = ['date_created', 'updated_at']
    date_hierarchy = 'date_created'
    ordering = ['-date_created']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('coffee', 'recipe')

    def get_coffee_name(self, obj):
        return obj.coffee_name
    get_coffee_name.short_description = 'Coffee'

    def get_recipe_name(self, obj):
        return obj.recipe_name
    get_recipe_name.short_description = 'Recipe'

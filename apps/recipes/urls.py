from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'recipes'

router = DefaultRouter()
router.register(r'', views.RecipeViewSet, basename='recipe')

urlpatterns = [
    # Recipe ViewSet routes
    # GET    /api/recipes/                 - List recipes (most used first)
    # POST   /api/recipes/                 - Add recipe
    # GET    /api/recipes/{id}/            - Get recipe details
    # PUT    /api/recipes/{id}/            - Update recipe
    # PATCH  /api/recipes/{id}/            - Partial update
    # DELETE /api/recipes/{id}/            - Delete recipe

    # Custom actions
    # POST   /api/recipes/{id}/use/        - Count a brew with this recipe
    # GET    /api/recipes/most-used/       - Most used recipes
    # GET    /api/recipes/options/         - Form choices

    path('', include(router.urls)),
]

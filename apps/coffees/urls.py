from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'coffees'

router = DefaultRouter()
router.register(r'', views.CoffeeViewSet, basename='coffee')

urlpatterns = [
    # Coffee ViewSet routes
    # GET    /api/coffees/                      - List coffees
    # POST   /api/coffees/                      - Add coffee
    # GET    /api/coffees/{id}/                 - Get coffee details
    # PUT    /api/coffees/{id}/                 - Update coffee
    # PATCH  /api/coffees/{id}/                 - Partial update
    # DELETE /api/coffees/{id}/                 - Delete coffee

    # Custom actions
    # GET    /api/coffees/{id}/summary/         - Rating summary
    # GET    /api/coffees/roasters/             - List all roasters
    # GET    /api/coffees/options/              - Form choices
    # GET    /api/coffees/processing-methods/   - Processing methods by usage

    path('', include(router.urls)),
]

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'notes'

router = DefaultRouter()
router.register(r'', views.BrewingNoteViewSet, basename='note')

urlpatterns = [
    # BrewingNote ViewSet routes
    # GET    /api/notes/           - List notes (newest first)
    # POST   /api/notes/           - Log a brewing session
    # GET    /api/notes/{id}/      - Get note details
    # PUT    /api/notes/{id}/      - Update note
    # PATCH  /api/notes/{id}/      - Partial update
    # DELETE /api/notes/{id}/      - Delete note

    path('', include(router.urls)),
]

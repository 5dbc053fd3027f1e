from django.urls import path
from . import views

app_name = 'preferences'

urlpatterns = [
    # GET/PATCH /api/preferences/
    path('', views.preferences_detail, name='preferences'),

    # Brewing methods
    path('brewing-methods/toggle/', views.toggle, {'kind': 'brewing_method'}, name='toggle-brewing-method'),
    path('brewing-methods/custom/', views.add_custom, {'kind': 'brewing_method'}, name='add-brewing-method'),
    path('brewing-methods/custom/remove/', views.remove_custom, {'kind': 'brewing_method'}, name='remove-brewing-method'),

    # Grinders
    path('grinders/toggle/', views.toggle, {'kind': 'grinder'}, name='toggle-grinder'),
    path('grinders/custom/', views.add_custom, {'kind': 'grinder'}, name='add-grinder'),
    path('grinders/custom/remove/', views.remove_custom, {'kind': 'grinder'}, name='remove-grinder'),
]

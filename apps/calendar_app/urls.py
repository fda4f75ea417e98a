from django.urls import path
from . import views

urlpatterns = [
    path('', views.calendar_view, name='calendar'),
    path('create/', views.event_create_view, name='event_create'),
    path('<int:pk>/', views.event_detail_view, name='event_detail'),
    path('<int:pk>/status/', views.event_status_view, name='event_status'),
    path('update/<int:pk>/', views.event_update_view, name='event_update'),
    path('delete/<int:pk>/', views.event_delete_view, name='event_delete'),
    path('move/<int:pk>/', views.event_move_view, name='event_move'),
]

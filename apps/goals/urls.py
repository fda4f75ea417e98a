from django.urls import path
from . import views

urlpatterns = [
    path('create/', views.goal_create_view, name='goal_create'),
    path('numeric/<int:pk>/log/', views.goal_numeric_log_view, name='goal_numeric_log'),
    path('recurring/<int:pk>/complete/', views.goal_recurring_complete_view, name='goal_recurring_complete'),
    path('<int:pk>/', views.goal_detail_view, name='goal_detail'),
    path('update/<int:pk>/', views.goal_update_view, name='goal_update'),
    path('delete/<int:pk>/', views.goal_delete_view, name='goal_delete'),
    path('increment/<int:pk>/', views.goal_increment_view, name='goal_increment'),
]

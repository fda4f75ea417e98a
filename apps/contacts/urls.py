from django.urls import path
from . import views

urlpatterns = [
    path('', views.contact_list_view, name='contact_list'),
    path('create/', views.contact_create_view, name='contact_create'),
    path('<int:pk>/', views.contact_detail_view, name='contact_detail'),
    path('update/<int:pk>/', views.contact_update_view, name='contact_update'),
    path('favorite/<int:pk>/', views.contact_favorite_view, name='contact_favorite'),
    path('delete/<int:pk>/', views.contact_delete_view, name='contact_delete'),
]

from django.urls import path
from . import views

urlpatterns = [
    path('', views.landing_view, name='landing'),
    path('login/', views.login_view, name='login'),
    path('signup/', views.signup_view, name='signup'),
    path('logout/', views.logout_view, name='logout'),
    path('profile/', views.profile_view, name='profile'),
    path('profile/photo/', views.profile_photo_view, name='profile_photo'),
    path('profile/update/', views.profile_update_view, name='profile_update'),
    path('profile/password/', views.profile_password_view, name='profile_password'),
    path('profile/delete/', views.profile_delete_view, name='profile_delete'),
]

# cal_endure/urls.py
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from apps.core import views as core_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('apps.core.urls')),  # landing, auth, profile
    path('dashboard/', core_views.dashboard_view, name='dashboard'),
    path('contacts/', include('apps.contacts.urls')),
    path('calendar/', include('apps.calendar_app.urls')),
    path('goals/', include('apps.goals.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = 'apps.core.views.page_not_found_view'
handler500 = 'apps.core.views.server_error_view'

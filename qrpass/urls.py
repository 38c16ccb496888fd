# URL configuration for qrpass project.
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
	path('admin/', admin.site.urls),
	path('', include('apps.api.urls')),
	path('', include('apps.scanner.urls')),
]

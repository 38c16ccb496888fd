# URLs for scanner app
from django.urls import path
from .views import landing, scan_qr_code

urlpatterns = [
	path('', landing, name='landing'),
	path('scanQrCode', scan_qr_code, name='scan_qr_code'),
]

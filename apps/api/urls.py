# URLs for api app
from django.urls import path
from .views import upload_excel, send_qr_codes, download_students

urlpatterns = [
	path('uploadExcel', upload_excel, name='upload_excel'),
	path('sendQrCodes', send_qr_codes, name='send_qr_codes'),
	path('downloadStudents', download_students, name='download_students'),
]

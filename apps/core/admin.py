from django.contrib import admin

from .models import IngestionFailure, Student, UploadedBatch


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'admission_id', 'phone_number', 'is_approved', 'approved_at')
    list_filter = ('is_approved',)
    search_fields = ('name', 'email', 'admission_id', 'phone_number')


@admin.register(UploadedBatch)
class UploadedBatchAdmin(admin.ModelAdmin):
    list_display = ('filename', 'content_type', 'uploaded_at')
    exclude = ('data',)


@admin.register(IngestionFailure)
class IngestionFailureAdmin(admin.ModelAdmin):
    list_display = ('batch_filename', 'error_message', 'retry_count', 'created_at', 'processed_at')
    list_filter = ('processed_at',)

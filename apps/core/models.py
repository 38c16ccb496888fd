import uuid
from django.db import models


class Student(models.Model):
	name = models.CharField(max_length=255, blank=True)
	email = models.CharField(max_length=255, blank=True)
	admission_id = models.CharField(max_length=100, blank=True)
	phone_number = models.CharField(max_length=50, blank=True)
	is_approved = models.BooleanField(default=False)
	approved_at = models.DateTimeField(null=True, blank=True)
	created_at = models.DateTimeField(auto_now_add=True)

	def __str__(self):
		return f"{self.name} ({self.admission_id})"

	class Meta:
		db_table = 'students'
		indexes = [
			models.Index(fields=['admission_id', 'email'], name='students_identity_idx'),
		]


class UploadedBatch(models.Model):
	"""Spreadsheet blob waiting for the ingestion pipeline"""
	id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
	filename = models.CharField(max_length=255)
	content_type = models.CharField(max_length=100, blank=True)
	data = models.BinaryField()
	uploaded_at = models.DateTimeField(auto_now_add=True)

	def __str__(self):
		return f"{self.filename} ({self.id})"

	class Meta:
		db_table = 'uploaded_batches'


class IngestionFailure(models.Model):
	"""Dead letter log for candidates the ingestion pipeline could not deliver"""
	batch_filename = models.CharField(max_length=255, blank=True)
	payload = models.JSONField()
	error_message = models.TextField()
	retry_count = models.IntegerField(default=0)
	created_at = models.DateTimeField(auto_now_add=True)
	processed_at = models.DateTimeField(null=True, blank=True)

	def __str__(self):
		return f"{self.payload.get('name', '')} - {self.error_message[:50]}"

	class Meta:
		db_table = 'ingestion_failures'

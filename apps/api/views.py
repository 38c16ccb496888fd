# Views for api app

import logging

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpResponse
from rest_framework.decorators import api_view, renderer_classes
from rest_framework.response import Response

from apps.core.exceptions import MissingFileError, MissingFileIdError, NoStudentsFound, StorageError
from apps.core.ingestion import ingest
from apps.core.models import Student, UploadedBatch
from apps.utils.spreadsheet import encode_students
from .renderers import PassthroughRenderer
from .serializers import BatchUploadSerializer, SendQrCodesQuerySerializer

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


@api_view(['POST'])
def upload_excel(request):
    """Store an uploaded spreadsheet until its QR codes are sent"""
    serializer = BatchUploadSerializer(data=request.data)
    if not serializer.is_valid():
        raise MissingFileError()

    upload = serializer.validated_data['file']
    try:
        batch = UploadedBatch.objects.create(
            filename=upload.name,
            content_type=upload.content_type or '',
            data=upload.read(),
        )
    except DatabaseError as exc:
        raise StorageError(f"Error saving file {upload.name}: {exc}") from exc

    logger.info(f"Stored upload {batch.filename} as {batch.pk}")
    return Response({
        'message': 'File uploaded and saved successfully',
        'fileId': str(batch.pk),
    })


@api_view(['GET'])
@renderer_classes([PassthroughRenderer])
def send_qr_codes(request):
    """Email QR codes to every student in a stored spreadsheet"""
    serializer = SendQrCodesQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        raise MissingFileIdError()

    report = ingest(serializer.validated_data['file_id'])

    return HttpResponse(
        'QR codes sent, data saved, and file deleted successfully '
        f'({report.succeeded} sent, {report.failed} failed)',
        content_type='text/plain; charset=utf-8',
    )


@api_view(['GET'])
@renderer_classes([PassthroughRenderer])
def download_students(request):
    """Export every student and their approval state as xlsx"""
    students = list(Student.objects.order_by('id'))
    if not students:
        raise NoStudentsFound()

    content = encode_students(students)
    logger.info(f"Exported {len(students)} students")

    filename = settings.QRPASS_CONFIG['export_filename']
    response = HttpResponse(content, content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename={filename}'
    return response

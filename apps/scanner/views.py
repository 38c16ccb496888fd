# Views for scanner app

import logging

from django.db import DatabaseError
from django.http import HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from apps.api.exceptions import plain_text_response
from apps.api.serializers import ScanQuerySerializer
from apps.core.approval import ScanResult, scan
from apps.core.exceptions import (
    AlreadyScanned, InvalidCredential, MissingScanParametersError, QrPassError, StudentNotFound,
)
from apps.core.identity import StudentIdentity
from apps.utils.qr_utils import verify_identity_signature

logger = logging.getLogger(__name__)


def render_scan_page(request, message, status=200, success=False):
    context = {
        'message': message,
        'color': 'green' if success else 'red',
    }
    return render(request, 'scanner/scan_result.html', context, status=status)


@require_GET
def scan_qr_code(request):
    """Redeem a student's one-time QR code at the checkpoint"""
    serializer = ScanQuerySerializer(data=request.GET)
    if not serializer.is_valid():
        error = MissingScanParametersError()
        return plain_text_response(error.message, error.status_code)

    data = serializer.validated_data
    identity = StudentIdentity(
        name=data['name'],
        email=data['email'],
        admission_id=data['admission_id'],
        phone_number=data['phone_number'],
    )

    try:
        ok, reason = verify_identity_signature(identity, data.get('signature'))
        if not ok:
            logger.warning(f"Rejected scan for {identity.name}: {reason}")
            raise InvalidCredential()

        result = scan(identity)
        if result is ScanResult.NOT_FOUND:
            raise StudentNotFound()
        if result is ScanResult.ALREADY_USED:
            raise AlreadyScanned()
    except QrPassError as exc:
        return render_scan_page(request, exc.message, status=exc.status_code)
    except DatabaseError as exc:
        logger.error(f"Error scanning QR code: {exc}")
        return plain_text_response('Internal Server Error', 500)

    return render_scan_page(request, 'QR code scanned successfully', success=True)


def landing(request):
    return HttpResponse('Landing Page')

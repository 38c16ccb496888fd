import logging

from django.http import HttpResponse
from rest_framework.views import exception_handler

from apps.core.exceptions import QrPassError

logger = logging.getLogger(__name__)

PASSED_HEADERS = ('Allow', 'WWW-Authenticate', 'Retry-After')


def plain_text_response(message, status):
    return HttpResponse(message, status=status, content_type='text/plain; charset=utf-8')


def plain_text_exception_handler(exc, context):
    """Render every API failure as a plain text message with its status"""
    view_name = context['view'].__class__.__name__ if context.get('view') else 'unknown view'

    if isinstance(exc, QrPassError):
        if exc.status_code >= 500:
            logger.error(f"{view_name} failed: {exc.message}", exc_info=exc)
            return plain_text_response('Internal Server Error', exc.status_code)
        return plain_text_response(exc.message, exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)
        return plain_text_response('Internal Server Error', 500)

    detail = response.data.get('detail', response.data) if isinstance(response.data, dict) else response.data
    plain = plain_text_response(str(detail), response.status_code)
    for header in PASSED_HEADERS:
        if response.has_header(header):
            plain[header] = response[header]
    return plain

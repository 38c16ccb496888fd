"""One-time approval of students presenting their QR code.

A student starts unapproved and is approved by the first scan of their
identity. Approval is terminal: later scans report the code as already used
and change nothing.
"""

import enum
import logging

from django.utils import timezone

from .models import Student

logger = logging.getLogger(__name__)


class ScanResult(enum.Enum):
    SUCCESS = 'SUCCESS'
    ALREADY_USED = 'ALREADY_USED'
    NOT_FOUND = 'NOT_FOUND'


def scan(identity):
    """Approve the student matching ``identity`` if it is still unapproved.

    The flag is flipped by a single conditional UPDATE, so two concurrent
    scans of the same identity cannot both observe it unapproved.
    """
    matching = Student.objects.filter(**identity.as_filter())

    updated = matching.filter(is_approved=False).update(
        is_approved=True,
        approved_at=timezone.now(),
    )
    if updated:
        logger.info(f"Approved {identity.name} ({identity.admission_id})")
        return ScanResult.SUCCESS

    if matching.exists():
        logger.info(f"Rejected repeat scan for {identity.name} ({identity.admission_id})")
        return ScanResult.ALREADY_USED

    logger.info(f"No student matches scan for {identity.name} ({identity.admission_id})")
    return ScanResult.NOT_FOUND

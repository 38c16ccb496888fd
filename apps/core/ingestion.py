"""Turn an uploaded spreadsheet into emailed QR codes and student records.

Candidates are processed one at a time. A failure for one candidate is
logged and recorded as an ``IngestionFailure`` and never stops the batch.
"""

import logging
from dataclasses import dataclass

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.utils import timezone

from apps.utils.notifications import EmailNotifier
from apps.utils.qr_utils import build_scan_url, generate_qr_image
from apps.utils.spreadsheet import decode_students

from .exceptions import BatchNotFound, StorageError
from .identity import StudentIdentity
from .models import IngestionFailure, Student, UploadedBatch

logger = logging.getLogger(__name__)


@dataclass
class IngestionReport:
    batch_id: str = ''
    filename: str = ''
    succeeded: int = 0
    failed: int = 0

    @property
    def total(self):
        return self.succeeded + self.failed


def fetch_batch(batch_id):
    try:
        return UploadedBatch.objects.get(pk=batch_id)
    except (UploadedBatch.DoesNotExist, DjangoValidationError, ValueError):
        raise BatchNotFound()
    except DatabaseError as exc:
        raise StorageError(f"Could not load batch {batch_id}: {exc}") from exc


def process_candidate(identity, notifier):
    """Email one candidate their QR code, then persist them unapproved"""
    scan_url = build_scan_url(identity)
    image_png = generate_qr_image(scan_url)
    notifier.send_credential(identity.email, image_png, identity.name)
    return Student.objects.create(**identity.as_filter())


def _record_failure(identity, batch_filename, exc):
    try:
        IngestionFailure.objects.create(
            batch_filename=batch_filename,
            payload=identity.as_filter(),
            error_message=str(exc),
        )
    except DatabaseError as db_exc:
        logger.error(f"Could not record ingestion failure for {identity.name}: {db_exc}")


def ingest(batch_id, notifier=None):
    """Run the pipeline for one uploaded batch and delete the batch afterwards"""
    batch = fetch_batch(batch_id)
    rows = decode_students(bytes(batch.data))
    report = IngestionReport(batch_id=str(batch.pk), filename=batch.filename)

    logger.info(f"Processing {len(rows)} students from {batch.filename}")

    notifier = notifier or EmailNotifier()
    try:
        for row in rows:
            identity = StudentIdentity.from_row(row)
            try:
                process_candidate(identity, notifier)
            except Exception as exc:
                logger.error(f"Error processing student {identity.name}: {exc}")
                _record_failure(identity, batch.filename, exc)
                report.failed += 1
            else:
                logger.info(f"Email sent and data saved for {identity.name}")
                report.succeeded += 1
    finally:
        notifier.close()

    batch.delete()

    log = logger.warning if report.failed else logger.info
    log(f"Batch {batch.filename} done: {report.succeeded} sent, {report.failed} failed, batch deleted")
    return report


def replay_failures(notifier=None):
    """Retry every unprocessed ingestion failure once"""
    report = IngestionReport(filename='ingestion failures')
    pending = IngestionFailure.objects.filter(processed_at__isnull=True).order_by('created_at')

    notifier = notifier or EmailNotifier()
    try:
        for failure in pending:
            identity = StudentIdentity.from_payload(failure.payload)
            try:
                process_candidate(identity, notifier)
            except Exception as exc:
                logger.error(f"Replay failed for {identity.name}: {exc}")
                failure.retry_count += 1
                failure.error_message = str(exc)
                failure.save(update_fields=['retry_count', 'error_message'])
                report.failed += 1
            else:
                failure.processed_at = timezone.now()
                failure.save(update_fields=['processed_at'])
                report.succeeded += 1
    finally:
        notifier.close()

    logger.info(f"Replayed ingestion failures: {report.succeeded} sent, {report.failed} failed")
    return report

"""Unit tests for the one-time approval state machine."""

from __future__ import annotations

from dataclasses import replace

import pytest
from django.db import connection
from django.test.utils import CaptureQueriesContext

from apps.core.approval import ScanResult, scan
from apps.core.models import Student

pytestmark = pytest.mark.django_db


def _create(identity, **extra):
    return Student.objects.create(**identity.as_filter(), **extra)


def test_new_students_start_unapproved(identity) -> None:
    student = _create(identity)

    assert student.is_approved is False
    assert student.approved_at is None


def test_first_scan_approves_student(identity) -> None:
    student = _create(identity)

    result = scan(identity)

    student.refresh_from_db()
    assert result is ScanResult.SUCCESS
    assert student.is_approved is True
    assert student.approved_at is not None


def test_repeat_scans_are_already_used_and_change_nothing(identity) -> None:
    student = _create(identity)
    scan(identity)
    student.refresh_from_db()
    approved_at = student.approved_at

    results = [scan(identity) for _ in range(3)]

    student.refresh_from_db()
    assert results == [ScanResult.ALREADY_USED] * 3
    assert student.is_approved is True
    assert student.approved_at == approved_at


def test_scan_of_unknown_identity_is_not_found(identity) -> None:
    assert scan(identity) is ScanResult.NOT_FOUND


@pytest.mark.parametrize("field", ["name", "email", "admission_id", "phone_number"])
def test_scan_requires_exact_match_on_every_field(identity, field) -> None:
    _create(identity)

    result = scan(replace(identity, **{field: "other"}))

    assert result is ScanResult.NOT_FOUND
    assert Student.objects.filter(is_approved=True).count() == 0


def test_scan_consumes_identity_shared_by_duplicate_records(identity) -> None:
    """A student ingested twice is approved once for both records."""
    _create(identity)
    _create(identity)

    assert scan(identity) is ScanResult.SUCCESS
    assert scan(identity) is ScanResult.ALREADY_USED
    assert Student.objects.filter(is_approved=False).count() == 0


def test_scan_does_not_succeed_after_stale_approval(identity) -> None:
    """A record approved by another writer is never approved a second time."""
    student = _create(identity)
    Student.objects.filter(pk=student.pk).update(is_approved=True)

    assert scan(identity) is ScanResult.ALREADY_USED
    student.refresh_from_db()
    assert student.approved_at is None


def test_scan_approves_with_a_single_conditional_update(identity) -> None:
    """The flag is flipped in one UPDATE guarded on the flag, never read first."""
    _create(identity)

    with CaptureQueriesContext(connection) as queries:
        result = scan(identity)

    first_sql = queries.captured_queries[0]["sql"]
    where_clause = first_sql.upper().split("WHERE", 1)[1]
    assert result is ScanResult.SUCCESS
    assert first_sql.upper().startswith("UPDATE")
    assert "IS_APPROVED" in where_clause
    assert len(queries.captured_queries) == 1

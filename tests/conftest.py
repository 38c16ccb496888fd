"""Shared fixtures for qrpass tests."""

from __future__ import annotations

from io import BytesIO

import pytest
from openpyxl import Workbook

from apps.core.identity import StudentIdentity
from apps.core.models import UploadedBatch

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
HEADER = ["Name", "Email", "Admission ID", "Phone Number"]


def build_workbook(*rows) -> bytes:
    """Write rows to an in-memory xlsx; None cells are left empty."""
    workbook = Workbook()
    worksheet = workbook.active
    for row_index, row in enumerate(rows, start=1):
        for column_index, value in enumerate(row, start=1):
            if value is not None:
                worksheet.cell(row=row_index, column=column_index, value=value)
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def qrpass_settings(settings):
    settings.QR_SECRET = None
    settings.QRPASS_CONFIG = {
        **settings.QRPASS_CONFIG,
        "base_url": "https://pass.example.edu/",
    }
    return settings


@pytest.fixture
def make_xlsx():
    def _make(*students, header=HEADER):
        return build_workbook(header, *students)

    return _make


@pytest.fixture
def make_batch(make_xlsx):
    def _make(*students, filename="students.xlsx"):
        return UploadedBatch.objects.create(
            filename=filename,
            content_type=XLSX_CONTENT_TYPE,
            data=make_xlsx(*students),
        )

    return _make


@pytest.fixture
def identity() -> StudentIdentity:
    return StudentIdentity(name="A", email="a@x.com", admission_id="1", phone_number="555")


class RecordingNotifier:
    """Notifier stand-in that records deliveries and fails for chosen addresses."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.sent = []
        self.closed = False

    def send_credential(self, address, image_png, display_name):
        if address in self.failing:
            raise RuntimeError(f"mailbox unavailable: {address}")
        self.sent.append((address, image_png, display_name))

    def close(self):
        self.closed = True


@pytest.fixture
def recording_notifier():
    return RecordingNotifier

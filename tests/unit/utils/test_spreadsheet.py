"""Unit tests for the student spreadsheet codec."""

from __future__ import annotations

from io import BytesIO
from types import SimpleNamespace

import pytest
from openpyxl import load_workbook

from apps.core.exceptions import SpreadsheetError
from apps.utils.spreadsheet import StudentRow, decode_students, encode_students


def _student(name, email, admission_id, phone_number, is_approved=False):
    return SimpleNamespace(
        name=name,
        email=email,
        admission_id=admission_id,
        phone_number=phone_number,
        is_approved=is_approved,
    )


def test_decode_maps_columns_positionally_and_skips_header(make_xlsx) -> None:
    """Row 1 is dropped and columns 1-4 become the identity fields."""
    data = make_xlsx(["A", "a@x.com", "1", "555"], ["B", "b@x.com", "2", "556"])

    rows = decode_students(data)

    assert rows == [
        StudentRow("A", "a@x.com", "1", "555"),
        StudentRow("B", "b@x.com", "2", "556"),
    ]


def test_decode_drops_first_row_even_when_it_is_data(make_xlsx) -> None:
    """Header detection is positional, not content based."""
    data = make_xlsx(["B", "b@x.com", "2", "556"], header=["A", "a@x.com", "1", "555"])

    rows = decode_students(data)

    assert [row.name for row in rows] == ["B"]


def test_decode_returns_cell_values_untouched(make_xlsx) -> None:
    """Numeric cells and missing cells flow through without coercion."""
    data = make_xlsx(["C", "c@x.com", 7, None])

    (row,) = decode_students(data)

    assert row.admission_id == 7
    assert row.phone_number is None
    assert row.approved is None


def test_decode_skips_completely_empty_rows(make_xlsx) -> None:
    data = make_xlsx(["A", "a@x.com", "1", "555"], [None, None, None, None], ["B", "b@x.com", "2", "556"])

    rows = decode_students(data)

    assert [row.name for row in rows] == ["A", "B"]


def test_decode_rejects_bytes_that_are_not_a_workbook() -> None:
    with pytest.raises(SpreadsheetError):
        decode_students(b"name,email\nA,a@x.com\n")


def test_encode_writes_fixed_header_and_yes_no_flags() -> None:
    data = encode_students([
        _student("A", "a@x.com", "1", "555", is_approved=True),
        _student("B", "b@x.com", "2", "556"),
    ])

    worksheet = load_workbook(BytesIO(data)).active
    values = [list(row) for row in worksheet.iter_rows(values_only=True)]

    assert worksheet.title == "Students"
    assert values[0] == ["Name", "Email", "Admission ID", "Phone Number", "Approved"]
    assert worksheet["A1"].font.bold
    assert values[1] == ["A", "a@x.com", "1", "555", "Yes"]
    assert values[2] == ["B", "b@x.com", "2", "556", "No"]


def test_encode_then_decode_preserves_fields_and_approval_text() -> None:
    """Exported students read back with the same values and Yes/No flags."""
    students = [
        _student("Ann Lee", "ann@x.com", "A-17", "+1 555 0100", is_approved=True),
        _student("Bo", "bo@x.com", "A-18", "555 0101"),
    ]

    rows = decode_students(encode_students(students))

    assert rows == [
        StudentRow("Ann Lee", "ann@x.com", "A-17", "+1 555 0100", "Yes"),
        StudentRow("Bo", "bo@x.com", "A-18", "555 0101", "No"),
    ]

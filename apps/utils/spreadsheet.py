# Spreadsheet utilities

from dataclasses import dataclass
from io import BytesIO
from typing import Any, Iterable, List, Optional
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.utils.exceptions import InvalidFileException

from apps.core.exceptions import SpreadsheetError

EXPORT_COLUMNS = [
    ('Name', 20),
    ('Email', 30),
    ('Admission ID', 15),
    ('Phone Number', 15),
    ('Approved', 10),
]


@dataclass
class StudentRow:
    """One data row of a student spreadsheet, cells as read"""

    name: Any = None
    email: Any = None
    admission_id: Any = None
    phone_number: Any = None
    approved: Optional[Any] = None


def decode_students(data: bytes) -> List[StudentRow]:
    """Read student rows from the first worksheet of an xlsx file.

    Row 1 is always treated as the header and dropped. Columns 1-4 map to
    name, email, admission id and phone number; column 5 to the approval
    text written by ``encode_students``. Values are returned untouched.
    """
    try:
        workbook = load_workbook(BytesIO(data), read_only=True, data_only=True)
    except (BadZipFile, InvalidFileException, KeyError, OSError, ValueError) as exc:
        raise SpreadsheetError(f"Could not read spreadsheet: {exc}") from exc

    try:
        worksheet = workbook.worksheets[0]
        rows = []
        for values in worksheet.iter_rows(min_row=2, max_col=5, values_only=True):
            if all(value is None for value in values):
                continue
            cells = list(values) + [None] * (5 - len(values))
            rows.append(StudentRow(*cells[:5]))
        return rows
    finally:
        workbook.close()


def encode_students(students: Iterable[Any]) -> bytes:
    """Write students to a single-sheet xlsx file and return its bytes"""
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = 'Students'

    worksheet.append([header for header, _ in EXPORT_COLUMNS])
    for cell in worksheet[1]:
        cell.font = Font(bold=True)
    for index, (_, width) in enumerate(EXPORT_COLUMNS):
        worksheet.column_dimensions[chr(ord('A') + index)].width = width

    for student in students:
        worksheet.append([
            student.name,
            student.email,
            student.admission_id,
            student.phone_number,
            'Yes' if student.is_approved else 'No',
        ])

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()

"""Error taxonomy shared by the API, the scanner and the ingestion pipeline.

Every error carries the HTTP status it maps to and a plain message that is
safe to show to the caller.
"""


class QrPassError(Exception):
    """Base exception for all qrpass failures."""

    status_code = 500
    default_message = 'Internal Server Error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(QrPassError):
    """Required input is missing or malformed."""

    status_code = 400
    default_message = 'Invalid request'


class NotFoundError(QrPassError):
    """A batch or student referenced by the caller does not exist."""

    status_code = 404
    default_message = 'Not found'


class ConflictError(QrPassError):
    """The request conflicts with state that can no longer change."""

    status_code = 400
    default_message = 'Conflict'


class ExternalServiceError(QrPassError):
    """Database, mail or spreadsheet failure."""

    status_code = 500
    default_message = 'Internal Server Error'


class MissingFileError(ValidationError):
    default_message = 'No file uploaded'


class MissingFileIdError(ValidationError):
    default_message = 'File ID is required'


class MissingScanParametersError(ValidationError):
    default_message = 'Name, email, admissionId, and phoneNumber are required'


class InvalidCredential(ValidationError):
    default_message = 'Invalid QR code'


class BatchNotFound(NotFoundError):
    default_message = 'File not found'


class StudentNotFound(NotFoundError):
    default_message = 'Student not Found'


class NoStudentsFound(NotFoundError):
    default_message = 'No students found'


class AlreadyScanned(ConflictError):
    default_message = 'QR code already scanned'


class StorageError(ExternalServiceError):
    pass


class SpreadsheetError(ExternalServiceError):
    pass


class NotificationError(ExternalServiceError):
    pass

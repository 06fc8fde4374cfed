from enum import Enum


class FileOrigin(str, Enum):
    """Where a stored file came from."""

    IMPORT_CSV = "import_csv"
    EXPORT_CSV = "export_csv"
    USER_UPLOAD = "user_upload"


class ErrorType(str, Enum):
    """Business-rule error kinds reported in result envelopes."""

    MAX_SIZE_EXCEEDED = "max_size_exceeded"

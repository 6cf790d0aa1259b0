from .errors import RecordError, RecordNotFoundError, RecordValidationError
from .record_service import RecordService
from .validation import NombreAccepted, NombreRejected, validate_nombre

__all__ = [
    "RecordError",
    "RecordNotFoundError",
    "RecordValidationError",
    "RecordService",
    "NombreAccepted",
    "NombreRejected",
    "validate_nombre",
]

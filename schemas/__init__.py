from .record import NOMBRE_MIN_LENGTH, Nombre, NombreCandidate, RecordPayload, RecordResponse

__all__ = [
    "NOMBRE_MIN_LENGTH",
    "Nombre",
    "NombreCandidate",
    "RecordPayload",
    "RecordResponse",
]

from .models import Record
from .record_repository import RecordRepository, parse_record_id

__all__ = [
    "Record",
    "RecordRepository",
    "parse_record_id",
]

from __future__ import annotations

import re
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from infrastructure.records.models import Record

_ID_PREFIX = re.compile(r"\s*([+-]?)(0[xX])?")
_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def parse_record_id(raw: object) -> Optional[int]:
    """Parse the leading integer of a path id, ignoring trailing characters.

    ``"3abc"`` yields 3, ``"0x1A"`` yields 26 and ``"abc"`` yields ``None``.
    Only ASCII digits count.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if raw is None:
        return None
    text = str(raw)
    prefix = _ID_PREFIX.match(text)
    sign, hex_prefix = prefix.group(1), prefix.group(2)
    digits_pattern = _HEX_DIGITS if hex_prefix else _DECIMAL_DIGITS
    digits = digits_pattern.match(text, prefix.end())
    if not digits:
        return None
    try:
        value = int(digits.group(0), 16 if hex_prefix else 10)
    except ValueError:
        # Too many digits to convert; no collection holds such an id
        return None
    return -value if sign == "-" else value


class RecordRepository:
    """Ordered in-memory collection of records for a single resource."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: List[Record] = [replace(record) for record in records]
        self._lock = threading.Lock()
        self._next_id = max((record.id for record in self._records), default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list_all(self) -> List[Record]:
        with self._lock:
            return list(self._records)

    def find_by_id(self, record_id: Optional[int]) -> Optional[Record]:
        if record_id is None:
            return None
        with self._lock:
            return self._find(record_id)

    def create(self, *, nombre: str) -> Record:
        with self._lock:
            record = Record(id=self._next_id, nombre=nombre)
            self._next_id += 1
            self._records.append(record)
            return record

    def update_nombre(self, record_id: int, *, nombre: str) -> Optional[Record]:
        with self._lock:
            record = self._find(record_id)
            if record is None:
                return None
            record.nombre = nombre
            return record

    def delete(self, record_id: int) -> Optional[Record]:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    return self._records.pop(index)
            return None

    def _find(self, record_id: int) -> Optional[Record]:
        return next((record for record in self._records if record.id == record_id), None)

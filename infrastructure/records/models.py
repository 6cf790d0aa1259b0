from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Record:
    """One entry of a resource collection (a usuario or a producto)."""

    id: int
    nombre: str

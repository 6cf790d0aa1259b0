from __future__ import annotations

from typing import List

from infrastructure.records.models import Record

DEFAULT_USUARIOS = (
    (1, "Juan"),
    (2, "Karen"),
    (3, "Diego"),
    (4, "María"),
)

DEFAULT_PRODUCTOS = (
    (1, "Ratón inalámbrico"),
    (2, "Teclado mecánico"),
    (3, 'Monitor 24"'),
    (4, "Cable HDMI 6ft"),
)


def seed_usuarios() -> List[Record]:
    return [Record(id=record_id, nombre=nombre) for record_id, nombre in DEFAULT_USUARIOS]


def seed_productos() -> List[Record]:
    return [Record(id=record_id, nombre=nombre) for record_id, nombre in DEFAULT_PRODUCTOS]

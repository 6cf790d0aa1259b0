from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, StringConstraints

from infrastructure.records.models import Record

NOMBRE_MIN_LENGTH = 3

Nombre = Annotated[StrictStr, StringConstraints(min_length=NOMBRE_MIN_LENGTH)]


class NombreCandidate(BaseModel):
    """The ``nombre`` constraint: a required string of at least 3 characters."""

    nombre: Nombre


class RecordPayload(BaseModel):
    """Body of create/update requests.

    ``nombre`` is accepted loosely here and checked against ``NombreCandidate``
    by the service, so callers get its message instead of a schema error.
    """

    model_config = ConfigDict(extra="allow")

    nombre: Any = Field(None, description="Display name, at least 3 characters")


class RecordResponse(BaseModel):
    id: int
    nombre: str

    @classmethod
    def from_record(cls, record: Record) -> "RecordResponse":
        return cls(id=record.id, nombre=record.nombre)

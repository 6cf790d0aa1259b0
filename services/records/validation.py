from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from pydantic import ValidationError

from schemas.record import NOMBRE_MIN_LENGTH, NombreCandidate

NOMBRE_FIELD = "nombre"

_LABEL = f'"{NOMBRE_FIELD}"'
_MESSAGES = {
    "missing": f"{_LABEL} is required",
    "string_type": f"{_LABEL} must be a string",
    "string_too_short": f"{_LABEL} length must be at least {NOMBRE_MIN_LENGTH} characters long",
}
_EMPTY_MESSAGE = f"{_LABEL} is not allowed to be empty"


@dataclass(frozen=True)
class NombreAccepted:
    value: str
    valid: Literal[True] = True


@dataclass(frozen=True)
class NombreRejected:
    message: str
    valid: Literal[False] = False


NombreValidation = Union[NombreAccepted, NombreRejected]


def validate_nombre(candidate: Any) -> NombreValidation:
    """Check ``candidate`` against ``NombreCandidate``; ``None`` means absent.

    Messages name the field and the violated constraint so they can be sent
    back to the caller as-is.
    """
    data = {} if candidate is None else {NOMBRE_FIELD: candidate}
    try:
        accepted = NombreCandidate.model_validate(data)
    except ValidationError as exc:
        return NombreRejected(_rejection_message(exc))
    return NombreAccepted(accepted.nombre)


def _rejection_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    if error["type"] == "string_too_short" and error.get("input") == "":
        return _EMPTY_MESSAGE
    return _MESSAGES.get(error["type"], f"{_LABEL} {error['msg']}")

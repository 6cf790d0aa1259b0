import pytest
from pydantic import ValidationError

from schemas import NombreCandidate
from services.records import NombreAccepted, NombreRejected, validate_nombre


@pytest.mark.parametrize("value", ["Ana", "Karina", "   ", 'Monitor 24"'])
def test_accepts_strings_of_three_or_more_characters(value):
    result = validate_nombre(value)

    assert isinstance(result, NombreAccepted)
    assert result.valid is True
    assert result.value == value


def test_missing_nombre_is_required():
    result = validate_nombre(None)

    assert isinstance(result, NombreRejected)
    assert result.valid is False
    assert result.message == '"nombre" is required'


def test_short_nombre_reports_minimum_length():
    result = validate_nombre("Ka")

    assert isinstance(result, NombreRejected)
    assert result.message == '"nombre" length must be at least 3 characters long'


def test_empty_nombre_is_rejected():
    result = validate_nombre("")

    assert isinstance(result, NombreRejected)
    assert result.message == '"nombre" is not allowed to be empty'


@pytest.mark.parametrize("value", [123, ["Ana"], {"nombre": "Ana"}, True])
def test_non_string_nombre_is_rejected(value):
    result = validate_nombre(value)

    assert isinstance(result, NombreRejected)
    assert result.message == '"nombre" must be a string'


def test_nombre_candidate_schema_enforces_constraint():
    assert NombreCandidate(nombre="Ana").nombre == "Ana"

    with pytest.raises(ValidationError) as exc_info:
        NombreCandidate(nombre="Ka")

    assert exc_info.value.errors()[0]["type"] == "string_too_short"

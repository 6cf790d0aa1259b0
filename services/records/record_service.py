from __future__ import annotations

import logging
from typing import Any, List

from infrastructure.context import ResourceSpec
from infrastructure.records.models import Record
from infrastructure.records.record_repository import RecordRepository, parse_record_id
from services.records.errors import RecordNotFoundError, RecordValidationError
from services.records.validation import NombreRejected, validate_nombre

logger = logging.getLogger(__name__)


class RecordService:
    """CRUD operations over one resource collection."""

    def __init__(self, repository: RecordRepository, resource: ResourceSpec) -> None:
        self.repository = repository
        self.resource = resource

    def list_records(self) -> List[Record]:
        return self.repository.list_all()

    def get_record(self, raw_id: Any) -> Record:
        record = self.repository.find_by_id(parse_record_id(raw_id))
        if record is None:
            raise self._not_found(raw_id, exclaim=True)
        return record

    def create_record(self, nombre: Any) -> Record:
        accepted = self._validated(nombre)
        record = self.repository.create(nombre=accepted)
        logger.info("Created %s id=%s", self.resource.singular, record.id)
        return record

    def update_record(self, raw_id: Any, nombre: Any) -> Record:
        record_id = parse_record_id(raw_id)
        if self.repository.find_by_id(record_id) is None:
            raise self._not_found(raw_id)
        accepted = self._validated(nombre)
        record = self.repository.update_nombre(record_id, nombre=accepted)
        if record is None:
            # Removed by a concurrent request between lookup and update
            raise self._not_found(raw_id)
        logger.info("Updated %s id=%s", self.resource.singular, record.id)
        return record

    def delete_record(self, raw_id: Any) -> Record:
        record_id = parse_record_id(raw_id)
        record = self.repository.delete(record_id) if record_id is not None else None
        if record is None:
            raise self._not_found(raw_id)
        logger.info("Deleted %s id=%s", self.resource.singular, record.id)
        return record

    def _validated(self, nombre: Any) -> str:
        result = validate_nombre(nombre)
        if isinstance(result, NombreRejected):
            logger.debug("Rejected %s payload: %s", self.resource.singular, result.message)
            raise RecordValidationError(result.message)
        return result.value

    def _not_found(self, raw_id: Any, *, exclaim: bool = False) -> RecordNotFoundError:
        logger.debug("%s %s not found", self.resource.singular, raw_id)
        suffix = "!" if exclaim else ""
        message = f"{self.resource.article} {self.resource.singular} {raw_id} no se encuentra{suffix}"
        return RecordNotFoundError(message, record_id=raw_id)

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from infrastructure.context import ResourceSpec
from routers.dependencies import record_service_provider
from schemas import RecordPayload, RecordResponse
from services.records import RecordNotFoundError, RecordService, RecordValidationError

# (method, path, handler, summary)
RECORD_ROUTES = (
    ("GET", "", "list", "List all {plural}"),
    ("GET", "/{record_id}", "get", "Get a {singular} by id"),
    ("POST", "", "create", "Create a {singular}"),
    ("PUT", "/{record_id}", "update", "Rename a {singular}"),
    ("DELETE", "/{record_id}", "delete", "Delete a {singular}"),
)


def _nombre(payload: Optional[RecordPayload]):
    return payload.nombre if payload is not None else None


def build_record_router(resource: ResourceSpec) -> APIRouter:
    """Create the CRUD router for one resource, mounted at ``/<plural>``."""
    router = APIRouter(prefix=f"/{resource.plural}")
    get_service = record_service_provider(resource)

    async def list_records(service: RecordService = Depends(get_service)) -> List[RecordResponse]:
        return [RecordResponse.from_record(record) for record in service.list_records()]

    async def get_record(
        record_id: str,
        service: RecordService = Depends(get_service),
    ) -> RecordResponse:
        try:
            record = service.get_record(record_id)
        except RecordNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        return RecordResponse.from_record(record)

    async def create_record(
        payload: Optional[RecordPayload] = Body(None),
        service: RecordService = Depends(get_service),
    ) -> RecordResponse:
        try:
            record = service.create_record(_nombre(payload))
        except RecordValidationError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return RecordResponse.from_record(record)

    async def update_record(
        record_id: str,
        payload: Optional[RecordPayload] = Body(None),
        service: RecordService = Depends(get_service),
    ) -> RecordResponse:
        try:
            record = service.update_record(record_id, _nombre(payload))
        except RecordNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        except RecordValidationError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return RecordResponse.from_record(record)

    async def delete_record(
        record_id: str,
        service: RecordService = Depends(get_service),
    ) -> RecordResponse:
        try:
            record = service.delete_record(record_id)
        except RecordNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        return RecordResponse.from_record(record)

    handlers = {
        "list": (list_records, List[RecordResponse]),
        "get": (get_record, RecordResponse),
        "create": (create_record, RecordResponse),
        "update": (update_record, RecordResponse),
        "delete": (delete_record, RecordResponse),
    }

    for method, path, handler_name, summary in RECORD_ROUTES:
        endpoint, response_model = handlers[handler_name]
        router.add_api_route(
            path,
            endpoint,
            methods=[method],
            response_model=response_model,
            summary=summary.format(plural=resource.plural, singular=resource.singular),
            name=f"{handler_name}_{resource.singular}",
        )
        # Same handler with a trailing slash; the static mount at "/" would
        # otherwise swallow these before slash redirection runs
        router.add_api_route(
            f"{path}/",
            endpoint,
            methods=[method],
            response_model=response_model,
            include_in_schema=False,
            name=f"{handler_name}_{resource.singular}_slash",
        )

    return router

from __future__ import annotations

from typing import Callable

from fastapi import Request

from infrastructure.context import CollectionRegistry, ResourceSpec
from services.records import RecordService


def get_collection_registry(request: Request) -> CollectionRegistry:
    registry = getattr(request.app.state, "collections", None)
    if registry is None:
        raise RuntimeError("Collections are not initialised on the application state")
    return registry


def record_service_provider(resource: ResourceSpec) -> Callable[[Request], RecordService]:
    """Build a dependency that resolves the service for ``resource``."""

    def get_record_service(request: Request) -> RecordService:
        registry = get_collection_registry(request)
        return RecordService(registry.repository_for(resource), resource)

    get_record_service.__name__ = f"get_{resource.plural}_service"
    return get_record_service

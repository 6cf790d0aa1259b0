from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from infrastructure.records.models import Record
from infrastructure.records.record_repository import RecordRepository
from infrastructure.records.setup import seed_productos, seed_usuarios


@dataclass(frozen=True)
class ResourceSpec:
    """Naming for one resource family exposed under ``/api/<plural>``."""

    plural: str
    singular: str
    article: str = "El"


USUARIOS = ResourceSpec(plural="usuarios", singular="usuario")
PRODUCTOS = ResourceSpec(plural="productos", singular="producto")


@dataclass
class CollectionRegistry:
    """Owns one repository per resource; one registry per application instance."""

    repositories: Dict[str, RecordRepository] = field(default_factory=dict)

    @classmethod
    def seeded(
        cls,
        *,
        usuarios: Optional[Iterable[Record]] = None,
        productos: Optional[Iterable[Record]] = None,
    ) -> "CollectionRegistry":
        return cls(
            repositories={
                USUARIOS.plural: RecordRepository(seed_usuarios() if usuarios is None else usuarios),
                PRODUCTOS.plural: RecordRepository(seed_productos() if productos is None else productos),
            }
        )

    def repository_for(self, resource: ResourceSpec) -> RecordRepository:
        try:
            return self.repositories[resource.plural]
        except KeyError as exc:
            raise ValueError(f"No collection registered for '{resource.plural}'") from exc

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from infrastructure.context import CollectionRegistry
from main import create_app


@pytest.fixture
def collections() -> CollectionRegistry:
    return CollectionRegistry.seeded()


@pytest.fixture
def client(collections: CollectionRegistry):
    app = create_app(collections, request_logging=False)
    with TestClient(app) as test_client:
        yield test_client

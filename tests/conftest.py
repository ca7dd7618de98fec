import os
import pytest
from httpx import AsyncClient, ASGITransport
from typing import AsyncGenerator
from unittest.mock import MagicMock

# Set test environment vars before importing app
os.environ["ENVIRONMENT"] = "testing"
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["DB_NAME"] = "doctorPortal_test"

from main import app

# Mock MongoDB
@pytest.fixture
def mock_db(mocker):
    """Replace the shared database handle; each collection is its own MagicMock"""
    mock_instance = MagicMock()

    # Store dynamic collections
    collections = {}

    def collection_func(name):
        if name not in collections:
            collections[name] = MagicMock(name=f"collection:{name}")
        return collections[name]

    mock_instance.__getitem__.side_effect = collection_func

    mocker.patch("core.database.db", mock_instance)
    return mock_instance

@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

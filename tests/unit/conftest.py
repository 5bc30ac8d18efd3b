"""
Global fixtures for all unit tests.

This conftest provides autouse fixtures that prevent real external service calls:
- MongoDB connection attempts (would wait out the server selection timeout)
- Environment variable isolation (prevents credential leakage)

These fixtures apply automatically to ALL tests in tests/unit/.
"""

import os
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

# Set test environment BEFORE any imports so Config does not pick up real values
os.environ["DEBUG_MODE"] = "false"
os.environ["LOG_FORMAT"] = "simple"


@pytest.fixture(autouse=True)
def mock_mongodb():
    """
    Prevent MongoDB connection attempts in all unit tests.

    Sets up the chain client["db"]["collection"] with async driver methods,
    and a ping that succeeds.
    """
    with patch("circulation.common.database.AsyncMongoClient") as mock_client:
        mock_instance = MagicMock()
        mock_db = MagicMock()
        mock_collection = MagicMock()

        mock_instance.admin.command = AsyncMock(return_value={"ok": 1})
        mock_instance.close = AsyncMock()
        mock_instance.drop_database = AsyncMock()
        mock_instance.list_database_names = AsyncMock(return_value=["admin", "local"])

        mock_instance.__getitem__.return_value = mock_db
        mock_db.__getitem__.return_value = mock_collection

        mock_cursor = MagicMock()
        mock_cursor.limit.return_value = mock_cursor
        mock_cursor.to_list = AsyncMock(return_value=[])
        mock_collection.find = MagicMock(return_value=mock_cursor)
        mock_collection.find_one = AsyncMock(return_value=None)

        mock_client.return_value = mock_instance
        yield mock_client


@pytest.fixture
def mock_collection(mock_mongodb):
    """The collection mock behind client[db][collection]."""
    return mock_mongodb.return_value.__getitem__.return_value.__getitem__.return_value


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """
    Isolate test environment from real MongoDB settings.

    Tests that need specific values set them with patch.dict("os.environ", ...).
    """
    for name in (
        "MONGODB_URI",
        "MONGODB_DATABASE",
        "CIRCULATION_COLLECTION",
        "MONGODB_CONNECTION_STRATEGY",
        "MONGODB_TIMEOUT_MS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_repository_singleton(monkeypatch):
    """Start every test without a cached repository instance."""
    monkeypatch.setattr("circulation.common.repositories.config._repository_instance", None)

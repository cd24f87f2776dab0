# Shared pytest configuration and fixtures for all test types
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import AsyncMock, patch

from api.main import app
from common.core.config import settings
from common.providers.document_store.memory_store import MemoryDocumentStore
from packages.payments.models.domain.transaction import TransactionRecord

TEST_ACCESS_TOKEN = "TEST-access-token"


@pytest.fixture(autouse=True)
def relay_settings(monkeypatch):
    """Known provider credentials and no shared secret unless a test sets one."""
    monkeypatch.setattr(settings, "provider_access_token", TEST_ACCESS_TOKEN)
    monkeypatch.setattr(settings, "webhook_shared_secret", None)
    monkeypatch.setattr(settings, "users_collection", "users")
    return settings


@pytest.fixture
def memory_store():
    """In-memory document store wired in place of Firestore."""
    store = MemoryDocumentStore()
    with patch(
        "packages.users.repositories.user_entitlement_repository.get_document_store",
        return_value=store,
    ):
        yield store


@pytest.fixture
def mock_transaction_provider():
    """Mock Mercado Pago provider; tests set get_transaction's return value."""
    provider = AsyncMock()
    provider.get_transaction = AsyncMock(
        return_value=TransactionRecord(
            id="555", status="approved", payer={"email": "a@b.com"}
        )
    )
    with patch(
        "packages.payments.services.transaction_verifier.get_transaction_provider",
        return_value=provider,
    ):
        yield provider


@pytest_asyncio.fixture(scope="function")
async def client(memory_store, mock_transaction_provider):
    """Create a test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

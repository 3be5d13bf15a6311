# tests/conftest.py
import pytest
from httpx import ASGITransport, AsyncClient

from app.core.limiter import limiter
from app.core.storage import InMemoryStore
from app.dependencies import get_store
from app.main import app


@pytest.fixture(scope="function")
def store() -> InMemoryStore:
    """
    Фикстура с чистым хранилищем в памяти для каждого теста.
    """
    return InMemoryStore()


@pytest.fixture(scope="function")
async def client(store: InMemoryStore):
    """
    HTTP-клиент к приложению. Хранилище подменяется на in-memory,
    лимитер отключается, чтобы не мешать повторным запросам.
    """
    app.dependency_overrides[get_store] = lambda: store
    limiter.enabled = False
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True

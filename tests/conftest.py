# tests/conftest.py
import httpx
import pytest
from fastapi.testclient import TestClient

from addresscompare.entrypoints.fastapi_app import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app):
    """
    In-process ASGI client; no server or network involved.
    """
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c

"""Pytest configuration and fixtures for jsonapi_core.

Unit fixtures provide a post model with an author relationship. HTTP tests
use a throwaway FastAPI app wired with register_exception_handlers.
"""

from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from jsonapi_core.core.config import get_settings
from jsonapi_core.core.exception_handlers import register_exception_handlers
from jsonapi_core.core.responses import JsonApiResponse
from jsonapi_core.resources.relation import Relation

BASE_URL = "http://localhost/api/v1/posts/1"

_POSTS = {
    "1": {"author": {"name": "John Doe"}, "comments": []},
}


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear JSONAPI_* env and the settings cache around each test."""
    monkeypatch.delenv("JSONAPI_RELATIONSHIPS_SEGMENT", raising=False)
    monkeypatch.delenv("JSONAPI_DEBUG", raising=False)
    monkeypatch.delenv("JSONAPI_EXPOSE_ERROR_DETAILS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def model() -> SimpleNamespace:
    """Post model with an author relationship."""
    return SimpleNamespace(author=SimpleNamespace(name="John Doe"))


def _create_test_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/posts/{post_id}/relationships/{field}")
    async def show_relationship(post_id: str, field: str, uri: str | None = None) -> JsonApiResponse:
        relation = Relation(
            _POSTS.get(post_id, {}),
            f"http://test/posts/{post_id}",
            field,
        ).always_show_data()
        if uri is not None:
            relation.with_uri_field_name(uri)
        return JsonApiResponse(content=relation.to_dict())

    @app.get("/boom")
    async def boom() -> JsonApiResponse:
        raise RuntimeError("kaboom")

    return app


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the test app (ASGI)."""
    transport = ASGITransport(app=_create_test_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

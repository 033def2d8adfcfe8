import pytest
from httpx import ASGITransport, AsyncClient

from flashembed.main import create_app


@pytest.mark.anyio
async def test_health_returns_200_and_ok() -> None:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_home_renders_html() -> None:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/")
    assert resp.status_code == 200
    assert "<title>" in resp.text
    assert "<flashmessages>" not in resp.text

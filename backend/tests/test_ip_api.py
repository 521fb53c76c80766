import pytest
from fastapi import Request
from httpx import AsyncClient

from clientip.main import app


@pytest.mark.asyncio
class TestWhoami:
    async def test_direct_connection(self, client: AsyncClient):
        resp = await client.get("/api/v1/ip")
        assert resp.status_code == 200
        assert resp.json() == {
            "client_address": "203.0.113.50",
            "client_public_address": "203.0.113.50",
            "remote_address": "203.0.113.50",
            "forwarded_for": [],
            "is_local": False,
        }

    async def test_behind_proxy(self, proxied_client: AsyncClient):
        resp = await proxied_client.get(
            "/api/v1/ip", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.2"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["client_address"] == "203.0.113.7"
        assert data["client_public_address"] == "203.0.113.7"
        assert data["remote_address"] == "10.0.0.1"
        assert data["forwarded_for"] == ["203.0.113.7", "10.0.0.2"]
        assert data["is_local"] is False

    async def test_directions_disagree(self, proxied_client: AsyncClient):
        resp = await proxied_client.get(
            "/api/v1/ip",
            headers={"X-Forwarded-For": "192.168.5.45, 210.45.9.1, 89.5.6.1"},
        )
        data = resp.json()
        assert data["client_address"] == "192.168.5.45"
        assert data["client_public_address"] == "89.5.6.1"
        assert data["is_local"] is True

    async def test_x_real_ip(self, proxied_client: AsyncClient):
        resp = await proxied_client.get(
            "/api/v1/ip", headers={"X-Real-IP": " 198.51.100.4 "}
        )
        data = resp.json()
        assert data["client_address"] == "198.51.100.4"
        assert data["client_public_address"] == "198.51.100.4"

    async def test_loopback_has_no_public_address(self, loopback_client: AsyncClient):
        resp = await loopback_client.get("/api/v1/ip")
        data = resp.json()
        assert data["client_address"] == "127.0.0.1"
        assert data["client_public_address"] == ""
        assert data["is_local"] is True


@pytest.mark.asyncio
class TestClassify:
    @pytest.mark.parametrize(
        "address,is_local,is_public",
        [
            ("10.1.2.3", True, False),
            ("172.31.0.1", True, False),
            ("172.32.0.1", False, True),
            ("::1", True, False),
            ("8.8.8.8", False, True),
            ("not-an-ip", False, False),
        ],
    )
    async def test_classify(self, client: AsyncClient, address, is_local, is_public):
        resp = await client.get(f"/api/v1/ip/classify/{address}")
        assert resp.status_code == 200
        assert resp.json() == {
            "address": address,
            "is_local": is_local,
            "is_public": is_public,
        }


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_middleware_logs_resolved_addresses(client: AsyncClient, caplog):
    caplog.set_level("DEBUG", logger="clientip.middleware")
    await client.get("/health", headers={"X-Forwarded-For": "198.51.100.9"})
    assert "client='198.51.100.9'" in caplog.text


@pytest.mark.asyncio
async def test_middleware_stores_resolved_addresses_on_state(
    proxied_client: AsyncClient,
):
    seen = {}

    @app.get("/_test/state")
    async def read_state(request: Request):
        seen["client"] = request.state.client_address
        seen["public"] = request.state.client_public_address
        return {}

    try:
        resp = await proxied_client.get(
            "/_test/state", headers={"X-Forwarded-For": "192.168.5.45, 89.5.6.1"}
        )
    finally:
        app.router.routes.pop()
    assert resp.status_code == 200
    assert seen == {"client": "192.168.5.45", "public": "89.5.6.1"}

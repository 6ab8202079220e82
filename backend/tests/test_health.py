"""Health check and basic app tests."""
import pytest


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


@pytest.mark.asyncio
async def test_openapi_schema(client):
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "FAQ API"
    assert "/faqs/{faq_id}" in schema["paths"]
    assert "/faqs_by_tag/{tag}" in schema["paths"]
    assert "requestBody" in schema["paths"]["/tags/{tag_id}"]["put"]


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client):
    response = await client.options(
        "/faqs",
        headers={
            "Origin": "http://example.org",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_simple_request_gets_cors_header(client):
    response = await client.get("/tags", headers={"Origin": "http://elsewhere.test"})
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_request_id_header_is_generated(client):
    response = await client.get("/health")
    assert response.headers["x-request-id"]


@pytest.mark.asyncio
async def test_request_id_header_is_echoed(client):
    response = await client.get("/faqs/1", headers={"X-Request-ID": "req-42"})
    assert response.status_code == 404
    assert response.headers["x-request-id"] == "req-42"

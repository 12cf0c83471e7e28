from fastapi.testclient import TestClient

from server import server

client = TestClient(server.handler)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_server_routes_include_lang():
    paths = {route.path for route in server.handler.routes}
    assert "/lang/available-locales" in paths
    assert "/lang/{locale}" in paths


def test_server_cors_configuration():
    middleware_classes = [m.cls.__name__ for m in server.handler.user_middleware]
    assert "CORSMiddleware" in middleware_classes


def test_unmapped_route_returns_404():
    response = client.get("/some/unmapped/path")
    assert response.status_code == 404

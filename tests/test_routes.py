"""
HTTP transport
"""
import pytest
from fastapi.testclient import TestClient

from brandstorm_domains.api.tools import DomainTools
from brandstorm_domains.main import create_app
from tests.conftest import available, provider_error


@pytest.fixture
def client(domain_service):
    return TestClient(create_app(tools=DomainTools(domain_service)))


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    response = client.get("/api/health/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["provider"]["name"] == "fake"
    assert body["tld_count"] == 24


def test_liveness(client):
    assert client.get("/api/health/live").json()["status"] == "alive"


def test_provider_probe(client):
    body = client.get("/api/health/provider").json()

    assert body == {"provider": "fake", "connected": True, "timestamp": body["timestamp"]}


def test_check_single_domain(client, fake_provider):
    fake_provider.statuses["pickle.com"] = available("pickle.com")

    response = client.post("/api/domains/check", json={"domain": "pickle.com"})

    assert response.status_code == 200
    assert response.json()["text"] == "pickle.com is ✓ AVAILABLE"


def test_validation_error_is_400(client, fake_provider):
    response = client.post(
        "/api/domains/check",
        json={"domain": "pickle.com", "domains": ["brine.io"]}
    )

    assert response.status_code == 400
    assert response.json()["is_error"] is True
    assert fake_provider.calls == []


def test_provider_error_is_502(client, fake_provider):
    fake_provider.statuses["pickle.com"] = provider_error()

    response = client.post("/api/domains/check", json={"domain": "pickle.com"})

    assert response.status_code == 502
    assert response.json()["data"]["error"] == "availability_provider_error"


def test_suggest(client):
    response = client.post(
        "/api/domains/suggest",
        json={"description": "artisanal pickle factory", "max_suggestions": 5}
    )

    assert response.status_code == 200
    assert response.json()["text"].startswith("DOMAIN SUGGESTIONS")


def test_quick_suggest(client):
    response = client.post("/api/domains/quick-suggest", json={"description": "pickle shop"})

    assert response.status_code == 200
    assert response.json()["data"]["search_mode"] == "standard"


def test_explore_validation(client):
    response = client.post(
        "/api/domains/explore",
        json={"description": "pickle shop", "batch_size": 1}
    )

    assert response.status_code == 400


def test_list_tools(client):
    response = client.get("/api/domains/tools")

    assert response.status_code == 200
    assert len(response.json()["data"]["tools"]) == 4


def test_missing_service_is_503():
    client = TestClient(create_app())

    assert client.get("/api/domains/tools").status_code == 503

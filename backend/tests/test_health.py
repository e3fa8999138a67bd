"""Health, readiness and liveness probes."""

from loginnotify import __version__


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == __version__
    assert data["uptime_seconds"] >= 0


def test_live(client):
    response = client.get("/api/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


def test_ready_when_configured(client):
    response = client.get("/api/health/ready")

    assert response.json() == {
        "ready": True,
        "checks": {"telegram_notifier": True, "telegram_configured": True},
    }


def test_not_ready_without_secrets(make_client, make_settings):
    client = make_client(make_settings(token=None))

    response = client.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json()["ready"] is False
    assert response.json()["checks"]["telegram_configured"] is False


def test_request_id_header_is_accepted(client):
    response = client.get("/api/health/live", headers={"x-request-id": "abc123"})

    assert response.status_code == 200

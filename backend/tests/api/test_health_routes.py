"""Health & readiness probes."""

from insurance_advisor.main import app


async def test_health_returns_ok(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "OK"}


async def test_ready_when_database_reachable(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_not_ready_without_database_manager(client, monkeypatch):
    monkeypatch.setattr(app.state, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"

"""Health probes and the landing page."""

from exercise_tracker import __version__


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "exercise-tracker", "version": __version__,
    }


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}


async def test_readiness_without_database(client, monkeypatch):
    import exercise_tracker.infrastructure.database as db_module

    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_landing_page_is_html(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "Exercise tracker" in res.text

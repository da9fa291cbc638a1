"""
Health check service and endpoint tests.
"""
from unittest.mock import AsyncMock, patch
from httpx import ASGITransport, AsyncClient

from core.application import create_app, reset_application
from core.config import Settings
from core.database.manager import DatabaseManager
from apps.system.checks import check_cache_active, check_connection_active
from apps.system.service import SystemService


async def test_connection_check_passes_when_connected(db_manager):
    result = await check_connection_active()
    assert result.ok is True
    assert result.name == "database"
    assert result.detail == "sqlite"


async def test_connection_check_fails_when_not_connected():
    result = await check_connection_active()
    assert result.ok is False
    assert result.detail == "Connection not active"


async def test_cache_check_skipped_when_disabled(db_manager):
    assert await check_cache_active() is None


async def test_service_report_ok(app, db_manager):
    report = await SystemService().run_checks()
    assert report.ok
    assert report.environment == "testing"
    assert [check.name for check in report.checks] == ["application", "database"]
    assert report.failed() == []


async def test_service_report_application_missing(db_manager):
    reset_application()
    report = await SystemService().run_checks()
    assert report.status == "unavailable"
    assert [check.name for check in report.failed()] == ["application"]


async def test_service_report_includes_cache_when_enabled(app):
    settings = Settings(_env_file=None, DB_URL="sqlite+aiosqlite:///:memory:", REDIS_ENABLED=True)
    manager = DatabaseManager.get_instance(settings)
    await manager.sql.connect()
    try:
        with patch.object(manager.redis, "is_active", AsyncMock(return_value=False)):
            report = await SystemService(settings).run_checks()
    finally:
        await manager.sql.disconnect()

    assert [check.name for check in report.checks] == ["application", "database", "cache"]
    assert [check.name for check in report.failed()] == ["cache"]


async def test_live_endpoint(client: AsyncClient):
    response = await client.get("/health/live")
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 200
    assert body["data"]["ok"] is True


async def test_ready_endpoint_ok(client: AsyncClient):
    response = await client.get("/health/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 200
    assert body["data"]["status"] == "ok"
    assert {check["name"] for check in body["data"]["checks"]} == {"application", "database"}


async def test_ready_endpoint_unavailable_when_database_down(client: AsyncClient, db_manager):
    await db_manager.sql.disconnect()

    response = await client.get("/health/ready")
    assert response.status_code == 503
    body = response.json()
    assert body["code"] == 503
    assert "database" in body["message"]
    assert body["data"]["status"] == "unavailable"


async def test_trace_id_is_propagated(client: AsyncClient):
    response = await client.get("/health/live", headers={"X-Trace-ID": "trace-123"})
    assert response.headers["X-Trace-ID"] == "trace-123"

    response = await client.get("/health/live")
    assert response.headers["X-Trace-ID"]


async def test_ready_endpoint_reports_app_settings():
    settings = Settings(_env_file=None, DB_URL="sqlite+aiosqlite:///:memory:", APP_NAME="Orders API", APP_ENV="staging")
    app = create_app(settings)
    manager = DatabaseManager.get_instance(settings)
    await manager.connect_all()
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/health/ready")
    finally:
        await manager.disconnect_all()

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["app_name"] == "Orders API"
    assert data["environment"] == "staging"


async def test_connection_check_keeps_zero_timeout(db_manager):
    with patch.object(db_manager.sql, "is_active", AsyncMock(return_value=True)) as is_active:
        await check_connection_active(timeout=0)
    is_active.assert_awaited_once_with(0)


def test_service_keeps_zero_timeout():
    assert SystemService(timeout=0).timeout == 0
    assert SystemService().timeout == Settings().HEALTH_CHECK_TIMEOUT

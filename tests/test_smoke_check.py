"""
Smoke check script tests.
"""
import json

from core.config import Settings
from core.database.manager import DatabaseManager
from apps.system.schemas import CheckResult, HealthReport
from apps.system.scripts.smoke_check import format_report, main, run


async def test_script_passes_with_reachable_database(capsys):
    exit_code = await main(["--json", "--timeout", "2"])
    assert exit_code == 0
    report = json.loads(capsys.readouterr().out)
    assert report["status"] == "ok"
    assert [check["name"] for check in report["checks"]] == ["application", "database"]


async def test_run_fails_with_unreachable_database():
    settings = Settings(_env_file=None, DB_URL="sqlite+aiosqlite:////nonexistent-dir/boot-check/app.db", APP_NAME="Orders API")
    report = await run(settings=settings)
    assert not report.ok
    assert report.app_name == "Orders API"
    assert [check.name for check in report.failed()] == ["database"]
    assert DatabaseManager.get_instance().sql.connected is False

    out = format_report(report)
    assert "UNAVAILABLE" in out
    assert "[FAIL] database" in out


def test_format_report():
    report = HealthReport(
        status="unavailable",
        app_name="Orders API",
        version="2.3.0",
        environment="production",
        checks=[
            CheckResult(name="application", ok=True, detail="Orders API v2.3.0", duration_ms=0.01),
            CheckResult(name="database", ok=False, detail="Connection not active", duration_ms=3.5),
        ],
    )
    assert format_report(report).splitlines() == [
        "Orders API v2.3.0 (production): UNAVAILABLE",
        "  [PASS] application (0.01ms) - Orders API v2.3.0",
        "  [FAIL] database (3.50ms) - Connection not active",
    ]

#!/usr/bin/env python3
"""
Boot smoke check.

Usage:
    python -m apps.system.scripts.smoke_check
    python -m apps.system.scripts.smoke_check --timeout 5 --json

Steps:
    1. Create the application (registers the runtime singleton)
    2. Connect the database manager
    3. Run the application and connection checks, print the report
    4. Disconnect; exit 0 when every check passed, 1 otherwise
"""

import asyncio
import argparse
import sys

from core.application import create_app
from core.config import Settings
from core.database.manager import DatabaseManager
from core.logging.logger import LogConfig, get_logger
from apps.system.service import SystemService
from apps.system.schemas import HealthReport

logger = get_logger("smoke_check_script")


def format_report(report: HealthReport) -> str:
    """Human-readable summary, one line per check."""
    lines = [f"{report.app_name} v{report.version} ({report.environment}): {report.status.upper()}"]
    for check in report.checks:
        mark = "PASS" if check.ok else "FAIL"
        detail = f" - {check.detail}" if check.detail else ""
        lines.append(f"  [{mark}] {check.name} ({check.duration_ms:.2f}ms){detail}")
    return "\n".join(lines)


async def run(timeout: float = None, settings: Settings = None) -> HealthReport:
    """Boot the application and its connections, then run the checks."""
    app = create_app(settings, configure_logging=False)
    manager = DatabaseManager.get_instance(app.state.settings)
    try:
        await manager.connect_all()
    except Exception as e:
        # Unreachable database is reported by the connection check below
        logger.error(f"Failed to connect: {str(e)}")

    try:
        return await SystemService(app.state.settings, timeout=timeout).run_checks()
    finally:
        await manager.disconnect_all()


async def main(argv=None) -> int:
    """Main entry."""
    parser = argparse.ArgumentParser(
        description="Check that the application boots and its database connection is active",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m apps.system.scripts.smoke_check
  python -m apps.system.scripts.smoke_check --timeout 5
  python -m apps.system.scripts.smoke_check --json
        """
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds allowed for each connection ping (default: HEALTH_CHECK_TIMEOUT)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON"
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for script output (default: LOG_LEVEL)"
    )

    args = parser.parse_args(argv)
    LogConfig.setup_script_logging("smoke_check", level=args.log_level)

    report = await run(timeout=args.timeout)

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))

    return 0 if report.ok else 1


def cli():
    """Console script entry."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()

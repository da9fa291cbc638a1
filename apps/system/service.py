from typing import Optional
from loguru import logger
from core.config import Settings, settings as app_settings
from .checks import check_application_present, check_cache_active, check_connection_active
from .schemas import HealthReport

class SystemService:
    def __init__(self, settings: Optional[Settings] = None, timeout: Optional[float] = None):
        """Initialize System Service; timeout bounds each connection ping."""
        self.settings = settings or app_settings
        self.timeout = self.settings.HEALTH_CHECK_TIMEOUT if timeout is None else timeout

    async def run_checks(self) -> HealthReport:
        """Run the application, database and (if enabled) cache checks in order."""
        checks = [
            check_application_present(),
            await check_connection_active(self.timeout),
        ]
        cache_check = await check_cache_active(self.timeout)
        if cache_check is not None:
            checks.append(cache_check)

        report = HealthReport(
            status="ok" if all(check.ok for check in checks) else "unavailable",
            app_name=self.settings.APP_NAME,
            version=self.settings.APP_VERSION,
            environment=self.settings.APP_ENV,
            checks=checks,
        )
        if not report.ok:
            logger.warning(
                "Health checks failed: " + ", ".join(check.name for check in report.failed())
            )
        return report

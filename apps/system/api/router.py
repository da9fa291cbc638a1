from fastapi import APIRouter, Depends, Request
from core.exceptions.handler import ServiceUnavailableException
from core.response import ResponseModel
from ..checks import check_application_present
from ..service import SystemService

router = APIRouter()

def get_system_service(request: Request) -> SystemService:
    """Dependency: create SystemService from the settings the app was built with."""
    return SystemService(request.app.state.settings)

@router.get("/live")
async def live():
    """Liveness: the application is up and serving."""
    return ResponseModel.success(data=check_application_present().model_dump())

@router.get("/ready")
async def ready(service: SystemService = Depends(get_system_service)):
    """Readiness: application present and database (and cache) connections active."""
    report = await service.run_checks()
    if not report.ok:
        raise ServiceUnavailableException(
            "Service unavailable: " + ", ".join(check.name for check in report.failed()),
            detail=report.model_dump(),
        )
    return ResponseModel.success(data=report.model_dump())

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

class CheckResult(BaseModel):
    name: str = Field(..., description="application, database or cache")
    ok: bool
    detail: Optional[str] = None
    duration_ms: float = 0.0

class HealthReport(BaseModel):
    status: Literal["ok", "unavailable"]
    app_name: str
    version: str
    environment: str
    checks: List[CheckResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def failed(self) -> List[CheckResult]:
        return [check for check in self.checks if not check.ok]

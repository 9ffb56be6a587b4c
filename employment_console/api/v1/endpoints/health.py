from __future__ import annotations

from fastapi import APIRouter

from employment_console.core.config import settings
from employment_console.services.employee_gateway import employee_gateway

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    if employee_gateway.initialized:
        ok = await employee_gateway.check_connection()
        services["employees_api"] = "ok" if ok else "error"
    else:
        services["employees_api"] = "not_configured"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from employment_console.api.console import router as console_router
from employment_console.api.v1.router import api_router
from employment_console.console.controller import console
from employment_console.core.config import settings
from employment_console.services.employee_gateway import employee_gateway


def configure_logging() -> None:
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    await employee_gateway.initialize(settings)
    if employee_gateway.initialized:
        # Failures are reported as console notices, never raised.
        await console.start()
    else:
        logger.warning("Employees API not configured, console starts empty")
    yield
    await employee_gateway.close()


app = FastAPI(
    title="Employment Console",
    description="CRUD console for the remote employees API",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.include_router(console_router)
app.include_router(api_router)

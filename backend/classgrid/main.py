from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from classgrid.api.routes import conflicts, health, reminders, timeline, workload
from classgrid.core.config import get_settings
from classgrid.core.exceptions import AppError
from classgrid.core.logging_config import configure_logging
from classgrid.core.middleware import SnapshotSizeLimitMiddleware

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging(settings.log_level)
    logger.info("Starting %s for teaching days %s", settings.project_name, ", ".join(settings.days))
    yield


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


app = FastAPI(title=settings.project_name, lifespan=lifespan)
app.add_exception_handler(AppError, app_error_handler)

app.add_middleware(SnapshotSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(conflicts.router, prefix=f"{settings.api_prefix}/conflicts", tags=["conflicts"])
app.include_router(workload.router, prefix=f"{settings.api_prefix}/workload", tags=["workload"])
app.include_router(timeline.router, prefix=f"{settings.api_prefix}/timeline", tags=["timeline"])
app.include_router(reminders.router, prefix=f"{settings.api_prefix}/reminders", tags=["reminders"])

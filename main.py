# main.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dependencies import get_settings
from errors import MethodNotAllowed, ProxyError
from logging_config import setup_logging

# Routers
from routers.health import router as health_router
from routers.dispatch import router as dispatch_router

settings = get_settings()

# Initialize logging once
setup_logging(settings.debug_mode, settings.log_db_path, settings.max_log_entries)

logger = logging.getLogger(__name__)
logger.info("Starting the Farabi dispatch proxy...")

app = FastAPI(
    title="Farabi Dispatch Proxy",
    description="Authenticated proxy that triggers a GitHub Actions workflow_dispatch",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None
)

app.include_router(health_router)
app.include_router(dispatch_router)


@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Methods the router never sees (TRACE, PROPFIND, ...) get the same 405 body.
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.info(f"Rejected {request.method} request.")
        return await proxy_error_handler(request, MethodNotAllowed())
    return await http_exception_handler(request, exc)

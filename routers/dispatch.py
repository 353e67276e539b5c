# dispatch.py is a FastAPI router that validates UI requests and forwards them
# to GitHub as a workflow_dispatch.

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from config import Settings
from dependencies import get_settings
from github_dispatch import build_dispatch_request, trigger_workflow
from errors import MethodNotAllowed, Unauthorized
from utils import parse_payload, validate_required_fields, verify_api_key

router = APIRouter()
logger = logging.getLogger(__name__)

# Methods outside this list are answered 405 by main.http_error_handler.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


async def handle(request: Request, settings: Settings) -> JSONResponse:
    # 1. Method.
    if request.method != "POST":
        logger.info(f"Rejected {request.method} request.")
        raise MethodNotAllowed()

    # 2. API key.
    if not verify_api_key(request.headers.get("x-api-key"), settings.api_key):
        raise Unauthorized()

    # 3. Parse payload.
    payload = parse_payload(await request.body())

    # 4. Required fields.
    validate_required_fields(payload)

    # 5. Build and send the dispatch without blocking the event loop.
    dispatch_request = build_dispatch_request(payload, settings)
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, trigger_workflow, dispatch_request, settings)

    return JSONResponse(status_code=200, content={"ok": True})


# Any path not claimed by another router lands here, "/" included.
@router.api_route("/{path:path}", methods=ROUTED_METHODS, summary="Workflow Dispatch Endpoint")
async def dispatch_endpoint(request: Request, path: str, settings: Settings = Depends(get_settings)):
    logger.info("Dispatch endpoint was called.")
    return await handle(request, settings)

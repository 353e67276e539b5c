# routers/health.py

from fastapi import APIRouter, Depends
import logging

from config import Settings
from dependencies import get_settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health", summary="Health Check Endpoint")
def health_check(settings: Settings = Depends(get_settings)):
    logger.info("Health check endpoint was called.")
    return {"status": "OK", "configured": not settings.missing_fields()}

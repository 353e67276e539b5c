# utils.py

import hmac
import json
import math
import logging
from typing import Any, Dict, Optional

from errors import InvalidPayload, MissingField

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "file_no",
    "patient_name_ar",
    "service_name",
    "service_price",
    "policy_expiry",
)


def verify_api_key(provided: Optional[str], expected: str) -> bool:
    if not provided or not expected:
        logger.warning("API key missing or not configured.")
        return False

    is_valid = hmac.compare_digest(provided.encode(), expected.encode())
    if not is_valid:
        logger.warning("API key verification failed.")
    return is_valid


def parse_payload(body: bytes) -> Dict[str, Any]:
    """
    Decode the request body as a JSON object.

    Anything that is not a JSON object (bad syntax, bad encoding, arrays, scalars)
    raises InvalidPayload.
    """
    try:
        payload = json.loads(body, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except (ValueError, TypeError) as e:
        logger.warning(f"Could not decode JSON payload: {e}")
        raise InvalidPayload()

    if not isinstance(payload, dict):
        logger.warning(f"JSON payload is a {type(payload).__name__}, expected an object.")
        raise InvalidPayload()
    return payload


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def field_text(value: Any) -> str:
    """String form of a payload value; lists join their elements with commas."""
    if value is None:
        return ""
    if isinstance(value, list):
        return ",".join(field_text(item) for item in value)
    return str(value)


def is_blank(value: Any) -> bool:
    return field_text(value).strip() == ""


def validate_required_fields(payload: Dict[str, Any]):
    # First missing field wins, in declared order.
    for name in REQUIRED_FIELDS:
        if is_blank(payload.get(name)):
            logger.warning(f"Payload rejected, missing field: {name}")
            raise MissingField(name)

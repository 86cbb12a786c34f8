"""AWS Lambda entry point for govee-control.

Invocation payload:
    {"event": "set_color", "hex": "FF0000", "preventOverride": false}

Configuration comes from the Lambda environment (GOVEE_API_KEY,
GOVEE_DEVICE_ID, GOVEE_DEVICE_MODEL, BASE_COLOR).
"""

import asyncio
import json
import logging
from typing import Any

from govee_control.models.event import EventRequest
from govee_control.runner import run_event
from govee_control.utils.errors import classify_exception

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body)}


def handler(event: dict[str, Any] | None, context: Any = None) -> dict[str, Any]:
    """Handle one Lambda invocation.

    Returns:
        200 with {"message": ...} on success, 500 with {"error": ...} on failure
    """
    event = event or {}
    logger.info(f"Lambda invocation: {json.dumps(event, default=str)}")

    try:
        request = EventRequest.create(
            str(event.get("event") or ""),
            hex=event.get("hex"),
            prevent_override=bool(event.get("preventOverride")),
        )
        result = asyncio.run(run_event(request))
    except Exception as e:
        logger.error(f"Lambda error: {e}")
        return _response(500, classify_exception(e).to_dict())

    return _response(200, result.to_dict())

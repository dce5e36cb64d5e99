"""
Booking notification webhook.

Posts a JSON event to BOOKING_WEBHOOK_URL whenever a booking is created.
Delivery is best-effort: one attempt, errors are logged and swallowed so a
notification failure can never fail or roll back the booking itself.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from .. import config
from ..webhook_security import SIGNATURE_HEADER, sign_payload

logger = logging.getLogger(__name__)


def _build_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.BOOKING_WEBHOOK_TIMEOUT_SECONDS)


def build_booking_event(booking: dict, client: dict) -> dict:
    return {
        "event": "booking.created",
        "sent_at": datetime.now(timezone.utc).isoformat(),
        "booking": booking,
        "client": client,
    }


async def notify_booking_created(booking: dict, client: dict) -> bool:
    """
    Send the booking.created event.

    Args:
        booking: Serialized booking (JSON-safe)
        client: Id, name and email of the booking's client

    Returns:
        True if the receiver answered 2xx, False otherwise (including when
        the webhook is not configured)
    """
    webhook_url: Optional[str] = config.BOOKING_WEBHOOK_URL
    if not webhook_url:
        logger.debug("Booking webhook not configured, skipping notification")
        return False

    body = json.dumps(build_booking_event(booking, client)).encode("utf-8")
    headers = {"Content-Type": "application/json"}
    if config.BOOKING_WEBHOOK_SECRET:
        headers[SIGNATURE_HEADER] = sign_payload(config.BOOKING_WEBHOOK_SECRET, body)

    try:
        async with _build_http_client() as http:
            response = await http.post(webhook_url, content=body, headers=headers)

        if response.status_code >= 300:
            logger.error(
                f"❌ Booking webhook for booking {booking.get('id')} returned HTTP {response.status_code}"
            )
            return False

        logger.info(f"📨 Booking webhook delivered for booking {booking.get('id')}")
        return True
    except Exception as e:
        logger.error(f"❌ Failed to deliver booking webhook for booking {booking.get('id')}: {e}")
        return False

"""
Webhook signing for outbound booking notifications.

Signature header format: "t=<unix timestamp>,v1=<hex hmac-sha256>" where the
HMAC covers "<timestamp>.<raw body>". Receivers recompute it with the shared
secret and reject stale timestamps.
"""

import hashlib
import hmac
import logging
import time
from typing import Optional

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-CleanSync-Signature"

# Maximum age of webhook in seconds (5 minutes)
MAX_WEBHOOK_AGE_SECONDS = 300


def constant_time_compare(a: str, b: str) -> bool:
    """
    Compare two strings in constant time to prevent timing attacks.
    """
    if not a or not b:
        return False
    return hmac.compare_digest(a, b)


def compute_hmac_sha256(secret: str, payload: bytes) -> str:
    """Compute HMAC-SHA256 signature of payload"""
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def sign_payload(secret: str, payload: bytes, timestamp: Optional[int] = None) -> str:
    """Build the signature header value for a webhook body"""
    timestamp = int(time.time()) if timestamp is None else timestamp
    signed = f"{timestamp}.".encode("utf-8") + payload
    return f"t={timestamp},v1={compute_hmac_sha256(secret, signed)}"


def verify_signature(
    secret: str,
    payload: bytes,
    header: Optional[str],
    max_age: int = MAX_WEBHOOK_AGE_SECONDS,
    now: Optional[int] = None,
) -> bool:
    """
    Verify a signature header produced by sign_payload.

    The API never calls this itself; it is the check webhook receivers run
    (in Python, or as a reference for other languages) on each delivery.

    Returns False for a missing/malformed header, a stale timestamp or a
    signature mismatch.
    """
    if not header:
        return False

    try:
        parts = dict(item.split("=", 1) for item in header.split(","))
        timestamp = int(parts["t"])
        signature = parts["v1"]
    except (ValueError, KeyError):
        logger.warning("⚠️ Malformed webhook signature header")
        return False

    now = int(time.time()) if now is None else now
    if abs(now - timestamp) > max_age:
        logger.warning(f"⚠️ Webhook timestamp too old: {now - timestamp}s")
        return False

    expected = compute_hmac_sha256(secret, f"{timestamp}.".encode("utf-8") + payload)
    return constant_time_compare(expected, signature)

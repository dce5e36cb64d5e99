"""
Security headers for every API response.

The portal only serves JSON, so the content policy denies everything and
responses are marked uncacheable. HSTS is added in production only.
"""

import logging
import os
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

IS_PRODUCTION = os.getenv("ENVIRONMENT", "development").lower() == "production"

HSTS_VALUE = "max-age=31536000; includeSubDomains; preload"
NO_STORE = "no-store, no-cache, must-revalidate"


def get_csp_policy() -> str:
    return "; ".join(["default-src 'none'", "frame-ancestors 'none'", "base-uri 'none'", "form-action 'self'"])


def get_permissions_policy() -> str:
    disabled = ["accelerometer", "camera", "geolocation", "microphone", "payment", "usb"]
    return ", ".join(f"{feature}=()" for feature in disabled)


def build_security_headers(production: bool = IS_PRODUCTION) -> dict[str, str]:
    headers = {
        "X-Frame-Options": "DENY",
        "X-Content-Type-Options": "nosniff",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Content-Security-Policy": get_csp_policy(),
        "Permissions-Policy": get_permissions_policy(),
        "X-Permitted-Cross-Domain-Policies": "none",
    }
    if production:
        headers["Strict-Transport-Security"] = HSTS_VALUE
    return headers


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds build_security_headers() to responses outside `exclude_paths`"""

    def __init__(self, app, exclude_paths: Optional[list[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or []
        self.headers = build_security_headers()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return response

        response.headers.update(self.headers)
        # Bookings and client records must never land in a shared cache
        response.headers.setdefault("Cache-Control", NO_STORE)
        return response

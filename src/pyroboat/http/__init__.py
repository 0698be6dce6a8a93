"""HTTP infrastructure for pyroboat (async-only).

Uses httpx directly; the X-CSRF refresh protocol lives in ``xcsrf``.
"""

from pyroboat.http.client import create_client, send_request
from pyroboat.http.cookies import load_roblosecurity_from_file
from pyroboat.http.xcsrf import extract_refresh_token, validate_response

__all__ = [
    "create_client",
    "send_request",
    "load_roblosecurity_from_file",
    "extract_refresh_token",
    "validate_response",
]

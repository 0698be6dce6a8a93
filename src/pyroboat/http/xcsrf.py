"""X-CSRF token refresh protocol.

Roblox rejects state-changing requests carrying a stale or missing
anti-forgery token with a 403, and puts the token it expects in the
``x-csrf-token`` header of that same response. This module only
classifies responses; the retry itself belongs to the caller.
"""

import httpx

from pyroboat.config import XCSRF_HEADER
from pyroboat.errors import InvalidXcsrf, XcsrfNotReturned, rejection_for_status

TOKEN_REJECTED_STATUS = 403


def extract_refresh_token(response: httpx.Response, header: str = XCSRF_HEADER) -> str:
    """Read the replacement token from a rejecting response.

    Args:
        response: The 403 response
        header: Name of the anti-forgery header

    Returns:
        The replacement token

    Raises:
        XcsrfNotReturned: If the header is absent or blank
    """
    token = response.headers.get(header, "").strip()
    if not token:
        raise XcsrfNotReturned(response.status_code, header)
    return token


def validate_response(response: httpx.Response, header: str = XCSRF_HEADER) -> httpx.Response:
    """Map a response to success or a typed failure.

    Args:
        response: Response to classify
        header: Name of the anti-forgery header

    Returns:
        The response unchanged if its status is 2xx

    Raises:
        InvalidXcsrf: 403 carrying a replacement token
        XcsrfNotReturned: 403 without a usable replacement
        RemoteRejected: Any other non-2xx status
    """
    if response.is_success:
        return response

    if response.status_code == TOKEN_REJECTED_STATUS:
        raise InvalidXcsrf(extract_refresh_token(response, header))

    raise rejection_for_status(response.status_code, response.text)

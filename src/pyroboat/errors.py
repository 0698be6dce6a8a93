"""Exception types raised by the pyroboat client.

Every failure of an authenticated operation is one of these kinds, so
callers can tell a credential problem from a remote rejection from a
network failure:

- MissingAuth: no .ROBLOSECURITY cookie was configured
- InvalidXcsrf: the anti-forgery token was rejected; carries the replacement
- XcsrfNotReturned: the token was rejected but no replacement was supplied
- RemoteRejected: any other non-success status (with status-specific subclasses)
- TransportFailure: the request never produced a usable response
"""

import json
from typing import List, Optional


class RoboatError(Exception):
    """Base class for all pyroboat errors."""


class MissingAuth(RoboatError):
    """Raised when an authenticated operation runs without a session cookie."""

    def __init__(self, message: str = "The .ROBLOSECURITY cookie is not set"):
        super().__init__(message)


class InvalidXcsrf(RoboatError):
    """The server rejected the anti-forgery token and issued a new one.

    This is a refresh signal rather than a plain failure: ``new_token`` is
    the value the next attempt must send.
    """

    def __init__(self, new_token: str):
        super().__init__("X-CSRF token was rejected; a replacement token was issued")
        self.new_token = new_token


class XcsrfNotReturned(RoboatError):
    """The server rejected the token without supplying a usable replacement."""

    def __init__(self, status_code: int, header: str):
        super().__init__(
            f"Server responded {status_code} but the '{header}' header was missing or empty"
        )
        self.status_code = status_code
        self.header = header


class RemoteRejected(RoboatError):
    """The remote service answered with a non-success status.

    Attributes:
        status_code: HTTP status of the response
        body: Raw response body text, kept for diagnostics
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        detail = "; ".join(self.messages) or body.strip()[:200]
        message = f"Remote rejected request with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def messages(self) -> List[str]:
        """Error messages from a ``{"errors": [{"code", "message"}]}`` body."""
        try:
            payload = json.loads(self.body)
        except ValueError:
            return []

        if not isinstance(payload, dict):
            return []

        errors = payload.get("errors")
        if not isinstance(errors, list):
            return []

        messages = []
        for error in errors:
            if isinstance(error, dict) and error.get("message"):
                messages.append(str(error["message"]))
        return messages


class BadRequest(RemoteRejected):
    """400: the request was malformed."""


class InvalidRoblosecurity(RemoteRejected):
    """401: the .ROBLOSECURITY cookie is invalid or expired."""


class TooManyRequests(RemoteRejected):
    """429: the remote service is throttling this session."""


class InternalServerError(RemoteRejected):
    """500: the remote service failed."""


_STATUS_ERRORS = {
    400: BadRequest,
    401: InvalidRoblosecurity,
    429: TooManyRequests,
    500: InternalServerError,
}


def rejection_for_status(status_code: int, body: str) -> RemoteRejected:
    """Build the RemoteRejected subclass matching ``status_code``."""
    error_class = _STATUS_ERRORS.get(status_code, RemoteRejected)
    return error_class(status_code, body)


class TransportFailure(RoboatError):
    """The request failed below HTTP (connection, timeout, TLS, redirects, decoding).

    The underlying httpx exception is kept in ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(self, cause: Optional[BaseException]):
        super().__init__(f"Transport failure: {cause!r}")
        self.cause = cause

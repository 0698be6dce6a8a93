"""Session credentials shared by every authenticated request."""

import threading
from typing import Optional

from pyroboat.errors import MissingAuth


class SessionState:
    """Holds the .ROBLOSECURITY cookie and the current X-CSRF token.

    The cookie is fixed at construction. The token starts out empty and is
    replaced whenever the server issues a new one; concurrent operations may
    read and write it, so every access goes through a lock.
    """

    def __init__(self, roblosecurity: Optional[str] = None, xcsrf: str = ""):
        self._roblosecurity = roblosecurity
        self._xcsrf = xcsrf
        self._lock = threading.Lock()

    @property
    def has_cookie(self) -> bool:
        return self._roblosecurity is not None

    def get_cookie(self) -> str:
        """Return the session cookie.

        Raises:
            MissingAuth: If no cookie was supplied
        """
        if self._roblosecurity is None:
            raise MissingAuth()
        return self._roblosecurity

    def cookie_header(self) -> str:
        """Return the value for the ``Cookie`` request header."""
        return f".ROBLOSECURITY={self.get_cookie()}"

    def get_token(self) -> str:
        with self._lock:
            return self._xcsrf

    def set_token(self, new_value: str) -> None:
        """Replace the stored token; later requests send ``new_value``."""
        with self._lock:
            self._xcsrf = new_value

    def __repr__(self) -> str:
        # Never expose the secrets themselves
        return f"SessionState(has_cookie={self.has_cookie})"

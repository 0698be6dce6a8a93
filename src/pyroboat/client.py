"""Authenticated Roblox client (async-only)."""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_none,
)

from pyroboat.config import Config
from pyroboat.errors import InvalidXcsrf, rejection_for_status
from pyroboat.http.client import create_client, send_request
from pyroboat.http.cookies import load_roblosecurity_from_file
from pyroboat.http.xcsrf import validate_response
from pyroboat.models.ide import NewStudioAsset
from pyroboat.session import SessionState

logger = logging.getLogger(__name__)

T = TypeVar("T")

# The first attempt plus exactly one retry after a token refresh
XCSRF_MAX_ATTEMPTS = 2


class Client:
    """Client for authenticated Roblox endpoints.

    One instance may be shared by many concurrent operations. The X-CSRF
    token it learns from a refresh is kept for every later request.

    Attributes:
        config: Configuration object
        session: Cookie and current X-CSRF token
        client: httpx.AsyncClient for making requests (created lazily)
    """

    def __init__(
        self,
        roblosecurity: Optional[str] = None,
        config: Optional[Config] = None,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        xcsrf: str = "",
    ):
        """Initialize client.

        Args:
            roblosecurity: The .ROBLOSECURITY cookie value
            config: Configuration object (creates default if None)
            client: Existing httpx client to use; it is not closed by us
            transport: Transport for the lazily created httpx client
            xcsrf: Initial X-CSRF token, if one is already known
        """
        self.config = config or Config()
        self.session = SessionState(roblosecurity, xcsrf)
        self.client = client
        self._owns_client = client is None
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: Config,
        roblosecurity: Optional[str] = None,
        **kwargs,
    ) -> "Client":
        """Create a client, reading the cookie from ``config.cookie_file`` if needed."""
        if roblosecurity is None and config.cookie_file:
            roblosecurity = load_roblosecurity_from_file(config.cookie_file)
        return cls(roblosecurity=roblosecurity, config=config, **kwargs)

    def _ensure_client(self) -> httpx.AsyncClient:
        if self.client is None:
            self.client = create_client(self.config, transport=self._transport)
        return self.client

    async def upload_studio_asset(self, asset_info: NewStudioAsset) -> str:
        """Upload a new animation, audio or decal asset.

        Sends a ``POST`` to the IDE publish endpoint with the asset metadata
        as query parameters and the asset bytes as the body. If the X-CSRF
        token is rejected, the new token is stored and the upload is sent
        once more.

        Args:
            asset_info: The asset to upload

        Returns:
            The id of the new asset, exactly as the server returned it

        Raises:
            MissingAuth: If the .ROBLOSECURITY cookie is not set
            InvalidXcsrf: If the token was rejected on both attempts
            XcsrfNotReturned: If a rejection carried no replacement token
            RemoteRejected: If Roblox returned any other failure status
            TransportFailure: For network issues
        """
        return await self._with_xcsrf_retry(self._upload_studio_asset_internal, asset_info)

    async def fetch_asset_data(self, asset_id: int) -> bytes:
        """Download the raw contents of an asset.

        Args:
            asset_id: Id of the asset

        Returns:
            The asset bytes

        Raises:
            MissingAuth: If the .ROBLOSECURITY cookie is not set
            RemoteRejected: If Roblox returned a failure status
            TransportFailure: For network issues
        """
        headers = {'Cookie': self.session.cookie_header()}

        response = await send_request(
            self._ensure_client(),
            "GET",
            self.config.asset_delivery_url,
            headers=headers,
            params=[("id", str(asset_id))],
            follow_redirects=True,
        )

        # Read-only request: no token involved, so no refresh handling
        if not response.is_success:
            raise rejection_for_status(response.status_code, response.text)

        logger.debug(f"Fetched asset {asset_id} ({len(response.content)} bytes)")
        return response.content

    async def _with_xcsrf_retry(
        self,
        operation: Callable[..., Awaitable[T]],
        *args,
        **kwargs,
    ) -> T:
        """Run ``operation``, retrying exactly once after a token refresh.

        Only InvalidXcsrf triggers the retry; its replacement token is
        stored before the second attempt. Whatever the second attempt
        produces is final.
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(XCSRF_MAX_ATTEMPTS),
            wait=wait_none(),
            retry=retry_if_exception_type(InvalidXcsrf),
            before_sleep=self._store_refreshed_token,
            reraise=True,
        )
        return await retrying(operation, *args, **kwargs)

    def _store_refreshed_token(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        logger.info(
            f"X-CSRF token rejected on attempt {retry_state.attempt_number}, "
            f"retrying with refreshed token"
        )
        self.session.set_token(error.new_token)

    async def _upload_studio_asset_internal(self, asset_info: NewStudioAsset) -> str:
        cookie = self.session.cookie_header()
        xcsrf = self.session.get_token()

        headers = {
            'Cookie': cookie,
            self.config.xcsrf_header: xcsrf,
            'User-Agent': self.config.user_agent,
        }

        response = await send_request(
            self._ensure_client(),
            "POST",
            self.config.upload_url,
            headers=headers,
            params=asset_info.query_params(),
            content=asset_info.asset_data,
        )

        validate_response(response, self.config.xcsrf_header)
        asset_id = response.text
        logger.debug(f"Uploaded '{asset_info.name}' as asset {asset_id}")
        return asset_id

    async def close(self):
        """Close the httpx client if this instance created it."""
        if self.client is not None and self._owns_client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

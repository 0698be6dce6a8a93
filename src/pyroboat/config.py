"""Configuration management for pyroboat."""

import os
from dataclasses import dataclass
from typing import Optional

STUDIO_UPLOAD_API = "https://www.roblox.com/ide/publish/uploadnewanimation"
ASSET_DELIVERY_API = "https://assetdelivery.roblox.com/v1/asset/"
XCSRF_HEADER = "x-csrf-token"


@dataclass
class Config:
    """Configuration for the pyroboat client.

    This class manages endpoint locations, HTTP transport settings,
    the anti-forgery header name and upload concurrency.
    """

    # Endpoints
    upload_url: str = STUDIO_UPLOAD_API
    asset_delivery_url: str = ASSET_DELIVERY_API

    # Authentication
    cookie_file: Optional[str] = None  # Netscape cookie file or raw cookie value
    xcsrf_header: str = XCSRF_HEADER

    # HTTP settings
    timeout: float = 60  # seconds
    user_agent: str = "Roblox/WinInet"
    proxy: Optional[str] = None
    verify_ssl: bool = True
    http2: bool = True

    # Concurrency settings
    max_concurrent_tasks: int = 4  # Number of uploads in flight at once

    # Progress display
    show_progress: bool = True

    def __post_init__(self):
        """Initialize and validate configuration."""
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive: {self.timeout}")

        if self.max_concurrent_tasks < 1:
            raise ValueError(
                f"max_concurrent_tasks must be at least 1: {self.max_concurrent_tasks}"
            )

        if not self.xcsrf_header:
            raise ValueError("xcsrf_header must not be empty")

        # Setup proxy from environment if not specified
        if not self.proxy:
            self.proxy = os.environ.get('HTTPS_PROXY') or os.environ.get('HTTP_PROXY')

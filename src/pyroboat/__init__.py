"""
pyroboat - An async client for authenticated Roblox endpoints.

This package uploads assets through the IDE publish endpoint using a
.ROBLOSECURITY session cookie, refreshing the rotating X-CSRF token
transparently when Roblox rejects it.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from pyroboat.client import Client
from pyroboat.config import Config
from pyroboat.errors import (
    BadRequest,
    InternalServerError,
    InvalidRoblosecurity,
    InvalidXcsrf,
    MissingAuth,
    RemoteRejected,
    RoboatError,
    TooManyRequests,
    TransportFailure,
    XcsrfNotReturned,
)
from pyroboat.models import AssetType, NewStudioAsset
from pyroboat.session import SessionState
from pyroboat.upload import UploadManager, UploadResult, UploadTask

__all__ = [
    "AssetType",
    "BadRequest",
    "Client",
    "Config",
    "InternalServerError",
    "InvalidRoblosecurity",
    "InvalidXcsrf",
    "MissingAuth",
    "NewStudioAsset",
    "RemoteRejected",
    "RoboatError",
    "SessionState",
    "TooManyRequests",
    "TransportFailure",
    "UploadManager",
    "UploadResult",
    "UploadTask",
    "XcsrfNotReturned",
    "__version__",
]

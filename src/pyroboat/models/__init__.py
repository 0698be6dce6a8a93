"""Data models for pyroboat."""

from pyroboat.models.catalog import AssetType
from pyroboat.models.ide import FIXED_UPLOAD_PARAMS, NewStudioAsset

__all__ = [
    "AssetType",
    "FIXED_UPLOAD_PARAMS",
    "NewStudioAsset",
]

"""Utility functions for pyroboat."""

from pyroboat.utils.file import (
    asset_name_from_path,
    get_file_extension,
    guess_asset_type,
)

__all__ = [
    "asset_name_from_path",
    "get_file_extension",
    "guess_asset_type",
]

"""File operation utilities."""

from pathlib import Path

from pyroboat.models.catalog import AssetType

_EXTENSION_TYPES = {
    ".rbxm": AssetType.Animation,
    ".rbxmx": AssetType.Animation,
    ".xml": AssetType.Animation,
    ".png": AssetType.Decal,
    ".jpg": AssetType.Decal,
    ".jpeg": AssetType.Decal,
    ".bmp": AssetType.Decal,
    ".tga": AssetType.Decal,
    ".mp3": AssetType.Audio,
    ".ogg": AssetType.Audio,
    ".wav": AssetType.Audio,
    ".flac": AssetType.Audio,
}


def get_file_extension(path: str) -> str:
    """Return the lowercased extension of ``path`` including the dot."""
    return Path(path).suffix.lower()


def guess_asset_type(path: str) -> AssetType:
    """Guess the upload asset type from a file extension.

    Args:
        path: File path

    Returns:
        Animation, Decal or Audio

    Raises:
        ValueError: If the extension is not recognized
    """
    extension = get_file_extension(path)
    try:
        return _EXTENSION_TYPES[extension]
    except KeyError:
        raise ValueError(
            f"Cannot guess asset type from extension '{extension or path}'"
        ) from None


def asset_name_from_path(path: str) -> str:
    """Use the file stem as the asset name."""
    return Path(path).stem or "unnamed"

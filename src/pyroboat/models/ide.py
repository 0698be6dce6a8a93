"""
Request model for the IDE publish endpoint.

The endpoint takes all metadata as query parameters and the raw asset
bytes (e.g. an R15 KeyframeSequence) as the request body.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from pyroboat.models.catalog import AssetType

# Flags the endpoint requires on every upload
FIXED_UPLOAD_PARAMS: Tuple[Tuple[str, str], ...] = (
    ("AllID", "1"),
    ("ispublic", "False"),
    ("allowComments", "True"),
    ("isGamesAsset", "False"),
)


@dataclass(frozen=True)
class NewStudioAsset:
    """A new asset to upload.

    Attributes:
        name: Title of the asset
        description: Description of the asset
        asset_type: Catalog type; its name is sent as ``assetTypeName``
        asset_data: Raw asset bytes, sent unchanged as the request body
        group_id: Owning group, or None to upload to the user
        place_id: Place the asset is meant for (not sent by the endpoint)
    """
    name: str
    description: str
    asset_type: AssetType
    asset_data: bytes
    group_id: Optional[int] = None
    place_id: Optional[int] = None

    def __post_init__(self):
        """Validate field types the wire format depends on."""
        if not isinstance(self.asset_type, AssetType):
            raise TypeError(f"asset_type must be an AssetType, got {self.asset_type!r}")
        if not isinstance(self.asset_data, (bytes, bytearray, memoryview)):
            raise TypeError("asset_data must be bytes")
        if not isinstance(self.asset_data, bytes):
            # Freeze mutable buffers so a retry sends the same body
            object.__setattr__(self, "asset_data", bytes(self.asset_data))

    def query_params(self) -> List[Tuple[str, str]]:
        """Build the upload query parameters.

        ``groupId`` is only present when ``group_id`` is set.

        Returns:
            List of (name, value) pairs in wire order
        """
        params = [
            ("assetTypeName", self.asset_type.name),
            ("name", self.name),
            ("description", self.description),
        ]
        params.extend(FIXED_UPLOAD_PARAMS)

        if self.group_id is not None:
            params.append(("groupId", str(self.group_id)))

        return params

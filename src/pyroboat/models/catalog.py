"""Catalog asset types known to the remote service."""

from enum import IntEnum


class AssetType(IntEnum):
    """Roblox asset types, valued by their numeric catalog id.

    The member name is what the upload endpoint expects in
    ``assetTypeName`` (e.g. ``AssetType.Animation.name == "Animation"``).
    """

    Image = 1
    TShirt = 2
    Audio = 3
    Mesh = 4
    Lua = 5
    Hat = 8
    Place = 9
    Model = 10
    Shirt = 11
    Pants = 12
    Decal = 13
    Head = 17
    Face = 18
    Gear = 19
    Badge = 21
    Animation = 24
    Torso = 27
    RightArm = 28
    LeftArm = 29
    LeftLeg = 30
    RightLeg = 31
    Package = 32
    GamePass = 34
    Plugin = 38
    MeshPart = 40
    HairAccessory = 41
    FaceAccessory = 42
    NeckAccessory = 43
    ShoulderAccessory = 44
    FrontAccessory = 45
    BackAccessory = 46
    WaistAccessory = 47
    ClimbAnimation = 48
    DeathAnimation = 49
    FallAnimation = 50
    IdleAnimation = 51
    JumpAnimation = 52
    RunAnimation = 53
    SwimAnimation = 54
    WalkAnimation = 55
    PoseAnimation = 56
    EarAccessory = 57
    EyeAccessory = 58
    EmoteAnimation = 61
    Video = 62
    TShirtAccessory = 64
    ShirtAccessory = 65
    PantsAccessory = 66
    JacketAccessory = 67
    SweaterAccessory = 68
    ShortsAccessory = 69
    LeftShoeAccessory = 70
    RightShoeAccessory = 71
    DressSkirtAccessory = 72
    FontFamily = 73
    EyebrowAccessory = 76
    EyelashAccessory = 77
    MoodAnimation = 78
    DynamicHead = 79

    @classmethod
    def from_name(cls, name: str) -> "AssetType":
        """Look up an asset type by name, ignoring case.

        Raises:
            ValueError: If no asset type has that name
        """
        wanted = name.strip().lower()
        for member in cls:
            if member.name.lower() == wanted:
                return member
        raise ValueError(f"Unknown asset type: {name}")

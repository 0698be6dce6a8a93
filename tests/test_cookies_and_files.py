from __future__ import annotations

import pytest

from pyroboat.http.cookies import load_roblosecurity_from_file
from pyroboat.models import AssetType
from pyroboat.utils.file import asset_name_from_path, guess_asset_type


def test_netscape_cookie_file(tmp_path):
    cookie_file = tmp_path / "cookies.txt"
    cookie_file.write_text(
        "# Netscape HTTP Cookie File\n"
        ".roblox.com\tTRUE\t/\tTRUE\t1735689600\tRBXEventTrackerV2\tother\n"
        ".roblox.com\tTRUE\t/\tTRUE\t1735689600\t.ROBLOSECURITY\t_|WARNING|_abc\n"
    )

    assert load_roblosecurity_from_file(str(cookie_file)) == "_|WARNING|_abc"


def test_netscape_file_without_roblosecurity(tmp_path):
    cookie_file = tmp_path / "cookies.txt"
    cookie_file.write_text(".roblox.com\tTRUE\t/\tTRUE\t0\tother\tvalue\n")

    assert load_roblosecurity_from_file(str(cookie_file)) is None


@pytest.mark.parametrize("content", ["_|WARNING|_abc\n", ".ROBLOSECURITY=_|WARNING|_abc"])
def test_raw_cookie_file(tmp_path, content):
    cookie_file = tmp_path / "cookie"
    cookie_file.write_text(content)

    assert load_roblosecurity_from_file(str(cookie_file)) == "_|WARNING|_abc"


def test_missing_or_empty_cookie_file(tmp_path):
    assert load_roblosecurity_from_file(str(tmp_path / "absent")) is None

    empty = tmp_path / "empty"
    empty.write_text("# nothing here\n\n")
    assert load_roblosecurity_from_file(str(empty)) is None


@pytest.mark.parametrize(
    "path, expected",
    [
        ("anims/Walk.rbxm", AssetType.Animation),
        ("Idle.XML", AssetType.Animation),
        ("logo.png", AssetType.Decal),
        ("theme.ogg", AssetType.Audio),
    ],
)
def test_guess_asset_type(path, expected):
    assert guess_asset_type(path) is expected


@pytest.mark.parametrize("path", ["model.obj", "README"])
def test_guess_asset_type_unknown(path):
    with pytest.raises(ValueError):
        guess_asset_type(path)


def test_asset_name_from_path():
    assert asset_name_from_path("anims/Walk Cycle.rbxm") == "Walk Cycle"

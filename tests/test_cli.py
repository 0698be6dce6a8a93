from __future__ import annotations

import httpx
import pytest
from click.testing import CliRunner

from pyroboat import __version__
from pyroboat.cli import cli


@pytest.fixture
def serve(monkeypatch):
    """Route every client the CLI creates to ``handler``."""

    requests = []

    def _serve(handler):
        def recording(request):
            requests.append(request)
            return handler(request)

        monkeypatch.setattr(
            "pyroboat.client.create_client",
            lambda config, transport=None: httpx.AsyncClient(
                transport=httpx.MockTransport(recording)
            ),
        )
        return requests

    return _serve


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("ROBLOSECURITY", raising=False)
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_upload_file(runner, serve, tmp_path):
    requests = serve(lambda request: httpx.Response(200, text="555"))
    anim = tmp_path / "Walk.rbxm"
    anim.write_bytes(b"<KeyframeSequence/>")

    result = runner.invoke(
        cli,
        ["--roblosecurity", "C", "upload", str(anim), "--group-id", "42"],
    )

    assert result.exit_code == 0, result.output
    assert "555" in result.output
    params = requests[0].url.params
    assert params["name"] == "Walk"
    assert params["assetTypeName"] == "Animation"
    assert params["groupId"] == "42"
    assert requests[0].content == b"<KeyframeSequence/>"


def test_upload_reads_cookie_from_environment(runner, serve, tmp_path):
    requests = serve(lambda request: httpx.Response(200, text="1"))
    image = tmp_path / "logo.png"
    image.write_bytes(b"\x89PNG")

    result = runner.invoke(cli, ["upload", str(image)], env={"ROBLOSECURITY": "env-cookie"})

    assert result.exit_code == 0, result.output
    assert requests[0].headers["cookie"] == ".ROBLOSECURITY=env-cookie"
    assert requests[0].url.params["assetTypeName"] == "Decal"


def test_upload_without_cookie_fails_before_sending(runner, serve, tmp_path):
    requests = serve(lambda request: httpx.Response(200, text="1"))
    anim = tmp_path / "Walk.rbxm"
    anim.write_bytes(b"x")

    result = runner.invoke(cli, ["upload", str(anim)])

    assert result.exit_code == 1
    assert ".ROBLOSECURITY" in result.output
    assert requests == []


def test_upload_unknown_type(runner, tmp_path):
    model = tmp_path / "thing.obj"
    model.write_bytes(b"x")

    result = runner.invoke(cli, ["-r", "C", "upload", str(model)])

    assert result.exit_code == 2
    assert "asset type" in result.output


def test_upload_reports_retry_exhaustion(runner, serve, tmp_path):
    serve(lambda request: httpx.Response(403, headers={"x-csrf-token": "new"}))
    anim = tmp_path / "Walk.rbxm"
    anim.write_bytes(b"x")

    result = runner.invoke(cli, ["-r", "C", "upload", str(anim)])

    assert result.exit_code == 1
    assert "rejected again after a refresh" in result.output


def test_reupload(runner, serve):
    def handler(request):
        if request.method == "GET":
            return httpx.Response(200, content=b"<old animation>")
        return httpx.Response(200, text="999")

    requests = serve(handler)

    result = runner.invoke(cli, ["-r", "C", "reupload", "1234", "--name", "roboatTest"])

    assert result.exit_code == 0, result.output
    assert "1234 -> 999" in result.output
    upload = requests[1]
    assert upload.content == b"<old animation>"
    assert upload.url.params["assetTypeName"] == "Animation"
    assert upload.url.params["name"] == "roboatTest"


def test_batch_reports_each_file(runner, serve, tmp_path):
    def handler(request):
        if request.url.params["name"] == "bad":
            return httpx.Response(500, text="oops")
        return httpx.Response(200, text=f"id-{request.url.params['name']}")

    serve(handler)
    files = []
    for name in ("good", "bad"):
        path = tmp_path / f"{name}.rbxm"
        path.write_bytes(name.encode())
        files.append(str(path))

    result = runner.invoke(cli, ["-r", "C", "batch", *files, "-c", "2"])

    assert result.exit_code == 1
    assert "id-good" in result.output
    assert "1 successful, 1 failed" in result.output


def test_asset_types(runner):
    result = runner.invoke(cli, ["asset-types"])

    assert result.exit_code == 0
    assert "Animation (24)" in result.output


def test_batch_rejects_zero_concurrency(runner, serve, tmp_path):
    requests = serve(lambda request: httpx.Response(200, text="1"))
    anim = tmp_path / "Walk.rbxm"
    anim.write_bytes(b"x")

    result = runner.invoke(cli, ["-r", "C", "batch", str(anim), "-c", "0"])

    assert result.exit_code == 2
    assert requests == []


def test_reupload_redirect_loop_reports_network_error(runner, serve):
    serve(lambda request: httpx.Response(302, headers={"location": str(request.url)}))

    result = runner.invoke(cli, ["-r", "C", "reupload", "1234"])

    assert result.exit_code == 1
    assert "Network error" in result.output

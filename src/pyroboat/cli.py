"""Command-line interface for pyroboat using Click."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from pyroboat import __version__
from pyroboat.client import Client
from pyroboat.config import Config
from pyroboat.errors import (
    InvalidRoblosecurity,
    InvalidXcsrf,
    MissingAuth,
    RemoteRejected,
    RoboatError,
    TransportFailure,
    XcsrfNotReturned,
)
from pyroboat.models.catalog import AssetType
from pyroboat.models.ide import NewStudioAsset
from pyroboat.upload import UploadManager, UploadTask
from pyroboat.utils.file import asset_name_from_path, guess_asset_type


# Setup logging - default to WARNING to avoid interfering with progress bars
# INFO and DEBUG logs are only shown when --verbose is used
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def describe_error(error: Exception) -> str:
    """Explain which kind of failure occurred."""
    if isinstance(error, MissingAuth):
        return "No .ROBLOSECURITY cookie: use --roblosecurity, $ROBLOSECURITY or --cookie-file"
    if isinstance(error, InvalidXcsrf):
        return "X-CSRF token rejected again after a refresh; giving up"
    if isinstance(error, XcsrfNotReturned):
        return f"Token rejected without a replacement token ({error})"
    if isinstance(error, InvalidRoblosecurity):
        return "The .ROBLOSECURITY cookie is invalid or expired"
    if isinstance(error, RemoteRejected):
        return f"Roblox rejected the request ({error})"
    if isinstance(error, TransportFailure):
        return f"Network error: {error.cause}"
    return str(error)


def _fail(error: RoboatError):
    click.echo(f"\n✗ Failed: {describe_error(error)}", err=True)
    sys.exit(1)


def _make_client(ctx: click.Context) -> Client:
    options = ctx.obj
    return Client.from_config(options['config'], roblosecurity=options['roblosecurity'])


@click.group(invoke_without_command=True)
@click.option('--version', '-v', is_flag=True, help='Show version and exit')
@click.option('--roblosecurity', '-r', envvar='ROBLOSECURITY', help='.ROBLOSECURITY cookie value')
@click.option('--cookie-file', help='Path to cookie file (Netscape format or raw cookie)')
@click.option('--timeout', default=60.0, type=click.FloatRange(min=0, min_open=True), help='Request timeout in seconds')
@click.option('--proxy', help='HTTP/HTTPS proxy')
@click.option('--no-ssl-verify', is_flag=True, help='Disable SSL verification')
@click.option('--verbose', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(
    ctx,
    version: bool,
    roblosecurity: Optional[str],
    cookie_file: Optional[str],
    timeout: float,
    proxy: Optional[str],
    no_ssl_verify: bool,
    verbose: bool,
):
    """pyroboat - Upload assets to Roblox with a .ROBLOSECURITY session."""
    if version:
        click.echo(f"pyroboat version {__version__}")
        ctx.exit()

    # Enable verbose logging if requested
    if verbose:
        logging.getLogger().setLevel(logging.INFO)
        # Also enable httpx logging
        logging.getLogger('httpx').setLevel(logging.INFO)

    ctx.obj = {
        'roblosecurity': roblosecurity,
        'config': Config(
            cookie_file=cookie_file,
            timeout=timeout,
            proxy=proxy,
            verify_ssl=not no_ssl_verify,
        ),
    }

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--name', '-n', help='Asset name (default: file name)')
@click.option('--description', '-d', default='', help='Asset description')
@click.option('--type', 'asset_type', help='Asset type (default: guessed from extension)')
@click.option('--group-id', type=int, help='Upload to this group')
@click.option('--place-id', type=int, help='Place the asset is meant for')
@click.pass_context
def upload(
    ctx,
    file: str,
    name: Optional[str],
    description: str,
    asset_type: Optional[str],
    group_id: Optional[int],
    place_id: Optional[int],
):
    """Upload a file as a new asset.

    Example:
        pyroboat upload walk.rbxm --name Walk --group-id 123456
    """
    try:
        resolved_type = AssetType.from_name(asset_type) if asset_type else guess_asset_type(file)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--type')

    asset = NewStudioAsset(
        name=name or asset_name_from_path(file),
        description=description,
        asset_type=resolved_type,
        asset_data=Path(file).read_bytes(),
        group_id=group_id,
        place_id=place_id,
    )

    async def run() -> str:
        async with _make_client(ctx) as client:
            return await client.upload_studio_asset(asset)

    click.echo(f"Uploading {file} as {resolved_type.name}...")

    try:
        asset_id = asyncio.run(run())
    except RoboatError as e:
        _fail(e)

    click.echo(f"\n✓ Uploaded!")
    click.echo(f"  Asset ID: {asset_id}")


@cli.command()
@click.argument('asset_id', type=int)
@click.option('--name', '-n', default='Reuploaded animation', help='Name of the new asset')
@click.option('--description', '-d', default='', help='Description of the new asset')
@click.option('--group-id', type=int, help='Upload to this group')
@click.option('--place-id', type=int, help='Place the animation is meant for')
@click.pass_context
def reupload(
    ctx,
    asset_id: int,
    name: str,
    description: str,
    group_id: Optional[int],
    place_id: Optional[int],
):
    """Download an animation and upload it again under this session.

    Animations in an old place file only play for their owner; reuploading
    them restores them under a new ID.

    Example:
        pyroboat reupload 1234567 --group-id 123456
    """
    async def run() -> str:
        async with _make_client(ctx) as client:
            data = await client.fetch_asset_data(asset_id)
            animation = NewStudioAsset(
                name=name,
                description=description,
                asset_type=AssetType.Animation,
                asset_data=data,
                group_id=group_id,
                place_id=place_id,
            )
            return await client.upload_studio_asset(animation)

    click.echo(f"Reuploading animation {asset_id}...")

    try:
        new_id = asyncio.run(run())
    except RoboatError as e:
        _fail(e)

    click.echo(f"\n✓ Reuploaded!")
    click.echo(f"  {asset_id} -> {new_id}")


@cli.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--type', 'asset_type', help='Asset type for all files (default: guessed per file)')
@click.option('--description', '-d', default='', help='Description for every asset')
@click.option('--group-id', type=int, help='Upload to this group')
@click.option('--concurrent', '-c', default=4, type=click.IntRange(min=1), help='Max concurrent uploads')
@click.pass_context
def batch(
    ctx,
    files: Tuple[str, ...],
    asset_type: Optional[str],
    description: str,
    group_id: Optional[int],
    concurrent: int,
):
    """Upload many files concurrently, named after their file names.

    Example:
        pyroboat batch anims/*.rbxm -c 8
    """
    try:
        fixed_type = AssetType.from_name(asset_type) if asset_type else None
        tasks = [
            UploadTask(
                asset=NewStudioAsset(
                    name=asset_name_from_path(file),
                    description=description,
                    asset_type=fixed_type or guess_asset_type(file),
                    asset_data=Path(file).read_bytes(),
                    group_id=group_id,
                ),
                label=file,
            )
            for file in files
        ]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--type')

    click.echo(f"Found {len(tasks)} files to upload")
    click.echo(f"Concurrent uploads: {concurrent}")

    async def run():
        async with _make_client(ctx) as client:
            manager = UploadManager(client, max_workers=concurrent)
            manager.add_tasks(tasks)
            return await manager.execute()

    results = asyncio.run(run())

    failed = 0
    for result in results:
        if result.success:
            click.echo(f"  ✓ {result.task.label} -> {result.asset_id}")
        else:
            failed += 1
            click.echo(f"  ✗ {result.task.label}: {describe_error(result.error)}", err=True)

    click.echo(f"\nComplete: {len(results) - failed} successful, {failed} failed")
    if failed:
        sys.exit(1)


@cli.command()
def asset_types():
    """List known asset types."""
    click.echo("Available asset types:")
    click.echo()

    for asset_type in AssetType:
        click.echo(f"  • {asset_type.name} ({asset_type.value})")


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()

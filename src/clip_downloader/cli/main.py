"""Main CLI interface for Clip Downloader."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from clip_downloader import __version__
from clip_downloader.cli.utils import (
    console,
    create_download_table,
    create_progress,
    create_spinner,
    display_error_summary,
    display_success_message,
    display_warning_message,
)
from clip_downloader.domain.exceptions import (
    AuthenticationError,
    ClipDownloaderError,
    ConfigurationError,
)
from clip_downloader.domain.models.clip import ClipCollection
from clip_downloader.domain.models.credential import Credential
from clip_downloader.domain.models.download import BatchDownloadResult
from clip_downloader.infrastructure.config.yaml_provider import write_default_config
from clip_downloader.infrastructure.container import (
    Container,
    create_container,
    create_http_client,
    get_clip_service,
    get_configuration_provider,
)
from clip_downloader.infrastructure.logging_setup import configure_logging
from clip_downloader.infrastructure.twitch.auth_manager import format_remaining, utc_now

DEFAULT_CONFIG_LOCATION = "config.yml"


@click.group()
@click.version_option(version=__version__, prog_name="Twitch Clip Downloader")
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_LOCATION,
    help="Config file to read, created with placeholders if missing",
)
@click.option(
    "--state",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file to resume from and save into",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def cli(ctx: click.Context, config: Path, state: Path | None, verbose: bool) -> None:
    """
    Twitch Clip Downloader - Download every clip of a Twitch broadcaster.

    Run 'clip-info', 'download-links' and 'download-clips' one after another,
    or run 'download-clips' directly to do everything in one go.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["state_path"] = state
    ctx.obj["verbose"] = verbose

    if verbose:
        console.print(f"[dim]Using configuration: {config}[/dim]")


@cli.command()
@click.pass_context
def auth(ctx: click.Context) -> None:
    """Only check that authentication is up to date."""
    verbose = ctx.obj["verbose"]

    try:
        container = _load_container(ctx)
        credential = asyncio.run(_check_auth(container))

        remaining = format_remaining(credential.time_remaining(utc_now()))
        console.print("[green]✅ Authenticated[/green]")
        console.print(f"⏱️ Time before re-auth: {remaining}")

    except ClipDownloaderError as e:
        _fail(e, verbose)
    except Exception as e:
        _fail_unexpected(e, verbose)


@cli.command("clip-info")
@click.argument("user")
@click.option(
    "--clips",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Clip info file to store info in (default: clip_info/<user>.json)",
)
@click.pass_context
def clip_info(ctx: click.Context, user: str, clips: Path | None) -> None:
    """Get clip info for all clips of a broadcaster."""
    verbose = ctx.obj["verbose"]

    try:
        container = _load_container(ctx)
        collection = asyncio.run(_fetch_clip_info(container, user, clips))
        _report_collection(collection, "Retrieved")

    except ClipDownloaderError as e:
        _fail(e, verbose)
    except Exception as e:
        _fail_unexpected(e, verbose)


@cli.command("download-links")
@click.argument("user", required=False)
@click.option(
    "--clips",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Clip info file, takes precedence over user (default: clip_info/<user>.json)",
)
@click.pass_context
def download_links(ctx: click.Context, user: str | None, clips: Path | None) -> None:
    """Create download links for clips; needs a user or a clip info file."""
    verbose = ctx.obj["verbose"]

    try:
        container = _load_container(ctx)
        collection = asyncio.run(_create_download_links(container, user, clips))
        _report_collection(collection, "Created download links for")

    except ClipDownloaderError as e:
        _fail(e, verbose)
    except Exception as e:
        _fail_unexpected(e, verbose)


@cli.command("download-clips")
@click.argument("user", required=False)
@click.option(
    "--clips",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Clip info file, takes precedence over user (default: clip_info/<user>.json)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to download into (default: clips/<user>)",
)
@click.pass_context
def download_clips(
    ctx: click.Context, user: str | None, clips: Path | None, output: Path | None
) -> None:
    """Download clips; needs a user or a clip info file."""
    verbose = ctx.obj["verbose"]

    try:
        container = _load_container(ctx)
        result = asyncio.run(_download_clips(container, user, clips, output))
        _display_download_results(result, verbose)

    except ClipDownloaderError as e:
        _fail(e, verbose)
    except Exception as e:
        _fail_unexpected(e, verbose)


def _load_container(ctx: click.Context) -> Container:
    """Build the container, creating a config template on first run."""
    config_path: Path = ctx.obj["config_path"]

    if not config_path.exists():
        write_default_config(config_path)
        raise ConfigurationError(
            f"Created basic config file at {config_path}, please fill in information"
        )

    container = create_container(config_path, ctx.obj["state_path"])
    config_provider = get_configuration_provider(container)
    configure_logging(config_provider.get_logging_config(), ctx.obj["verbose"], console)
    return container


async def _check_auth(container: Container) -> Credential:
    async with create_http_client(container) as http_client:
        service = get_clip_service(container, http_client)
        return await service.check_auth()


async def _fetch_clip_info(container: Container, user: str, clips: Path | None) -> ClipCollection:
    async with create_http_client(container) as http_client:
        service = get_clip_service(container, http_client)
        with create_spinner() as progress:
            task = progress.add_task("Retrieving clips...", total=None)
            collection = await service.fetch_clip_info(user, clips)
            progress.update(task, description=f"Finished with {len(collection)} items")
        return collection


async def _create_download_links(
    container: Container, user: str | None, clips: Path | None
) -> ClipCollection:
    async with create_http_client(container) as http_client:
        service = get_clip_service(container, http_client)
        with create_progress() as progress:
            task = progress.add_task("Creating download urls", total=None)
            collection = await service.create_download_links(
                user, clips, on_resolved=lambda _clip: progress.advance(task)
            )
            progress.update(task, total=len(collection), description="Finished creating video urls")
        return collection


async def _download_clips(
    container: Container, user: str | None, clips: Path | None, output: Path | None
) -> BatchDownloadResult:
    async with create_http_client(container) as http_client:
        service = get_clip_service(container, http_client)
        with create_progress() as progress:
            task = progress.add_task("Downloading clips", total=None)
            result = await service.download_clips(
                user,
                clips,
                output,
                on_complete=lambda _result: progress.advance(task),
                on_planned=lambda count: progress.update(task, total=count),
            )
            progress.update(task, description="Downloaded all clips")
        return result


def _report_collection(collection: ClipCollection, verb: str) -> None:
    if collection.truncated:
        display_warning_message(
            f"{verb} {len(collection)} clips, but the clip listing stopped early. "
            "Some clips may be missing; check the log for the failed request."
        )
    else:
        display_success_message(f"{verb} {len(collection)} clips")


def _display_download_results(result: BatchDownloadResult, verbose: bool) -> None:
    """Display the results of a batch download."""
    console.print(create_download_table(result))

    if result.has_failures:
        display_error_summary([
            f"Could not download clip {failed.task.destination.name}: {failed.error_message}"
            for failed in result.failed
        ])
        if verbose:
            for failed in result.failed:
                console.print(f"[dim]  - {failed.task.video_url}[/dim]")
    elif result.total:
        display_success_message(f"Downloaded all {result.total} clips")
    else:
        display_warning_message("No clips with download links found.")


def _fail(error: ClipDownloaderError, verbose: bool) -> None:
    if isinstance(error, AuthenticationError):
        label = "Authentication Error"
    elif isinstance(error, ConfigurationError):
        label = "Configuration Error"
    else:
        label = "Error"
    console.print(f"[red]❌ {label}:[/red] {error}")
    payload = getattr(error, "payload", None)
    if payload is not None:
        console.print(payload)
    if verbose:
        console.print_exception()
    sys.exit(1)


def _fail_unexpected(error: Exception, verbose: bool) -> None:
    console.print(f"[red]❌ Unexpected Error:[/red] {error}")
    if verbose:
        console.print_exception()
    sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

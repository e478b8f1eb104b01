"""
Command-line interface for SteamDesk.

This module provides the command-line entry point for the SteamDesk
launcher generator.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Annotated, Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from steamdesk_py import __version__
from steamdesk_py.config import SteamdeskConfig
from steamdesk_py.filters import FilterPolicy, split_csv
from steamdesk_py.platform import is_linux
from steamdesk_py.steam import SteamDeskError
from steamdesk_py.sync import SyncPaths, clean, discover_games, run_sync

# Set up the console and logger; log records go to stderr
console = Console()
log_console = Console(stderr=True)
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=log_console, rich_tracebacks=True)],
)
logger = logging.getLogger("steamdesk")

T = TypeVar("T")

# Create the Typer app
app = typer.Typer(
    help="Create desktop launchers for installed Steam games.",
    add_completion=False,
)

SteamPathOption = Annotated[
    Optional[str],
    typer.Option(
        "--steam-path",
        "-s",
        help="Path to the Steam installation (defaults to ~/.local/share/Steam). "
        "Uses STEAMDESK_STEAM_PATH env var if not specified.",
    ),
]
AppDirOption = Annotated[
    Optional[str],
    typer.Option(
        "--app-dir",
        "-a",
        help="Path to the applications directory "
        "(defaults to ~/.local/share/applications). "
        "Uses STEAMDESK_APP_DIR env var if not specified.",
    ),
]
SkipKeywordsOption = Annotated[
    Optional[str],
    typer.Option(
        "--skip-keywords",
        "-k",
        help="Comma separated list of name keywords to skip "
        "(defaults to Proton,Steam Linux Runtime,Steamworks,"
        "Common Redistributables,SteamVR,Dedicated Server,Soundtrack).",
    ),
]
IgnoredAppIdsOption = Annotated[
    Optional[str],
    typer.Option(
        "--ignored-app-ids",
        "-i",
        help="Comma separated list of app IDs to skip (defaults to 480).",
    ),
]
ConfigOption = Annotated[
    Optional[str],
    typer.Option(
        "--config",
        "-c",
        help="Path to a YAML config file "
        "(defaults to ~/.config/steamdesk/config.yaml).",
    ),
]


def log_error(message: str) -> None:
    """Log an error message to both logger and console."""
    logger.error(message)
    console.print(f"[red]{message}[/red]")
    return None


def load_config(config_path: Optional[str]) -> SteamdeskConfig:
    """Load the config file named on the command line, or the default one."""
    if config_path:
        path = Path(config_path).expanduser()
        logger.debug(f"Loading configuration from {path}")
        return SteamdeskConfig.load(path)
    return SteamdeskConfig.load()


def resolve_paths(
    steam_path: Optional[str],
    app_dir: Optional[str],
    config: SteamdeskConfig,
) -> SyncPaths:
    """
    Work out the Steam root and applications directory.

    The order of precedence is:
    1. Command-line arguments
    2. Environment variables
    3. Config file
    4. Platform defaults
    """
    steam_str = steam_path or os.environ.get("STEAMDESK_STEAM_PATH")
    app_str = app_dir or os.environ.get("STEAMDESK_APP_DIR")

    return SyncPaths.resolve(
        steam_root=Path(steam_str).expanduser() if steam_str else config.steam_path,
        app_dir=Path(app_str).expanduser() if app_str else config.app_dir,
        icon_cache_dir=config.icon_cache_dir,
    )


def resolve_policy(
    skip_keywords: Optional[str],
    ignored_app_ids: Optional[str],
    config: SteamdeskConfig,
) -> FilterPolicy:
    """Build the filter policy; command-line lists replace config lists."""
    keywords = split_csv(skip_keywords) if skip_keywords else config.skip_keywords
    app_ids = split_csv(ignored_app_ids) if ignored_app_ids else config.ignored_app_ids
    return FilterPolicy.merged(skip_keywords=keywords, ignored_app_ids=app_ids)


def run_or_exit(operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a sync operation, turning fatal errors into exit code 1."""
    try:
        return operation(*args, **kwargs)
    except SteamDeskError as e:
        log_error(f"Error: {e}")
        raise typer.Exit(1) from e
    except OSError as e:
        log_error(f"Filesystem error: {e}")
        raise typer.Exit(1) from e


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output."
    ),
    json: bool = typer.Option(False, "--json", help="Output logs in JSON format."),
    version: bool = typer.Option(
        False, "--version", help="Show the application version and exit."
    ),
) -> None:
    """
    SteamDesk: desktop launchers for your installed Steam games.
    """
    if version:
        console.print(f"SteamDesk version: {__version__}")
        raise typer.Exit()

    # Configure logging level based on verbosity
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    # Configure JSON logging if requested
    if json:
        # Reconfigure logging for JSON output
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        logging.basicConfig(
            level=logging.INFO if not verbose else logging.DEBUG,
            format='{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"message": "%(message)s"}',
            datefmt="%Y-%m-%dT%H:%M:%S",
            stream=sys.stderr,
        )
        logger.debug("JSON logging enabled")

    if not is_linux():
        logger.warning("Desktop entries are only picked up by Linux desktops.")


@app.command()
def sync(
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-d",
            help="Run without writing files to disk, only discovering games.",
        ),
    ] = False,
    steam_path: SteamPathOption = None,
    app_dir: AppDirOption = None,
    skip_keywords: SkipKeywordsOption = None,
    ignored_app_ids: IgnoredAppIdsOption = None,
    config_path: ConfigOption = None,
) -> None:
    """
    Remove old Steam launchers and create one per installed game.
    """
    config = load_config(config_path)
    paths = resolve_paths(steam_path, app_dir, config)
    policy = resolve_policy(skip_keywords, ignored_app_ids, config)

    report = run_or_exit(run_sync, paths, policy, dry_run=dry_run)

    if dry_run:
        console.print(
            f"Dry run complete. Found {report.created} games, "
            f"skipped {report.skipped} tools. "
            f"Took {report.elapsed_ms:.2f} milliseconds."
        )
    else:
        console.print(
            f"Done! {report.created} shortcuts created "
            f"(skipped {report.skipped} tools) in {paths.app_dir}. "
            f"Took {report.elapsed_ms:.2f} milliseconds."
        )


@app.command()
def games(
    json_output: Annotated[
        bool, typer.Option("--json", help="Output games in JSON format.")
    ] = False,
    steam_path: SteamPathOption = None,
    skip_keywords: SkipKeywordsOption = None,
    ignored_app_ids: IgnoredAppIdsOption = None,
    config_path: ConfigOption = None,
) -> None:
    """
    List the installed games that would get a launcher.
    """
    config = load_config(config_path)
    paths = resolve_paths(steam_path, None, config)
    policy = resolve_policy(skip_keywords, ignored_app_ids, config)

    report = run_or_exit(discover_games, paths, policy)

    if json_output:
        game_data = [
            {
                "app_id": game.record.app_id,
                "name": game.record.name,
                "icon": game.icon,
                "manifest": str(game.record.manifest_path),
            }
            for game in report.games
        ]
        typer.echo(json.dumps(game_data, indent=2))
        return

    if not report.games:
        logger.info("No games found")
        return

    from rich.table import Table

    table = Table(title="Installed Games")
    table.add_column("App ID")
    table.add_column("Name")
    table.add_column("Icon")

    for game in report.games:
        table.add_row(game.record.app_id, game.record.name, game.icon)
    console.print(table)
    console.print(f"Skipped {report.skipped} tools.")


@app.command(name="clean")
def clean_command(
    app_dir: AppDirOption = None,
    config_path: ConfigOption = None,
) -> None:
    """
    Remove every launcher previously created by SteamDesk.
    """
    config = load_config(config_path)
    paths = resolve_paths(None, app_dir, config)

    removed = run_or_exit(clean, paths.app_dir)

    console.print(f"Removed {len(removed)} launchers from {paths.app_dir}.")


@app.command()
def version() -> None:
    """Show the application version and exit."""
    console.print(f"SteamDesk version: {__version__}")


if __name__ == "__main__":
    app()

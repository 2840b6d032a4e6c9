"""limitless-sync CLI - Limitless lifelogs to daily markdown files."""

import json
import logging
import sys
from dataclasses import replace
from datetime import date, datetime

import click

from .adapters.limitless_api import FetchError
from .adapters.local_storage import LocalFileStorage
from .config import ConfigError, load_config
from .core.formatter import format_day
from .core.lifelogs import LogRecord
from .core.sync_cursor import sync_start_date
from .workflows import (
    SyncInProgressError,
    get_notifier,
    get_repository,
    last_synced_date,
    sync_lifelogs,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_date(value: str | None, option: str) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date", param_hint=option)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """limitless-sync - Sync Limitless lifelogs into daily markdown files."""
    logging.basicConfig(format=LOG_FORMAT, level=logging.DEBUG if debug else logging.INFO)


@main.command()
@click.option("--from", "from_date", default=None, help="Start date (YYYY-MM-DD), overrides the sync cursor")
@click.option("--folder", default=None, help="Output folder, overrides FOLDER_PATH")
def sync(from_date: str | None, folder: str | None):
    """Sync lifelogs from the last synced day through today."""
    start = _parse_date(from_date, "--from")
    config = load_config()
    if folder:
        config = replace(config, folder_path=folder)

    try:
        result = sync_lifelogs(
            config,
            notifier=get_notifier(config, console=True),
            start_override=start,
        )
    except (ConfigError, FetchError, SyncInProgressError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {len(result.written)} day(s) to {config.output_dir()}")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to fetch (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output raw API JSON")
def fetch(target_date: str | None, as_json: bool):
    """Print one day's lifelogs without writing any file."""
    target = _parse_date(target_date, "--date")
    config = load_config()

    try:
        zone = config.zone()
        target = target or datetime.now(zone).date()
        raw = get_repository(config).fetch_day_raw(target)
    except (ConfigError, FetchError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(raw, indent=2))
        return

    if not raw:
        click.echo(f"No lifelogs for {target.isoformat()}.")
        return

    click.echo(format_day([LogRecord.from_api(lg) for lg in raw], zone))


@main.command()
def status():
    """Show the output folder and where the next sync starts."""
    config = load_config()
    folder = str(config.output_dir())

    try:
        default_start = config.default_start()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    last = last_synced_date(LocalFileStorage(), folder)
    next_start = sync_start_date(last, default_start)

    click.echo(f"Folder:      {folder}")
    click.echo(f"Last synced: {last.isoformat() if last else 'never'}")
    click.echo(f"Next start:  {next_start.isoformat()}")
    click.echo(f"API key:     {'set' if config.api_key else 'missing'}")


@main.command()
def watch():
    """Run a sync every day at SYNC_TIME."""
    from .scheduler import create_scheduler

    config = load_config()
    if not config.api_key:
        click.echo("Error: Missing Limitless API key", err=True)
        sys.exit(1)

    try:
        scheduler = create_scheduler(config)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Syncing daily at {config.sync_time}")
    click.echo("Press Ctrl+C to stop")
    try:
        scheduler.start()
    except KeyboardInterrupt:
        click.echo("\nScheduler stopped.")


if __name__ == "__main__":
    main()

"""Click CLI for eventdelta."""

import json
import os
from datetime import datetime, timezone

import click
from rich.console import Console
from rich.table import Table

from src.data.codec import SnapshotFormatError, delta_to_dict, load_snapshot
from src.data.config import get_output_settings, load_env
from src.delta.compare import changed_fields
from src.delta.differ import diff_snapshots
from src.delta.thumbnails import resolve_thumbnail

console = Console()


def _parse_now(ctx, param, value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        now = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise click.BadParameter(f"not an ISO-8601 timestamp: {value!r}")
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now


@click.group()
def cli():
    """eventdelta — change detection for event catalog snapshots."""


@cli.command()
@click.argument("previous", type=click.Path(exists=True, dir_okay=False))
@click.argument("current", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--now",
    callback=_parse_now,
    help="Comparison instant (ISO-8601). Defaults to $EVENTDELTA_NOW, then the current time.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the delta as JSON.")
def diff(previous, current, now, as_json):
    """Show sessions that changed between two snapshot files."""
    load_env()
    if now is None:
        now = _parse_now(None, None, os.environ.get("EVENTDELTA_NOW"))
    try:
        prev_snapshot = load_snapshot(previous)
        curr_snapshot = load_snapshot(current)
    except SnapshotFormatError as e:
        raise click.ClickException(str(e))

    delta = diff_snapshots(prev_snapshot, curr_snapshot, now=now)

    if as_json:
        click.echo(json.dumps(delta_to_dict(delta), indent=2, sort_keys=True))
        return

    if not delta:
        console.print("[green]No changes.[/green]")
        return

    settings = get_output_settings()
    max_rows = settings["max_rows"]

    if delta.sessions:
        table = Table(title=f"Changed Sessions ({len(delta.sessions)})")
        table.add_column("ID")
        table.add_column("Title")
        table.add_column("Changed")
        table.add_column("Update")

        for sid in sorted(delta.sessions)[:max_rows]:
            record = delta.sessions[sid]
            before = prev_snapshot.get(sid)
            fields = "new" if before is None else ", ".join(changed_fields(before, record))
            table.add_row(sid, record.title[:40], fields or "-", record.update_kind or "-")
        console.print(table)
        if len(delta.sessions) > max_rows:
            console.print(f"[yellow]... {len(delta.sessions) - max_rows} more not shown[/yellow]")

    if delta.removed:
        console.print(f"Removed: [red]{', '.join(delta.removed)}[/red]")

    if settings["show_unchanged_count"]:
        unchanged = len(curr_snapshot) - len(delta.sessions)
        console.print(f"Unchanged sessions: [green]{unchanged}[/green]")


@cli.command()
@click.argument("url")
def thumb(url):
    """Resolve a responsive-image URL template to a concrete thumbnail URL."""
    click.echo(resolve_thumbnail(url))


if __name__ == "__main__":
    cli()

"""Developer CLI for poking at the tracker engine from a terminal."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

import click

from . import dates
from .config import BaseConfig
from .context import AppContext, create_app_context
from .domain.encoding import format_schedule
from .domain.entities import TrackerFilter
from .errors import TrackdayError
from .logging_config import setup_logging
from .services.seed import run_demo_seed
from .services.visibility import BoardQuery, EmptyState

_FILTER_CHOICES = [member.value for member in TrackerFilter]


def _parse_day(value: Optional[str], ctx: AppContext) -> date:
    if not value:
        return dates.today(ctx.config.TIMEZONE)
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}") from exc


@click.group()
@click.pass_context
def cli(click_ctx: click.Context) -> None:
    """Trackday developer commands."""

    config = BaseConfig()
    setup_logging(config)
    app_ctx = create_app_context(config)
    click_ctx.obj = app_ctx
    click_ctx.call_on_close(app_ctx.dispose)


@cli.command("seed-demo")
@click.option("--days", default=14, show_default=True, help="How many past days get completions")
@click.pass_obj
def seed_demo(app_ctx: AppContext, days: int) -> None:
    """Insert demo categories, trackers and completions."""

    summary = run_demo_seed(app_ctx.service, today=dates.today(app_ctx.config.TIMEZONE), days=days)
    click.echo(
        f"Seeded {summary.categories} categories, {summary.trackers} trackers, "
        f"{summary.records} completions."
    )


@cli.command()
@click.option("--date", "day", default=None, help="Reference date (YYYY-MM-DD), default today")
@click.option("--search", default="", help="Case-insensitive name filter")
@click.option("--filter", "status", type=click.Choice(_FILTER_CHOICES), default=None)
@click.pass_obj
def board(app_ctx: AppContext, day: Optional[str], search: str, status: Optional[str]) -> None:
    """Show the trackers visible for a date."""

    reference = _parse_day(day, app_ctx)
    query = BoardQuery(reference_date=reference, search_text=search)
    if status:
        query = query.select_filter(TrackerFilter(status), dates.today(app_ctx.config.TIMEZONE))

    result = app_ctx.service.board(query)
    click.echo(f"{query.reference_date.isoformat()} ({dates.weekday_for(query.reference_date).short_name})")
    if result.empty_state is EmptyState.NOTHING_FOUND:
        click.echo("Nothing found")
        return
    if result.empty_state is EmptyState.NO_TRACKERS:
        click.echo("No trackers for this day")
        return

    for category in result.categories:
        click.echo(category.title)
        for tracker in category.trackers:
            mark = "x" if app_ctx.ledger.is_completed(tracker.id, query.reference_date) else " "
            schedule = format_schedule(tracker.schedule) or "irregular"
            count = app_ctx.service.completion_count(tracker.id)
            click.echo(f"  [{mark}] {tracker.emoji} {tracker.name} ({schedule}) {count} days  {tracker.id}")


@cli.command()
@click.pass_obj
def stats(app_ctx: AppContext) -> None:
    """Print aggregate statistics."""

    result = app_ctx.service.statistics()
    if result.is_empty:
        click.echo("Nothing to analyze yet")
        return
    click.echo(f"Best streak:        {result.best_streak}")
    click.echo(f"Perfect days:       {result.perfect_days}")
    click.echo(f"Trackers completed: {result.total_completions}")
    click.echo(f"Distinct trackers:  {app_ctx.service.finished_trackers_count()}")
    click.echo(f"Average per day:    {result.average_per_active_day:.2f}")


@cli.command()
@click.argument("tracker_id", type=click.UUID)
@click.option("--date", "day", default=None, help="Day to toggle (YYYY-MM-DD), default today")
@click.pass_obj
def toggle(app_ctx: AppContext, tracker_id: uuid.UUID, day: Optional[str]) -> None:
    """Toggle a tracker's completion for a day."""

    reference = _parse_day(day, app_ctx)
    try:
        result = app_ctx.service.toggle_completion(tracker_id, reference)
    except TrackdayError as exc:
        raise click.ClickException(str(exc)) from exc
    state = "completed" if result.now_completed else "not completed"
    click.echo(f"{tracker_id} {state} on {reference.isoformat()}")


def main() -> None:  # pragma: no cover - console script entry
    cli()

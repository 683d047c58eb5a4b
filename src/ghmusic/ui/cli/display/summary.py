"""Utilities for rendering crawl and catalog summaries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.table import Table

from ghmusic.application.services import CrawlResult


def _format_duration(seconds: Any) -> str:
    if not isinstance(seconds, int) or isinstance(seconds, bool) or seconds < 0:
        return "0:00"
    return f"{seconds // 60}:{seconds % 60:02d}"


def render_crawl_summary(console: Console, result: CrawlResult) -> None:
    """Render per-provider counts, skipped queries and output location."""

    catalog = result.catalog
    table = Table(title="Crawl summary", show_header=True, header_style="bold")
    table.add_column("Provider")
    table.add_column("Tracks added", justify="right")
    for provider, count in result.per_provider.items():
        table.add_row(provider, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{catalog.meta.total}[/bold]")
    console.print(table)

    console.print(
        f"Artists: {len(catalog.artists)}  Albums: {len(catalog.albums)}  "
        f"Playable: {sum(1 for track in catalog.tracks if track.audio)}"
    )

    if result.failures:
        console.print(f"[yellow]Skipped queries: {len(result.failures)}[/yellow]")
        for failure in result.failures:
            console.print(f"[yellow]  • {failure.provider} [{failure.query}]: {failure.error}[/yellow]")

    if result.written:
        console.print(f"[green]Wrote {len(result.written)} file(s) to {result.output_dir}[/green]")
    else:
        console.print(f"[cyan]Dry run: nothing written to {result.output_dir}[/cyan]")


def render_index_summary(console: Console, data: Mapping[str, Any], limit: int) -> None:
    """Render the meta envelope and the first ``limit`` tracks of an index document."""

    meta = data.get("meta") or {}
    tracks = [track for track in data.get("tracks") or [] if isinstance(track, dict) and track.get("id")]
    console.print(
        f"[bold]Updated:[/bold] {meta.get('updated', '?')}  "
        f"[bold]Total:[/bold] {meta.get('total', len(tracks))}  "
        f"[bold]Artists:[/bold] {len(data.get('artists') or [])}  "
        f"[bold]Albums:[/bold] {len(data.get('albums') or [])}"
    )
    if limit == 0 or not tracks:
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Time", justify="right")
    table.add_column("Audio", justify="center")
    table.add_column("Source")
    for position, track in enumerate(tracks[:limit], start=1):
        table.add_row(
            str(position),
            str(track.get("title") or ""),
            str(track.get("artist") or ""),
            _format_duration(track.get("duration")),
            "yes" if track.get("audio") else "-",
            str(track.get("source") or ""),
        )
    console.print(table)
    if len(tracks) > limit:
        console.print(f"... {len(tracks) - limit} more")

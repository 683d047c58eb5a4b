"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CrawlArgs:
    """Command line arguments for the ``crawl`` subcommand."""

    command: Literal["crawl"]
    config_path: Path | None
    output_dir: Path | None
    providers: tuple[str, ...] | None
    include_seeds: bool | None
    dry_run: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    index_path: Path | None
    config_path: Path | None
    limit: int


CLIArgs = CrawlArgs | ShowArgs

__all__ = ["CLIArgs", "CrawlArgs", "ShowArgs"]

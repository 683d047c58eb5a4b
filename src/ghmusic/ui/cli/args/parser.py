"""Command line argument parser."""

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import final

from ghmusic.config import KNOWN_PROVIDERS
from ghmusic.ui.cli.args.options import CLIArgs, CrawlArgs, ShowArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="ghmusic",
            description="ghmusic - crawl music metadata into static JSON for the browser player.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        crawl_parser = subparsers.add_parser(
            "crawl",
            help="Fetch metadata from the providers and write the static API files",
        )
        _ = crawl_parser.add_argument(
            "--config",
            type=str,
            help="Path to config.toml (default: <repo>/config/config.toml or $GHMUSIC_CONFIG)",
            metavar="PATH",
        )
        _ = crawl_parser.add_argument(
            "--output",
            type=str,
            help="Directory receiving index.json and friends",
            metavar="DIR",
        )
        _ = crawl_parser.add_argument(
            "--provider",
            action="append",
            choices=KNOWN_PROVIDERS,
            help="Provider to query; repeat to query several (default: from config)",
        )
        seeds_group = crawl_parser.add_mutually_exclusive_group()
        _ = seeds_group.add_argument(
            "--seeds",
            dest="seeds",
            action="store_const",
            const=True,
            help="Prepend the built-in demo tracks",
        )
        _ = seeds_group.add_argument(
            "--no-seeds",
            dest="seeds",
            action="store_const",
            const=False,
            help="Do not prepend the built-in demo tracks",
        )
        _ = crawl_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Build the catalog without writing files",
        )
        verbosity = crawl_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Only show warnings and errors",
        )

        show_parser = subparsers.add_parser(
            "show",
            help="Summarize an existing index.json",
        )
        _ = show_parser.add_argument(
            "index",
            nargs="?",
            type=str,
            help="Path to index.json (default: <output_dir>/index.json)",
            metavar="INDEX",
        )
        _ = show_parser.add_argument(
            "--config",
            type=str,
            help="Path to config.toml used to locate the output directory",
            metavar="PATH",
        )
        _ = show_parser.add_argument(
            "--limit",
            type=int,
            default=20,
            help="Number of tracks to list (default: %(default)s)",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Parse command line arguments into a typed options object.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Parsed arguments.
        """
        parser = ArgumentParser.create_parser()
        args = parser.parse_args(args_list)

        config_path = Path(args.config).expanduser() if args.config else None

        if args.command == "show":
            if args.limit < 0:
                parser.error("--limit must be >= 0")
            return ShowArgs(
                command="show",
                index_path=Path(args.index).expanduser() if args.index else None,
                config_path=config_path,
                limit=args.limit,
            )

        providers: tuple[str, ...] | None = None
        if args.provider:
            providers = tuple(dict.fromkeys(args.provider))

        return CrawlArgs(
            command="crawl",
            config_path=config_path,
            output_dir=Path(args.output).expanduser() if args.output else None,
            providers=providers,
            include_seeds=args.seeds,
            dry_run=args.dry_run,
            verbose=args.verbose,
            quiet=args.quiet,
        )

"""Command line interface for ghmusic."""

import logging
import sys
from typing import final

from rich.console import Console

from ghmusic.application.services import CrawlCatalogService, CrawlRequest
from ghmusic.config import Config, default_log_file, default_output_dir
from ghmusic.features.catalog import read_index
from ghmusic.features.catalog.adapters.json_writer import INDEX_FILE
from ghmusic.platform.logging import logger, setup_logger
from ghmusic.ui.cli.args import ArgumentParser, CLIArgs, CrawlArgs, ShowArgs
from ghmusic.ui.cli.display import render_crawl_summary, render_index_summary


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None, console: Console | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            console: Console receiving summaries (for testing).

        Returns:
            int: Process exit code.
        """
        out = console or Console()
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            config = Config.load(args.config_path)

            if isinstance(args, CrawlArgs):
                CommandProcessor._configure_logging(args, config)
                service = CrawlCatalogService(config)
                result = service.run(
                    CrawlRequest(
                        providers=args.providers,
                        include_seeds=args.include_seeds,
                        output_dir=args.output_dir,
                        dry_run=args.dry_run,
                    )
                )
                if not args.quiet:
                    render_crawl_summary(out, result)
                return 0

            assert isinstance(args, ShowArgs)
            index_path = args.index_path or (config.output_dir or default_output_dir()) / INDEX_FILE
            render_index_summary(out, read_index(index_path), args.limit)
            return 0

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1

    @staticmethod
    def _configure_logging(args: CrawlArgs, config: Config) -> None:
        console_level = logging.INFO
        if args.verbose:
            console_level = logging.DEBUG
        elif args.quiet:
            console_level = logging.WARNING
        _ = setup_logger(
            log_file=config.log_file or default_log_file(),
            console_level=console_level,
        )


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()


if __name__ == "__main__":
    sys.exit(main())

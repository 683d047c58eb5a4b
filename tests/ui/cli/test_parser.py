"""Tests for command line argument parser."""

from pathlib import Path

import pytest

from ghmusic.ui.cli.args import ArgumentParser, CrawlArgs, ShowArgs


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    crawl_args = parser.parse_args(["crawl"])
    assert crawl_args.command == "crawl"
    assert crawl_args.seeds is None

    show_args = parser.parse_args(["show", "public/api/index.json"])
    assert show_args.command == "show"
    assert show_args.index == "public/api/index.json"


def test_process_crawl_args() -> None:
    args = ArgumentParser.process_args(
        [
            "crawl",
            "--config",
            "conf.toml",
            "--output",
            "out",
            "--provider",
            "kugou",
            "--provider",
            "musicbrainz",
            "--provider",
            "kugou",
            "--no-seeds",
            "--dry-run",
            "--verbose",
        ]
    )

    assert isinstance(args, CrawlArgs)
    assert args.config_path == Path("conf.toml")
    assert args.output_dir == Path("out")
    assert args.providers == ("kugou", "musicbrainz")
    assert args.include_seeds is False
    assert args.dry_run and args.verbose and not args.quiet


def test_process_crawl_defaults() -> None:
    args = ArgumentParser.process_args(["crawl"])

    assert isinstance(args, CrawlArgs)
    assert args.providers is None
    assert args.include_seeds is None
    assert args.output_dir is None
    assert args.config_path is None


def test_process_show_args() -> None:
    args = ArgumentParser.process_args(["show", "--limit", "5"])

    assert isinstance(args, ShowArgs)
    assert args.index_path is None
    assert args.limit == 5


@pytest.mark.parametrize(
    "argv",
    [
        ["crawl", "--provider", "spotify"],
        ["crawl", "--verbose", "--quiet"],
        ["crawl", "--seeds", "--no-seeds"],
        ["show", "--limit", "-1"],
        [],
    ],
)
def test_invalid_arguments_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(argv)

"""Command line argument parsing."""

from .options import CLIArgs, CrawlArgs, ShowArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "CrawlArgs", "ShowArgs"]

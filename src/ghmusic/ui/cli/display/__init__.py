"""CLI display helpers."""

from .summary import render_crawl_summary, render_index_summary

__all__ = ["render_crawl_summary", "render_index_summary"]

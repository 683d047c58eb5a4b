"""Application services orchestrating feature use cases."""

from .crawl_service import CrawlCatalogService, CrawlRequest, CrawlResult, QueryFailure

__all__ = ["CrawlCatalogService", "CrawlRequest", "CrawlResult", "QueryFailure"]

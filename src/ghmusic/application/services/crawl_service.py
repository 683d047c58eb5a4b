"""Application service for building the static catalog.

This layer centralizes orchestration and construction of providers, the HTTP
client and the JSON writer so the CLI only deals with requests and results.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, final

from ghmusic.config import Config, default_output_dir
from ghmusic.features.catalog import Catalog, CatalogAccumulator, CatalogJSONWriter, merge_records
from ghmusic.features.catalog.usecases import SEED_PROFILE, CatalogProvider, seed_records
from ghmusic.features.providers import build_providers
from ghmusic.platform.http import JSONFetcher, RequestsJSONClient, resolve_user_agent
from ghmusic.platform.logging import logger
from ghmusic.shared.errors import GhmusicError


@dataclass(frozen=True)
class CrawlRequest:
    """Input parameters for one crawl run.

    Attributes:
        providers: Provider names overriding the configured list.
        include_seeds: Prepend the demo tracks; None defers to configuration.
        output_dir: Destination of the JSON files; None defers to configuration.
        dry_run: Build the catalog without writing files.
    """

    providers: tuple[str, ...] | None = None
    include_seeds: bool | None = None
    output_dir: Path | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class QueryFailure:
    """A query whose fetch failed and was skipped."""

    provider: str
    query: str
    error: str


@dataclass(frozen=True)
class CrawlResult:
    """Outcome of a crawl run."""

    catalog: Catalog
    output_dir: Path
    written: list[Path] = field(default_factory=list)
    failures: list[QueryFailure] = field(default_factory=list)
    per_provider: dict[str, int] = field(default_factory=dict)


def _default_fetcher(config: Config) -> JSONFetcher:
    user_agent = resolve_user_agent(config.mb_app_name, config.mb_app_version, config.mb_contact)
    return RequestsJSONClient(user_agent, timeout=config.http_timeout)


@final
class CrawlCatalogService:
    """Run every provider sequentially and assemble the catalog.

    A failed query is logged and skipped; it never aborts the run. When every
    query fails the catalog still holds the seed tracks.
    """

    def __init__(
        self,
        config: Config,
        *,
        fetcher_factory: Callable[[Config], JSONFetcher] | None = None,
        providers_factory: Callable[
            [Config, JSONFetcher, Sequence[str] | None], list[CatalogProvider]
        ]
        | None = None,
        writer_factory: Callable[[Path], CatalogJSONWriter] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config: Config = config
        self._fetcher_factory: Callable[[Config], JSONFetcher] = fetcher_factory or _default_fetcher
        self._providers_factory = providers_factory or build_providers
        self._writer_factory: Callable[[Path], CatalogJSONWriter] = writer_factory or CatalogJSONWriter
        self._clock: Callable[[], datetime] = clock or (lambda: datetime.now(timezone.utc))

    def resolve_output_dir(self, request: CrawlRequest) -> Path:
        return request.output_dir or self._config.output_dir or default_output_dir()

    def run(self, request: CrawlRequest) -> CrawlResult:
        """Crawl, merge and (unless dry-run) write the catalog."""

        accumulator = CatalogAccumulator()
        include_seeds = (
            self._config.include_seeds if request.include_seeds is None else request.include_seeds
        )
        if include_seeds:
            _ = merge_records(seed_records(), SEED_PROFILE, accumulator)

        fetcher = self._fetcher_factory(self._config)
        failures: list[QueryFailure] = []
        per_provider: dict[str, int] = {}
        try:
            providers = self._providers_factory(self._config, fetcher, request.providers)
            for provider in providers:
                added = self._crawl_provider(provider, accumulator, failures)
                per_provider[provider.profile.name] = added
                logger.info("%s: %d track(s)", provider.profile.name, added)
        finally:
            close = getattr(fetcher, "close", None)
            if callable(close):
                close()

        catalog = accumulator.build(self._clock())
        output_dir = self.resolve_output_dir(request)
        logger.info(
            "Catalog built: %d track(s), %d artist(s), %d album(s)",
            catalog.meta.total,
            len(catalog.artists),
            len(catalog.albums),
            extra={"crawl_event": "crawl.catalog.built", "count": catalog.meta.total},
        )

        written: list[Path] = []
        if request.dry_run:
            logger.info("Dry run: skipping write to %s", output_dir)
        else:
            written = self._writer_factory(output_dir).write(catalog)

        return CrawlResult(
            catalog=catalog,
            output_dir=output_dir,
            written=written,
            failures=failures,
            per_provider=per_provider,
        )

    def _crawl_provider(
        self,
        provider: CatalogProvider,
        accumulator: CatalogAccumulator,
        failures: list[QueryFailure],
    ) -> int:
        """Run one provider's queries in order; return the number of tracks added."""

        name = provider.profile.name
        emitted = 0
        added_total = 0
        for query in provider.queries:
            try:
                records = provider.search(query)
            except GhmusicError as exc:
                logger.warning(
                    "%s crawl [%s] failed: %s",
                    name,
                    query,
                    exc,
                    extra={
                        "crawl_event": "crawl.query.failed",
                        "provider": name,
                        "query": query,
                        "error": str(exc),
                    },
                )
                failures.append(QueryFailure(provider=name, query=query, error=str(exc)))
                continue

            before = len(accumulator.tracks)
            _ = merge_records(
                records,
                provider.profile,
                accumulator,
                resolve_audio=provider.resolve_audio,
                start=emitted,
            )
            emitted += len(records)
            added = len(accumulator.tracks) - before
            added_total += added
            logger.info(
                "%s [%s]: %d track(s)",
                name,
                query,
                added,
                extra={
                    "crawl_event": "crawl.query.done",
                    "provider": name,
                    "query": query,
                    "count": added,
                },
            )
        return added_total


__all__ = ["CrawlCatalogService", "CrawlRequest", "CrawlResult", "QueryFailure"]

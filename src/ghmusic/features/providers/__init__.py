"""Summary: Upstream providers and their construction from configuration.
Why: Let the crawl service receive ready providers without knowing their settings.
"""

from __future__ import annotations

from collections.abc import Sequence

from ghmusic.config import Config
from ghmusic.features.catalog.usecases.ports import CatalogProvider
from ghmusic.platform.http import JSONFetcher, Throttle
from ghmusic.shared.errors import ConfigError

from .kugou import KUGOU_PROFILE, KugouProvider
from .musicbrainz import MUSICBRAINZ_PROFILE, MusicBrainzProvider


def build_providers(
    config: Config,
    fetcher: JSONFetcher,
    names: Sequence[str] | None = None,
) -> list[CatalogProvider]:
    """Instantiate providers in the requested order.

    Args:
        config: Source of queries, limits and throttle intervals.
        fetcher: HTTP capability shared by every provider.
        names: Provider names overriding ``config.providers``.
    """

    providers: list[CatalogProvider] = []
    for name in names if names is not None else config.providers:
        if name == MUSICBRAINZ_PROFILE.name:
            providers.append(
                MusicBrainzProvider(
                    fetcher,
                    config.musicbrainz_queries,
                    limit=config.musicbrainz_limit,
                    throttle=Throttle(config.musicbrainz_interval),
                )
            )
        elif name == KUGOU_PROFILE.name:
            providers.append(
                KugouProvider(
                    fetcher,
                    config.kugou_keywords,
                    page_size=config.kugou_page_size,
                    mid=config.kugou_mid,
                    search_throttle=Throttle(config.kugou_search_interval),
                    resolve_throttle=Throttle(config.kugou_resolve_interval),
                )
            )
        else:
            raise ConfigError(f"Unknown provider: {name}")
    return providers


__all__ = [
    "KUGOU_PROFILE",
    "KugouProvider",
    "MUSICBRAINZ_PROFILE",
    "MusicBrainzProvider",
    "build_providers",
]

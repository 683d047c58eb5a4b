"""Shared fixtures: a scripted JSON fetcher and isolated configuration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from stubs import StubFetcher


@pytest.fixture
def stub_fetcher() -> StubFetcher:
    return StubFetcher()


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point repository-root detection and config caching at a temporary directory."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import ghmusic.config.paths as paths
    from ghmusic.config import Config

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("GHMUSIC_CONFIG", raising=False)
    Config.reset()
    yield tmp_path
    Config.reset()

"""Configuration management for ghmusic."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from ghmusic.config.file_ops import ensure_file_with_template
from ghmusic.config.paths import default_config_path
from ghmusic.platform.logging import logger
from ghmusic.shared.errors import ConfigError

KNOWN_PROVIDERS: tuple[str, ...] = ("musicbrainz", "kugou")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


def _list_field(*values: str) -> Any:
    return field(default_factory=lambda: list(values))


@dataclass
class Config:
    """Application configuration."""

    # Where the static API files are written (defaults to <repo_root>/public/api)
    output_dir: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Providers queried in order, and whether demo tracks are prepended
    providers: list[str] = _list_field(*KNOWN_PROVIDERS)
    include_seeds: bool = True

    # MusicBrainz application identity
    mb_app_name: str = "ghmusic"
    mb_app_version: str = "1.0"
    mb_contact: str = "https://github.com/user/ghmusic"

    # MusicBrainz recording search
    musicbrainz_queries: list[str] = _list_field("rock", "jazz", "electronic", "classical", "pop")
    musicbrainz_limit: int = 15
    musicbrainz_interval: float = 1.1

    # Kugou keyword search and stream resolution
    kugou_keywords: list[str] = _list_field("周杰伦", "陈奕迅", "林俊杰")
    kugou_page_size: int = 20
    kugou_search_interval: float = 0.8
    kugou_resolve_interval: float = 0.5
    kugou_mid: str = "ghmusic"

    # Connect/read timeout applied to every HTTP call, in seconds
    http_timeout: float = 15.0

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate values."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
        self.validate()

    def validate(self) -> None:
        """Raise ``ConfigError`` when a value cannot drive a crawl."""
        unknown = [name for name in self.providers if name not in KNOWN_PROVIDERS]
        if unknown:
            raise ConfigError(
                f"Unknown provider(s): {', '.join(unknown)}; expected one of {', '.join(KNOWN_PROVIDERS)}"
            )
        for name in ("musicbrainz_limit", "kugou_page_size"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        for name in (
            "musicbrainz_interval",
            "kugou_search_interval",
            "kugou_resolve_interval",
        ):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.http_timeout <= 0:
            raise ConfigError(f"http_timeout must be positive, got {self.http_timeout}")

    def render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""
        config = asdict(self)
        lines: list[str] = []

        lines.append("# ghmusic configuration file")
        lines.append("")

        lines.append("# Output directory for index.json, tracks.json, artists.json, albums.json")
        lines.append('# Example: output_dir = "/path/to/site/public/api"')
        if config["output_dir"] is not None:
            lines.append(f"output_dir = {self._format_toml_value(config['output_dir'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/ghmusic.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Providers queried in order: musicbrainz, kugou")
        lines.append(f"providers = {self._format_toml_value(config['providers'])}")
        lines.append("# Prepend the built-in demo tracks")
        lines.append(f"include_seeds = {self._format_toml_value(config['include_seeds'])}")
        lines.append("")

        lines.append("# MusicBrainz identity sent as 'AppName/Version (contact)'")
        for key in ("mb_app_name", "mb_app_version", "mb_contact"):
            lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# MusicBrainz recording search (1 request per second policy)")
        for key in ("musicbrainz_queries", "musicbrainz_limit", "musicbrainz_interval"):
            lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# Kugou keyword search and per-track stream resolution")
        for key in (
            "kugou_keywords",
            "kugou_page_size",
            "kugou_search_interval",
            "kugou_resolve_interval",
            "kugou_mid",
        ):
            lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# HTTP connect/read timeout in seconds")
        lines.append(f"http_timeout = {self._format_toml_value(config['http_timeout'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a config from parsed TOML, ignoring unknown keys with a warning."""
        known = {f.name for f in fields(cls)}
        accepted: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key '%s'", key)
                continue
            accepted[key] = value
        try:
            return cls(**accepted)
        except TypeError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one when missing.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        config_file = Path(path).expanduser().resolve() if path else default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if ensure_file_with_template(config_file, template_provider=lambda: cls().render_toml()):
            logger.info("Created default configuration at %s", config_file)

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Failed to parse {config_file}: {exc}") from exc

        instance = cls.from_mapping(config_dict)
        logger.debug("Configuration loaded from %s", config_file)
        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "KNOWN_PROVIDERS"]

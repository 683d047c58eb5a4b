"""ghmusic: build-time music catalog crawler for a static browser player."""

__version__ = "0.1.0"

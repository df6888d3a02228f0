"""Configuration for default path components."""

from hdpath.config.settings import PathDefaults

__all__ = ["PathDefaults"]

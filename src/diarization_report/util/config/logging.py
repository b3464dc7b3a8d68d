"""Logging configuration constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingConfig:
    """Default logging configuration for the CLI."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


__all__ = ["LoggingConfig"]

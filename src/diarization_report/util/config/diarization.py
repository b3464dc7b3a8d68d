# Diarization tuning settings passed to the engine
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


class Automatic:
    """Let the engine decide (cluster count) or apply no cap (speaker limit)."""

    _instance: Optional["Automatic"] = None

    def __new__(cls) -> "Automatic":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "AUTOMATIC"


AUTOMATIC = Automatic()


@dataclass(frozen=True)
class Fixed:
    count: int


SpeakerCount = Union[Automatic, Fixed]

# CLI sentinel for "automatic" / "unlimited"
AUTO_SENTINEL = -1


def speaker_count_from_int(value: int) -> SpeakerCount:
    """Map a command-line integer onto a speaker count (``-1`` → automatic)."""
    if value == AUTO_SENTINEL:
        return AUTOMATIC
    if value < 1:
        raise ValueError(f"speaker count must be -1 or a positive integer, got {value}")
    return Fixed(value)


def speaker_count_to_int(value: SpeakerCount) -> int:
    return value.count if isinstance(value, Fixed) else AUTO_SENTINEL


def describe_speaker_count(value: SpeakerCount, auto_label: str) -> str:
    return str(value.count) if isinstance(value, Fixed) else auto_label


@dataclass(frozen=True)
class DiarizationConfig:
    clustering_threshold: float = 0.7
    num_clusters: SpeakerCount = AUTOMATIC   # Automatic → engine picks the count
    max_speakers: SpeakerCount = AUTOMATIC   # Automatic → unlimited
    debug_mode: bool = False

# Config dataclass exports.
# Re-export config dataclasses so callers can do:
#   from diarization_report.util.config import DiarizationConfig, ...

from .diarization import (
    AUTO_SENTINEL,
    AUTOMATIC,
    Automatic,
    DiarizationConfig,
    describe_speaker_count,
    Fixed,
    SpeakerCount,
    speaker_count_from_int,
    speaker_count_to_int,
)
from .logging import LoggingConfig
from .model import ModelConfig

__all__ = [
    "AUTO_SENTINEL",
    "AUTOMATIC",
    "Automatic",
    "DiarizationConfig",
    "describe_speaker_count",
    "Fixed",
    "LoggingConfig",
    "ModelConfig",
    "SpeakerCount",
    "speaker_count_from_int",
    "speaker_count_to_int",
]

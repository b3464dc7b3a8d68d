"""Error taxonomy for the process-with-config command."""

from __future__ import annotations


class DiarizationReportError(Exception):
    """Base class for terminal failures; ``main`` maps them to an exit code."""

    exit_code: int = 1


class UsageError(DiarizationReportError):
    """Missing or invalid invocation."""


class InitializationError(DiarizationReportError):
    """The diarization model could not be acquired."""


class ReportIOError(DiarizationReportError, OSError):
    """Reading the input audio or writing the report failed."""


class AudioIOError(ReportIOError):
    pass


class ReportWriteError(ReportIOError):
    pass


class ProcessingError(DiarizationReportError):
    """The diarization engine failed while processing the audio."""


__all__ = [
    "AudioIOError",
    "DiarizationReportError",
    "InitializationError",
    "ProcessingError",
    "ReportIOError",
    "ReportWriteError",
    "UsageError",
]

"""Command-line scanning for ``process-with-config``.

The first token is always the audio path. The remaining tokens are walked by
an :class:`ArgCursor`, which advances by one token for switches and by two for
flags that take a value. Parsing is lenient: unknown flags and malformed
numbers are reported through the logger and otherwise ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TypeVar

from ..errors import UsageError
from .config import (
    AUTO_SENTINEL,
    AUTOMATIC,
    DiarizationConfig,
    LoggingConfig,
    SpeakerCount,
    speaker_count_from_int,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
HELP_FLAGS = ("-h", "--help")


class ArgCursor:
    """Forward-only cursor over a token list."""

    def __init__(self, tokens: Sequence[str], start: int = 0) -> None:
        self._tokens = list(tokens)
        self._pos = start

    @property
    def position(self) -> int:
        return self._pos

    def exhausted(self) -> bool:
        return self._pos >= len(self._tokens)

    def next(self) -> str:
        if self.exhausted():
            raise IndexError("no tokens left")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def take_value(self) -> Optional[str]:
        """Consume the token after a flag; ``None`` when the flag was last."""
        if self.exhausted():
            return None
        return self.next()


@dataclass(frozen=True)
class CommandOptions:
    audio_path: str
    threshold: float = 0.7
    num_clusters: SpeakerCount = AUTOMATIC
    max_speakers: SpeakerCount = AUTOMATIC
    debug: bool = False
    output: Optional[str] = None
    log_level: str = LoggingConfig().level
    unknown_flags: tuple[str, ...] = ()


def _lenient(flag: str, raw: str, convert: Callable[[str], T], default: T) -> T:
    try:
        return convert(raw)
    except ValueError:
        logger.warning("Invalid value for %s: %r; using default %s", flag, raw, default)
        return default


def _speaker_count(raw: str) -> SpeakerCount:
    return speaker_count_from_int(int(raw))


def _log_level(raw: str) -> str:
    level = raw.upper()
    if level not in LOG_LEVELS:
        raise ValueError(raw)
    return level


def parse_command_line(argv: Sequence[str]) -> CommandOptions:
    """Parse ``argv`` (without the program name) into :class:`CommandOptions`.

    Raises :class:`UsageError` when no audio path is given. A leading
    ``-h``/``--help`` raises it with ``exit_code`` 0.
    """

    if not argv:
        raise UsageError("No audio file specified")
    audio_path = argv[0]
    if audio_path in HELP_FLAGS:
        err = UsageError("Help requested")
        err.exit_code = 0
        raise err
    if audio_path.startswith("-"):
        raise UsageError(f"No audio file specified (got option {audio_path!r} first)")

    defaults = CommandOptions(audio_path=audio_path)
    threshold = defaults.threshold
    num_clusters = defaults.num_clusters
    max_speakers = defaults.max_speakers
    debug = defaults.debug
    output = defaults.output
    log_level = defaults.log_level
    unknown: list[str] = []

    cursor = ArgCursor(argv, start=1)
    while not cursor.exhausted():
        flag = cursor.next()
        if flag == "--debug":
            debug = True
            continue

        if flag not in ("--threshold", "--num-clusters", "--max-speakers", "--output", "--log-level"):
            logger.warning("Unknown option: %s", flag)
            unknown.append(flag)
            continue

        raw = cursor.take_value()
        if raw is None:
            logger.debug("Option %s given without a value; ignoring", flag)
            break

        if flag == "--threshold":
            threshold = _lenient(flag, raw, float, defaults.threshold)
        elif flag == "--num-clusters":
            num_clusters = _lenient(flag, raw, _speaker_count, AUTOMATIC)
        elif flag == "--max-speakers":
            max_speakers = _lenient(flag, raw, _speaker_count, AUTOMATIC)
        elif flag == "--output":
            output = raw
        else:
            log_level = _lenient(flag, raw, _log_level, defaults.log_level)

    return CommandOptions(
        audio_path=audio_path,
        threshold=threshold,
        num_clusters=num_clusters,
        max_speakers=max_speakers,
        debug=debug,
        output=output,
        log_level="DEBUG" if debug else log_level,
        unknown_flags=tuple(unknown),
    )


def build_config(options: CommandOptions) -> DiarizationConfig:
    """Map parsed options onto the frozen engine configuration."""
    return DiarizationConfig(
        clustering_threshold=options.threshold,
        num_clusters=options.num_clusters,
        max_speakers=options.max_speakers,
        debug_mode=options.debug,
    )


USAGE = f"""\
Usage: process-with-config <audio_file> [options]

Options:
    --threshold <value>     Clustering threshold (0.0-1.0, default: 0.7)
    --num-clusters <count>  Expected number of speakers ({AUTO_SENTINEL} for automatic, default: {AUTO_SENTINEL})
    --max-speakers <count>  Maximum number of speakers allowed ({AUTO_SENTINEL} for unlimited, default: {AUTO_SENTINEL})
    --output <file>         Output JSON file (default: stdout)
    --debug                 Enable debug output
    --log-level <level>     Logging verbosity ({"/".join(LOG_LEVELS)}, default: {LoggingConfig().level})
"""


__all__ = [
    "ArgCursor",
    "CommandOptions",
    "LOG_LEVELS",
    "USAGE",
    "build_config",
    "parse_command_line",
]

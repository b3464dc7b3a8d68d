#!/usr/bin/env python3
# process-with-config
# Pipeline: parse flags → DiarizationConfig → load pyannote models → load audio (16 kHz)
# → diarize (timed) → metrics → JSON report → file or stdout

from __future__ import annotations
import logging
import os
import sys
from typing import Optional, Sequence

# --- configs ---
from .util.config import LoggingConfig
from .util.argv import USAGE, build_config, parse_command_line

# --- core steps ---
from .domain import AudioLoader, DiarizationEngine, ModelProvider
from .errors import DiarizationReportError, UsageError
from .features import encode_report, run_pipeline, write_report


logger = logging.getLogger(__name__)


LOG = LoggingConfig()

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def default_collaborators() -> tuple[ModelProvider, AudioLoader, DiarizationEngine]:
    """pyannote + soundfile implementations (imported late, they are heavy)."""
    from .adapters.audio_loader import SoundfileAudioLoader
    from .adapters.pyannote_engine import PyannoteDiarizationEngine, PyannoteModelProvider

    return PyannoteModelProvider(), SoundfileAudioLoader(), PyannoteDiarizationEngine()


def print_usage() -> None:
    print(USAGE)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    provider: Optional[ModelProvider] = None,
    loader: Optional[AudioLoader] = None,
    engine: Optional[DiarizationEngine] = None,
    configure_logging: bool = True,
) -> int:
    """Run ``process-with-config`` and return the process exit code."""

    args = list(sys.argv[1:] if argv is None else argv)

    # stderr only; stdout carries the JSON report
    if configure_logging:
        logging.basicConfig(
            level=LOG_LEVELS.get(LOG.level, logging.INFO),
            format=LOG.format,
            force=True,
        )

    try:
        options = parse_command_line(args)
    except UsageError as exc:
        if exc.exit_code:
            logger.error("%s", exc)
        print_usage()
        return exc.exit_code

    if configure_logging:
        logging.getLogger().setLevel(LOG_LEVELS.get(options.log_level, logging.INFO))
    logger.debug("Logging initialized at %s", options.log_level)

    config = build_config(options)

    try:
        if provider is None or loader is None or engine is None:
            real_provider, real_loader, real_engine = default_collaborators()
            provider = provider or real_provider
            loader = loader or real_loader
            engine = engine or real_engine

        result = run_pipeline(
            options.audio_path,
            config,
            provider=provider,
            loader=loader,
            engine=engine,
        )
        write_report(encode_report(result.report), options.output)
    except DiarizationReportError as exc:
        logger.error("%s", exc)
        return exc.exit_code

    return 0


if __name__ == "__main__":
    os.environ.setdefault("PYTHONUNBUFFERED", "1")
    raise SystemExit(main())

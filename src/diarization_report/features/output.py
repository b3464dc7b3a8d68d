"""Report destination: a file when ``--output`` is given, stdout otherwise."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..errors import ReportWriteError
from ..util.helpers import atomic_write_text

logger = logging.getLogger(__name__)


def write_report(encoded: str, output: Optional[str | Path] = None, stream: Optional[TextIO] = None) -> None:
    if output is None:
        print(encoded, file=stream or sys.stdout)
        return

    path = Path(output)
    try:
        atomic_write_text(path, encoded)
    except OSError as exc:
        raise ReportWriteError(f"Failed to write results to {path}: {exc}") from exc
    logger.info("Results saved to: %s", path)

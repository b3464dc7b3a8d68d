from __future__ import annotations
import pathlib


def atomic_write_text(path: str | pathlib.Path, text: str) -> None:
    """Safe text write: write to .tmp then replace."""
    path = pathlib.Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            f.write(text)
        tmp.replace(path)
    finally:
        tmp.unlink(missing_ok=True)

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file in full, skipping bytes that do not decode."""
    text = Path(path).read_text(encoding=encoding, errors="ignore")
    logger.debug("Loaded %d characters from %s", len(text), path)
    return text


def write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Write ``text`` to ``path``, creating parent folders as needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding=encoding)


__all__ = ["load_text", "write_text"]

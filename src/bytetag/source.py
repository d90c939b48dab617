"""Loading text samples from disk."""

import logging
from pathlib import Path

from .errors import EmptySourceError

log = logging.getLogger(__name__)


def get_sample(path: str | Path) -> str:
    """
    Read a UTF-8 text sample.

    :param path: File to read.
    :returns: The full file content.
    :raises EmptySourceError: If the file is empty.
    :raises OSError: If the file cannot be read (e.g. it does not exist).
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if not text:
        raise EmptySourceError(path=str(path))
    log.debug(f"loaded {len(text)} chars from {path}")
    return text


__all__ = ["get_sample"]

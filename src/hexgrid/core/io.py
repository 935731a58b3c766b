from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


class LoadError(OSError):
    """Raised when a file cannot be read into a byte buffer."""


def load(path: str) -> bytes:
    """Read the whole file at `path` into an immutable byte buffer.

    - Directories, missing files and permission problems raise `LoadError`.
    - An empty file yields b"".
    """
    if os.path.isdir(path):
        raise LoadError(f"Not a file: {path}")
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except FileNotFoundError:
        raise LoadError(f"File not found: {path}") from None
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e.strerror or e}") from e
    logger.debug("loaded %d bytes from %s", len(data), path)
    return bytes(data)

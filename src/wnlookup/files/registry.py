"""FileHandleRegistry — one open handle per database file.

Handles are opened on first use and kept until the registry is closed.
Every read names its own offset, so callers never share a file cursor.

Example:
    >>> with FileHandleRegistry() as registry:
    ...     header = registry.read_at("dict/index.noun", 0, 64)
    ...     size = registry.length("dict/index.noun")
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


class FileHandleRegistry:
    """Cache of read-only binary file handles keyed by absolute path."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._handles: dict[str, BinaryIO] = {}
        self._lock = threading.Lock()
        self._log = log or logger

    @staticmethod
    def _key(path: str | Path) -> str:
        return os.path.abspath(os.fspath(path))

    def open(self, path: str | Path) -> BinaryIO:
        """Return the cached handle for ``path``, opening it on first use.

        Raises:
            FileNotFoundError: if ``path`` does not exist
        """
        key = self._key(path)
        with self._lock:
            handle = self._handles.get(key)
            if handle is None:
                handle = open(key, "rb")
                self._handles[key] = handle
                self._log.debug("Opened %s", key)
            return handle

    def read_at(self, path: str | Path, offset: int, size: int) -> bytes:
        """Read up to ``size`` bytes at byte ``offset`` of ``path``.

        Returns fewer bytes (possibly none) at end of file.
        """
        handle = self.open(path)
        if hasattr(os, "pread"):
            return os.pread(handle.fileno(), size, offset)
        # No positioned reads on this platform: serialize seek+read
        with self._lock:
            handle.seek(offset)
            return handle.read(size)

    def length(self, path: str | Path) -> int:
        """Total size of ``path`` in bytes."""
        return os.fstat(self.open(path).fileno()).st_size

    def close(self) -> None:
        """Close every cached handle."""
        with self._lock:
            handles = list(self._handles.items())
            self._handles.clear()
        for key, handle in handles:
            handle.close()
            self._log.debug("Closed %s", key)

    def __contains__(self, path: str | Path) -> bool:
        return self._key(path) in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __enter__(self) -> FileHandleRegistry:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

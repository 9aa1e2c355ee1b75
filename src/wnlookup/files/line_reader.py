"""RandomAccessLineReader — fetch the data line that starts at a byte offset.

Synset offsets in data.* files are byte offsets of their lines, so a sense
is one positioned read away. Lines vary in length (long glosses, many
pointers), so the buffer grows window by window until it holds a newline.
"""

from __future__ import annotations

import logging
from typing import Protocol

from wnlookup.core import trace
from wnlookup.core.errors import InvalidOffset, MalformedRecord

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 1024


class ReadableSource(Protocol):
    """Anything that can read ``size`` bytes at ``offset``."""

    path: object

    def read(self, offset: int, size: int) -> bytes: ...


class RandomAccessLineReader:
    """Read one text line at a known byte offset.

    Example:
        >>> reader = RandomAccessLineReader()
        >>> reader.read_line_at(data_file, 2346409)
        '02346409 40 v 01 export 0 009 @ 02260362 v 0000 ...'
    """

    def __init__(
        self,
        window: int = DEFAULT_WINDOW,
        encoding: str = "utf-8",
        log: logging.Logger | None = None,
    ) -> None:
        if window < 1:
            raise ValueError(f"window must be positive, got {window}")
        self.window = window
        self.encoding = encoding
        self._log = log or logger

    def read_line_at(self, source: ReadableSource, offset: int) -> str:
        """Return the line starting at ``offset``, trailing whitespace removed.

        Raises:
            InvalidOffset: if ``offset`` is not a positive integer or lies
                past the end of the file
            MalformedRecord: if the line cannot be decoded
        """
        if isinstance(offset, bool) or not isinstance(offset, int) or offset <= 0:
            raise InvalidOffset(f"Expected a positive synset offset, got {offset!r}")

        buffer = source.read(offset, self.window)
        if not buffer:
            raise InvalidOffset(f"Offset {offset} is past the end of {source.path}")

        while b"\n" not in buffer:
            read_from = offset + len(buffer)
            trace(self._log, "Read more from %d", read_from)
            chunk = source.read(read_from, self.window)
            if not chunk:
                break  # last line without a trailing newline
            buffer += chunk

        raw = buffer.split(b"\n", 1)[0]
        try:
            return raw.decode(self.encoding).rstrip()
        except UnicodeDecodeError as e:
            raise MalformedRecord(
                f"Undecodable line at offset {offset} of {source.path}: {e}"
            ) from e

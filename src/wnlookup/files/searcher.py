"""SortedFileSearcher — binary search over a sorted text file on disk.

Index files are sorted by lemma but their lines vary in length, so the
search works on byte offsets rather than line numbers. Every probe reads a
small window, finds the first complete line that starts at or after the
probe position and compares its leading key with the target:

    probe ──► ...tail of some line\\nabandon n 5 3 @ ~ + 5 1 00...\\n...
                                  └─ candidate key

A window too small to hold that line is grown (x1.5) and the probe
repeated; once the remaining span fits inside the window it is shrunk
(x0.8) so late probes stay cheap. Nothing is read ahead of time and nothing
is kept between searches.

Each comparison narrows an explicit [low, high] byte interval: a smaller
key moves ``high`` below the probe, a larger one moves ``low`` past the
candidate line. Halving the previous probe position instead can skip a
line that sits between two probes. A read cut short by end of file is taken
as is (never padded with null bytes), and a probe that finds no complete
line before end of file moves ``high`` below itself.
"""

from __future__ import annotations

import logging
import re

from wnlookup.core import DEFAULT_CONFIG, trace
from wnlookup.files.line_reader import ReadableSource

logger = logging.getLogger(__name__)

# Newline, key token, a space, the rest of the line, newline.
# Header lines start with a space and never match.
_LINE = re.compile(rb"\n(\S+) ([^\n]*)\n")


class SortedFileSearcher:
    """Locate the line whose first token equals a key.

    Keys are compared as bytes (ordinal order), the order WordNet writes
    its index files in.

    Example:
        >>> searcher = SortedFileSearcher()
        >>> searcher.find(index_file, index_file.size, "import")
        'import v 3 5 ! @ ~ + ; 3 1 02346136 02232722 00932636'
    """

    def __init__(
        self,
        window: int = DEFAULT_CONFIG.search_window,
        grow_factor: float = DEFAULT_CONFIG.grow_factor,
        shrink_factor: float = DEFAULT_CONFIG.shrink_factor,
        min_window: int = DEFAULT_CONFIG.min_window,
        encoding: str = DEFAULT_CONFIG.encoding,
        log: logging.Logger | None = None,
    ) -> None:
        if grow_factor <= 1:
            raise ValueError(f"grow_factor must be > 1, got {grow_factor}")
        if not 0 < shrink_factor < 1:
            raise ValueError(f"shrink_factor must be in (0, 1), got {shrink_factor}")
        if window < min_window:
            raise ValueError(f"window {window} is below min_window {min_window}")
        self.window = window
        self.grow_factor = grow_factor
        self.shrink_factor = shrink_factor
        self.min_window = min_window
        self.encoding = encoding
        self._log = log or logger

    def find(self, source: ReadableSource, file_size: int, key: str) -> str | None:
        """Return the full line keyed by ``key``, or None if absent.

        Args:
            source: File to search (see ReadableSource)
            file_size: Total length of the file in bytes
            key: Exact leading token sought
        """
        target = key.encode(self.encoding)
        if not target or b" " in target or b"\n" in target:
            return None

        # The target line, if present, starts within [low, high]
        low, high = 0, file_size
        window = self.window
        probes = 0

        while low <= high:
            pos = (low + high) // 2
            # Read from one byte early so a line starting exactly at pos
            # is preceded by its newline
            start = max(pos - 1, 0)
            buffer = source.read(start, window)
            base = start
            if pos == 0:
                buffer = b"\n" + buffer
                base = -1
            at_eof = start + window >= file_size
            if at_eof and not buffer.endswith(b"\n"):
                buffer += b"\n"
            probes += 1

            match = _LINE.search(buffer)
            if match is None:
                if at_eof:
                    # No complete line starts at or after pos
                    high = pos - 1
                    continue
                window = int(window * self.grow_factor) + 1
                trace(
                    self._log, "[%s] no line within window at %d, growing to %d",
                    key, pos, window,
                )
                continue

            candidate = match.group(1)
            trace(
                self._log, "[%s] probe %d at %d/%d: %r",
                key, probes, pos, file_size, candidate,
            )
            if candidate == target:
                self._log.debug("[%s] found after %d probes", key, probes)
                return match.group(0)[1:].decode(self.encoding).rstrip()

            if target < candidate:
                high = pos - 1
            else:
                low = base + match.end()

            if high - low <= window:
                window = int(window * self.shrink_factor)
                if window < self.min_window:
                    self._log.debug(
                        "[%s] window fell below %d bytes", key, self.min_window,
                    )
                    return None

        self._log.debug("[%s] not found after %d probes", key, probes)
        return None

"""Configuration for on-disk WordNet lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

# Log level below DEBUG for per-probe search detail
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def trace(log, msg: str, *args) -> None:
    """Emit a TRACE record on ``log``.

    Injected sinks may expose ``trace()`` directly; a logging.Logger does
    not, so it gets ``log(TRACE, ...)``.
    """
    emit = getattr(log, "trace", None)
    if emit is not None:
        emit(msg, *args)
    else:
        log.log(TRACE, msg, *args)


@dataclass
class LookupConfig:
    """Configuration for the lookup engine.

    Attributes:
        data_dir: Directory holding index.* and data.* files (None = discover)
        line_window: Bytes read per step when fetching a data line
        search_window: Initial probe window of the index binary search
        grow_factor: Window growth when a probe captures no complete line
        shrink_factor: Window shrink once the search span fits in the window
        min_window: Probe window floor; below it the search gives up
        encoding: Text encoding of the database files
    """

    data_dir: str | Path | None = None
    line_window: int = 1024
    search_window: int = 127
    grow_factor: float = 1.5
    shrink_factor: float = 0.8
    min_window: int = 10
    encoding: str = "utf-8"


# Global default config
DEFAULT_CONFIG = LookupConfig()

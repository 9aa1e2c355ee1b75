"""PointerResolutionCache — lazy, memoized dereferencing of pointers.

Records carry pointers as (symbol, offset, pos). Turning them into Sense
objects costs one data-file read each, so it happens on first access and the
result is stored on the owning record. Results are never shared between
records: two records asking for the same symbol get their own answers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from wnlookup.core.pos import PartOfSpeech
from wnlookup.core.records import IndexRecord, Pointer, Sense

if TYPE_CHECKING:
    from wnlookup.files.source import DataFile

logger = logging.getLogger(__name__)

# Maps a part of speech to the DataFile holding its synsets
DataFileProvider = Callable[[PartOfSpeech], "DataFile"]


class PointerResolutionCache:
    """Load senses for index records and resolve relation pointers.

    Args:
        data_files: Callable returning the DataFile for a part of speech
        log: Logger for load activity
    """

    def __init__(
        self,
        data_files: DataFileProvider,
        log: logging.Logger | None = None,
    ) -> None:
        self._data_files = data_files
        self._log = log or logger

    def load_sense(self, synset_offset: int, pos: PartOfSpeech) -> Sense:
        """Read, parse and bind the synset at ``synset_offset``."""
        sense = self._data_files(pos).sense_at(synset_offset)
        return sense.bind(self)

    def load_senses(self, record: IndexRecord) -> list[Sense]:
        """One bound Sense per synset offset of ``record``, in order."""
        self._log.debug("Loading %d senses of %s", len(record.synset_offsets), record.word)
        return [self.load_sense(offset, record.pos) for offset in record.synset_offsets]

    def resolve_from_record(self, record: IndexRecord, symbol: str) -> list[Sense]:
        """Targets of ``symbol`` pointers across all senses of ``record``."""
        cached = record._relations.get(symbol)
        if cached is None:
            pointers = (
                pointer
                for sense in record.senses
                for pointer in sense.pointers
            )
            cached = self._deref(pointers, symbol, record)
            record._relations[symbol] = cached
        return list(cached)

    def resolve_from_sense(self, sense: Sense, symbol: str) -> list[Sense]:
        """Targets of ``symbol`` pointers of ``sense``."""
        cached = sense._relations.get(symbol)
        if cached is None:
            cached = self._deref(sense.pointers, symbol, sense)
            sense._relations[symbol] = cached
        return list(cached)

    def _deref(
        self,
        pointers: Iterable[Pointer],
        symbol: str,
        owner: IndexRecord | Sense,
    ) -> tuple[Sense, ...]:
        senses = tuple(
            self.load_sense(pointer.synset_offset, pointer.pos)
            for pointer in pointers
            if pointer.symbol == symbol
        )
        self._log.debug("Resolved %r of %s: %d senses", symbol, owner, len(senses))
        return senses

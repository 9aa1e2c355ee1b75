"""Wordnet — look words up in a WordNet database on disk.

Ties each part of speech to its index/data file pair and exposes the
word → entries → senses → related senses traversal:

    >>> wn = Wordnet("/usr/share/wordnet/dict")
    >>> entry = wn.find_verb("import")
    >>> entry.synset_offsets
    (2346136, 2232722, 932636)
    >>> [str(s) for s in entry.senses[0].antonym]
    ['export']

Nothing is loaded up front: every lookup is a binary search over the index
file followed by positioned reads of the data file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from wnlookup.core import DEFAULT_CONFIG, LookupConfig
from wnlookup.core.errors import ConfigError
from wnlookup.core.pos import SEARCH_ORDER, PartOfSpeech
from wnlookup.core.records import IndexRecord, Sense
from wnlookup.core.resolver import PointerResolutionCache
from wnlookup.data.locate import check_data_dir, find_data_dir
from wnlookup.files import (
    DataFile,
    FileHandleRegistry,
    IndexFile,
    RandomAccessLineReader,
    SortedFileSearcher,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize(word: str) -> str:
    """Lemma form used by index files: lowercase, spaces as underscores."""
    return _WHITESPACE.sub("_", word.strip().lower())


class Wordnet:
    """Lookup facade over one WordNet data directory.

    Args:
        data_dir: Directory with index.* and data.* files. Falls back to
            ``config.data_dir`` and then to find_data_dir().
        config: Window sizes and search tuning (default: DEFAULT_CONFIG)
        registry: Shared FileHandleRegistry. When omitted the Wordnet
            creates its own and closes it in close().
        log: Logger for all components, or any object with debug, info,
            warn and trace methods (default: module loggers, which discard
            records unless logging is configured)

    Raises:
        ConfigError: if the data directory does not exist
    """

    def __init__(
        self,
        data_dir: str | Path | None = None,
        config: LookupConfig | None = None,
        registry: FileHandleRegistry | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._log = log or logger

        data_dir = data_dir or self.config.data_dir
        self.data_dir = check_data_dir(data_dir) if data_dir else find_data_dir()

        self._owns_registry = registry is None
        self.registry = registry or FileHandleRegistry(log=log)

        self.searcher = SortedFileSearcher(
            window=self.config.search_window,
            grow_factor=self.config.grow_factor,
            shrink_factor=self.config.shrink_factor,
            min_window=self.config.min_window,
            encoding=self.config.encoding,
            log=log,
        )
        self.reader = RandomAccessLineReader(
            window=self.config.line_window,
            encoding=self.config.encoding,
            log=log,
        )
        self.resolver = PointerResolutionCache(self.data_file, log=log)

        self._index_files: dict[PartOfSpeech, IndexFile] = {}
        self._data_files: dict[PartOfSpeech, DataFile] = {}
        self._log.info("Wordnet data directory: %s", self.data_dir)

    # ── Files ────────────────────────────────────────────────

    def index_file(self, pos: PartOfSpeech | str) -> IndexFile:
        """The index file of ``pos``, opened on first use.

        Raises:
            ConfigError: if the file is missing from the data directory
        """
        pos = PartOfSpeech.parse(pos)
        if pos not in self._index_files:
            try:
                self._index_files[pos] = IndexFile(
                    self.data_dir, pos, self.registry, self.searcher,
                )
            except FileNotFoundError as e:
                raise ConfigError(f"Missing index file: {e.filename}") from e
        return self._index_files[pos]

    def data_file(self, pos: PartOfSpeech | str) -> DataFile:
        """The data file of ``pos``, opened on first use.

        Raises:
            ConfigError: if the file is missing from the data directory
        """
        pos = PartOfSpeech.parse(pos)
        if pos not in self._data_files:
            try:
                self._data_files[pos] = DataFile(
                    self.data_dir, pos, self.registry, self.reader,
                )
            except FileNotFoundError as e:
                raise ConfigError(f"Missing data file: {e.filename}") from e
        return self._data_files[pos]

    # ── Lookup ───────────────────────────────────────────────

    normalize = staticmethod(normalize)

    def find(self, word: str, pos: PartOfSpeech | str) -> IndexRecord | None:
        """Index entry of ``word`` for one part of speech, or None."""
        pos = PartOfSpeech.parse(pos)
        lemma = normalize(word)
        if not lemma:
            return None
        record = self.index_file(pos).find(lemma)
        if record is None:
            self._log.debug("No %s entry for %r", pos.name.lower(), lemma)
            return None
        return record.bind(self.resolver)

    def find_all(self, word: str) -> list[IndexRecord]:
        """Index entries of ``word`` for every part of speech it has.

        Order: noun, verb, adjective, adverb.
        """
        entries = []
        for pos in SEARCH_ORDER:
            record = self.find(word, pos)
            if record is not None:
                entries.append(record)
        return entries

    def find_noun(self, word: str) -> IndexRecord | None:
        return self.find(word, PartOfSpeech.NOUN)

    def find_verb(self, word: str) -> IndexRecord | None:
        return self.find(word, PartOfSpeech.VERB)

    def find_adjective(self, word: str) -> IndexRecord | None:
        return self.find(word, PartOfSpeech.ADJECTIVE)

    def find_adverb(self, word: str) -> IndexRecord | None:
        return self.find(word, PartOfSpeech.ADVERB)

    def sense_at(self, synset_offset: int, pos: PartOfSpeech | str) -> Sense:
        """The synset at ``synset_offset`` of the data file of ``pos``."""
        return self.resolver.load_sense(synset_offset, PartOfSpeech.parse(pos))

    # ── Lifecycle ────────────────────────────────────────────

    def close(self) -> None:
        """Close file handles, unless the registry was supplied by the caller."""
        if self._owns_registry:
            self.registry.close()
        self._index_files.clear()
        self._data_files.clear()

    def __enter__(self) -> Wordnet:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Wordnet({str(self.data_dir)!r})"

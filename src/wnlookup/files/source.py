"""Index and data files of one part of speech."""

from __future__ import annotations

from pathlib import Path

from wnlookup.core.pos import PartOfSpeech
from wnlookup.core.records import IndexRecord, Sense
from wnlookup.files.line_reader import RandomAccessLineReader
from wnlookup.files.registry import FileHandleRegistry
from wnlookup.files.searcher import SortedFileSearcher
from wnlookup.parsing import parse_data_line, parse_index_line


class SourceFile:
    """A database file read through a shared FileHandleRegistry."""

    prefix = ""

    def __init__(
        self,
        data_dir: str | Path,
        pos: PartOfSpeech,
        registry: FileHandleRegistry,
    ) -> None:
        self.pos = pos
        self.path = Path(data_dir) / f"{self.prefix}.{pos.file_suffix}"
        self.registry = registry
        # Opens the file; FileNotFoundError if it is missing
        self.size = registry.length(self.path)

    def read(self, offset: int, size: int) -> bytes:
        return self.registry.read_at(self.path, offset, size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class IndexFile(SourceFile):
    """An index.* file, searched by lemma."""

    prefix = "index"

    def __init__(
        self,
        data_dir: str | Path,
        pos: PartOfSpeech,
        registry: FileHandleRegistry,
        searcher: SortedFileSearcher | None = None,
    ) -> None:
        super().__init__(data_dir, pos, registry)
        self.searcher = searcher or SortedFileSearcher()

    def find_line(self, lemma: str) -> str | None:
        """Raw index line for an already normalized lemma."""
        return self.searcher.find(self, self.size, lemma)

    def find(self, lemma: str) -> IndexRecord | None:
        """Parsed (unbound) IndexRecord for an already normalized lemma."""
        line = self.find_line(lemma)
        return parse_index_line(line) if line is not None else None


class DataFile(SourceFile):
    """A data.* file, read by synset offset."""

    prefix = "data"

    def __init__(
        self,
        data_dir: str | Path,
        pos: PartOfSpeech,
        registry: FileHandleRegistry,
        reader: RandomAccessLineReader | None = None,
    ) -> None:
        super().__init__(data_dir, pos, registry)
        self.reader = reader or RandomAccessLineReader()

    def line_at(self, synset_offset: int) -> str:
        """Raw data line of the synset at ``synset_offset``."""
        return self.reader.read_line_at(self, synset_offset)

    def sense_at(self, synset_offset: int) -> Sense:
        """Parsed (unbound) Sense of the synset at ``synset_offset``."""
        return parse_data_line(self.line_at(synset_offset))

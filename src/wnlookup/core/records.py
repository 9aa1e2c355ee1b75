"""Value objects parsed from index.* and data.* lines.

A record is immutable apart from its lazy caches: the senses of an index
entry and the dereferenced relations of either kind of record. Those caches
are filled once, on first access, through the PointerResolutionCache the
record was bound to when it was loaded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wnlookup.core.errors import MalformedRecord, WordnetError
from wnlookup.core.pos import PartOfSpeech, Relation, relation_symbol

if TYPE_CHECKING:
    from wnlookup.core.resolver import PointerResolutionCache


_EXAMPLE = re.compile(r'"([^"]*)"')


@dataclass(frozen=True)
class Pointer:
    """One semantic pointer of a synset (wninput(5WN) "Pointers")."""

    symbol: str
    synset_offset: int
    pos: PartOfSpeech
    source: str = "00"   # two-digit hex
    target: str = "00"   # two-digit hex

    @property
    def source_index(self) -> int:
        """Word number in the source synset (0 = whole synset)."""
        return int(self.source, 16)

    @property
    def target_index(self) -> int:
        """Word number in the target synset (0 = whole synset)."""
        return int(self.target, 16)

    @property
    def is_lexical(self) -> bool:
        """True when the pointer relates two words rather than two synsets."""
        return self.source_index != 0 or self.target_index != 0


class _Related:
    """Relation lookups shared by IndexRecord and Sense."""

    pos: PartOfSpeech
    _resolver: PointerResolutionCache | None

    def bind(self, resolver: PointerResolutionCache):
        """Attach the resolver used to load related senses. Returns self."""
        self._resolver = resolver
        return self

    def relation(self, name: Relation | str) -> list[Sense]:
        """Senses reachable through relation ``name`` (empty list if none).

        Raises:
            ValueError: if ``name`` is not a relation of this part of speech
        """
        symbol = relation_symbol(self.pos, name)
        return self._resolve(symbol)

    def _resolve(self, symbol: str) -> list[Sense]:
        raise NotImplementedError

    def _bound(self) -> PointerResolutionCache:
        if self._resolver is None:
            raise WordnetError(
                f"{type(self).__name__} {self} is not bound to a Wordnet"
            )
        return self._resolver

    def __getattr__(self, name: str):
        # Only reached for attributes not found normally: relation names
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            symbol = relation_symbol(self.pos, name)
        except ValueError:
            # Unknown name, or a relation of another part of speech
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None
        return self._resolve(symbol)


@dataclass(eq=True)
class IndexRecord(_Related):
    """An entry of an index.* file.

    ``lemma pos synset_cnt p_cnt [ptr_symbol...] sense_cnt tagsense_cnt
    synset_offset [synset_offset...]``
    """

    word: str
    pos: PartOfSpeech
    synset_count: int
    pointer_symbols: tuple[str, ...]
    tagsense_count: int
    synset_offsets: tuple[int, ...]

    _senses: tuple[Sense, ...] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _relations: dict[str, tuple[Sense, ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _resolver: PointerResolutionCache | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def p_cnt(self) -> int:
        return len(self.pointer_symbols)

    @property
    def senses(self) -> list[Sense]:
        """One Sense per synset offset, in sense-rank order. Loaded once."""
        if self._senses is None:
            self._senses = tuple(self._bound().load_senses(self))
        return list(self._senses)

    def _resolve(self, symbol: str) -> list[Sense]:
        return self._bound().resolve_from_record(self, symbol)

    def __str__(self) -> str:
        return self.word.replace("_", " ")


@dataclass(eq=True)
class Sense(_Related):
    """A synset line of a data.* file.

    ``synset_offset lex_filenum ss_type w_cnt word lex_id [word lex_id...]
    p_cnt [ptr...] [frames...] | gloss``

    ``word`` and ``lex_id`` hold the first word of the synset; ``words``
    holds every (word, lex_id) pair.
    """

    synset_offset: int
    lex_filenum: int
    ss_type: str
    w_cnt: int
    word: str
    lex_id: str          # one-digit hex
    p_cnt: int
    pointers: tuple[Pointer, ...]
    gloss: str
    words: tuple[tuple[str, str], ...] = ()
    frames: str = ""     # raw verb frame data
    adj_marker: str | None = None

    _relations: dict[str, tuple[Sense, ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _resolver: PointerResolutionCache | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def pos(self) -> PartOfSpeech:
        return PartOfSpeech.parse(self.ss_type)

    @property
    def synonyms(self) -> tuple[str, ...]:
        """Every word of the synset, head word first."""
        return tuple(word for word, _ in self.words) or (self.word,)

    @property
    def definition(self) -> str:
        """The gloss without its quoted usage examples."""
        head, _, _ = self.gloss.partition('"')
        return head.strip().rstrip(";").strip()

    @property
    def examples(self) -> list[str]:
        """Quoted usage examples of the gloss."""
        _, quote, rest = self.gloss.partition('"')
        return _EXAMPLE.findall(quote + rest)

    @property
    def frame_refs(self) -> list[tuple[int, int]]:
        """Verb frames as (f_num, w_num) pairs; w_num 0 = all words."""
        if not self.frames:
            return []
        parts = self.frames.split()
        try:
            count = int(parts[0])
            groups = [parts[1 + 3 * i: 4 + 3 * i] for i in range(count)]
            return [(int(f_num), int(w_num, 16)) for _, f_num, w_num in groups]
        except ValueError as e:
            raise MalformedRecord(
                f"Bad frame data for synset {self.synset_offset}: {self.frames!r}"
            ) from e

    def _resolve(self, symbol: str) -> list[Sense]:
        return self._bound().resolve_from_sense(self, symbol)

    def __str__(self) -> str:
        return self.word.replace("_", " ")

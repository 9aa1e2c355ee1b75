"""Line parsers for the WordNet database files.

Both parsers are pure: one line of text in, one record out.

See wndb(5WN) for the file formats.
"""

from __future__ import annotations

import re

from wnlookup.core.errors import MalformedRecord
from wnlookup.core.pos import PartOfSpeech
from wnlookup.core.records import IndexRecord, Pointer, Sense

# p_cnt is always written as a three-digit decimal
_P_CNT = re.compile(r"^\d{3}$")

# Adjective syntactic markers: (a) attributive, (p) predicate, (ip) postnominal
_ADJ_MARKER = re.compile(r"^(?P<word>.+?)\((?P<marker>a|p|ip)\)$")


def _int(value: str, name: str, line: str, base: int = 10) -> int:
    try:
        return int(value, base)
    except (TypeError, ValueError):
        raise MalformedRecord(f"{name} is not a number: {value!r}", line) from None


def _pos(value: str, line: str) -> PartOfSpeech:
    try:
        return PartOfSpeech.parse(value)
    except ValueError:
        raise MalformedRecord(f"Unknown part of speech: {value!r}", line) from None


def parse_index_line(line: str) -> IndexRecord:
    """Parse one line of an index.* file.

    Args:
        line: ``lemma pos synset_cnt p_cnt [ptr_symbol...] sense_cnt
            tagsense_cnt synset_offset [synset_offset...]``

    Returns:
        The IndexRecord (not yet bound to a resolver)

    Raises:
        MalformedRecord: on a missing field or a non-numeric count/offset
    """
    parts = line.split()
    if len(parts) < 6:
        raise MalformedRecord("Index line is too short", line)

    word, pos = parts[0], _pos(parts[1], line)
    synset_count = _int(parts[2], "synset_cnt", line)
    p_cnt = _int(parts[3], "p_cnt", line)

    rest = parts[4:]
    if len(rest) < p_cnt + 2:
        raise MalformedRecord("Index line ends inside its pointer list", line)
    pointer_symbols = tuple(rest[:p_cnt])
    rest = rest[p_cnt:]

    _int(rest[0], "sense_cnt", line)  # same as synset_cnt
    tagsense_count = _int(rest[1], "tagsense_cnt", line)
    synset_offsets = tuple(_int(p, "synset_offset", line) for p in rest[2:])

    return IndexRecord(
        word=word,
        pos=pos,
        synset_count=synset_count,
        pointer_symbols=pointer_symbols,
        tagsense_count=tagsense_count,
        synset_offsets=synset_offsets,
    )


def _split_word(word: str) -> tuple[str, str | None]:
    match = _ADJ_MARKER.match(word)
    if match is None:
        return word, None
    return match.group("word"), match.group("marker")


def parse_data_line(line: str) -> Sense:
    """Parse one line of a data.* file.

    Args:
        line: ``synset_offset lex_filenum ss_type w_cnt word lex_id
            [word lex_id...] p_cnt [ptr...] [frames...] | gloss``

    Returns:
        The Sense (not yet bound to a resolver)

    Raises:
        MalformedRecord: on a missing field, a non-numeric field, or a
            pointer list shorter than p_cnt
    """
    left, _, gloss = line.partition("|")
    parts = left.split()
    if len(parts) < 7:
        raise MalformedRecord("Data line is too short", line)

    synset_offset = _int(parts[0], "synset_offset", line)
    lex_filenum = _int(parts[1], "lex_filenum", line)
    ss_type = parts[2]
    _pos(ss_type, line)
    w_cnt = _int(parts[3], "w_cnt", line, base=16)

    # Exactly w_cnt word/lex_id pairs; words may themselves be numerals
    if w_cnt < 1:
        raise MalformedRecord(f"w_cnt must be positive, got {w_cnt}", line)
    i = 4 + 2 * w_cnt
    if i > len(parts):
        raise MalformedRecord(f"Expected {w_cnt} word/lex_id pairs", line)
    words = [(parts[j], parts[j + 1]) for j in range(4, i, 2)]
    head_word, adj_marker = _split_word(words[0][0])
    words[0] = (head_word, words[0][1])

    if i >= len(parts) or not _P_CNT.match(parts[i]):
        found = parts[i] if i < len(parts) else None
        raise MalformedRecord(f"p_cnt is not a number: {found!r}", line)
    p_cnt = int(parts[i])
    i += 1

    pointers = []
    for _ in range(p_cnt):
        group = parts[i:i + 4]
        if len(group) < 4:
            raise MalformedRecord(
                f"Expected {p_cnt} pointers, found {len(pointers)}", line
            )
        symbol, offset, pos, source_target = group
        _int(source_target, "pointer source/target", line, base=16)
        pointers.append(
            Pointer(
                symbol=symbol,
                synset_offset=_int(offset, "pointer offset", line),
                pos=_pos(pos, line),
                source=source_target[:2],
                target=source_target[2:4],
            )
        )
        i += 4

    head_word, lex_id = words[0]
    return Sense(
        synset_offset=synset_offset,
        lex_filenum=lex_filenum,
        ss_type=ss_type,
        w_cnt=w_cnt,
        word=head_word,
        lex_id=lex_id,
        p_cnt=p_cnt,
        pointers=tuple(pointers),
        gloss=gloss.strip(),
        words=tuple(words),
        frames=" ".join(parts[i:]),
        adj_marker=adj_marker,
    )

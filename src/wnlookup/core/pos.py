"""Parts of speech and the pointer-symbol vocabulary of each.

Symbols follow wninput(5WN). Each part of speech selects its own index and
data file and its own set of relation names.
"""

from __future__ import annotations

from enum import Enum


class PartOfSpeech(Enum):
    """Syntactic category of an index entry or synset."""
    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"

    @property
    def file_suffix(self) -> str:
        """Suffix of the index.* / data.* files for this part of speech."""
        return _FILE_SUFFIXES[self]

    @classmethod
    def parse(cls, value: PartOfSpeech | str) -> PartOfSpeech:
        """Accept an enum member, a symbol (n, v, a, s, r) or a name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown part of speech: {value!r}") from None


_FILE_SUFFIXES = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.ADJECTIVE: "adj",
    PartOfSpeech.ADVERB: "adv",
}

_ALIASES = {
    "n": PartOfSpeech.NOUN, "noun": PartOfSpeech.NOUN,
    "v": PartOfSpeech.VERB, "verb": PartOfSpeech.VERB,
    "a": PartOfSpeech.ADJECTIVE, "adj": PartOfSpeech.ADJECTIVE,
    "adjective": PartOfSpeech.ADJECTIVE,
    # Adjective satellites live in data.adj
    "s": PartOfSpeech.ADJECTIVE,
    "r": PartOfSpeech.ADVERB, "adv": PartOfSpeech.ADVERB,
    "adverb": PartOfSpeech.ADVERB,
}

# Search order for Wordnet.find_all()
SEARCH_ORDER = (
    PartOfSpeech.NOUN,
    PartOfSpeech.VERB,
    PartOfSpeech.ADJECTIVE,
    PartOfSpeech.ADVERB,
)


class Relation(Enum):
    """Semantic relation names, valid per part of speech (see RELATION_SYMBOLS)."""
    ANTONYM = "antonym"
    HYPERNYM = "hypernym"
    INSTANCE_HYPERNYM = "instance_hypernym"
    HYPONYM = "hyponym"
    INSTANCE_HYPONYM = "instance_hyponym"
    MEMBER_HOLONYM = "member_holonym"
    SUBSTANCE_HOLONYM = "substance_holonym"
    PART_HOLONYM = "part_holonym"
    MEMBER_MERONYM = "member_meronym"
    SUBSTANCE_MERONYM = "substance_meronym"
    PART_MERONYM = "part_meronym"
    ATTRIBUTE = "attribute"
    DERIVATIONALLY_RELATED_FORM = "derivationally_related_form"
    DOMAIN_TOPIC = "domain_topic"
    MEMBER_OF_DOMAIN_TOPIC = "member_of_domain_topic"
    DOMAIN_REGION = "domain_region"
    MEMBER_OF_DOMAIN_REGION = "member_of_domain_region"
    DOMAIN_USAGE = "domain_usage"
    MEMBER_OF_DOMAIN_USAGE = "member_of_domain_usage"
    ENTAILMENT = "entailment"
    CAUSE = "cause"
    ALSO_SEE = "also_see"
    VERB_GROUP = "verb_group"
    SIMILAR_TO = "similar_to"
    PARTICIPLE_OF_VERB = "participle_of_verb"
    PERTAINYM = "pertainym"
    DERIVED_FROM_ADJECTIVE = "derived_from_adjective"


_DOMAINS = {
    Relation.DOMAIN_TOPIC: ";c",
    Relation.DOMAIN_REGION: ";r",
    Relation.DOMAIN_USAGE: ";u",
}

RELATION_SYMBOLS: dict[PartOfSpeech, dict[Relation, str]] = {
    PartOfSpeech.NOUN: {
        Relation.ANTONYM: "!",
        Relation.HYPERNYM: "@",
        Relation.INSTANCE_HYPERNYM: "@i",
        Relation.HYPONYM: "~",
        Relation.INSTANCE_HYPONYM: "~i",
        Relation.MEMBER_HOLONYM: "#m",
        Relation.SUBSTANCE_HOLONYM: "#s",
        Relation.PART_HOLONYM: "#p",
        Relation.MEMBER_MERONYM: "%m",
        Relation.SUBSTANCE_MERONYM: "%s",
        Relation.PART_MERONYM: "%p",
        Relation.ATTRIBUTE: "=",
        Relation.DERIVATIONALLY_RELATED_FORM: "+",
        **_DOMAINS,
        Relation.MEMBER_OF_DOMAIN_TOPIC: "-c",
        Relation.MEMBER_OF_DOMAIN_REGION: "-r",
        Relation.MEMBER_OF_DOMAIN_USAGE: "-u",
    },
    PartOfSpeech.VERB: {
        Relation.ANTONYM: "!",
        Relation.HYPERNYM: "@",
        Relation.HYPONYM: "~",
        Relation.ENTAILMENT: "*",
        Relation.CAUSE: ">",
        Relation.ALSO_SEE: "^",
        Relation.VERB_GROUP: "$",
        Relation.DERIVATIONALLY_RELATED_FORM: "+",
        **_DOMAINS,
    },
    PartOfSpeech.ADJECTIVE: {
        Relation.ANTONYM: "!",
        Relation.SIMILAR_TO: "&",
        Relation.PARTICIPLE_OF_VERB: "<",
        Relation.PERTAINYM: "\\",
        Relation.ATTRIBUTE: "=",
        Relation.ALSO_SEE: "^",
        **_DOMAINS,
    },
    PartOfSpeech.ADVERB: {
        Relation.ANTONYM: "!",
        Relation.DERIVED_FROM_ADJECTIVE: "\\",
        **_DOMAINS,
    },
}


def relation_symbol(pos: PartOfSpeech, name: Relation | str) -> str:
    """Pointer symbol of relation ``name`` for ``pos``.

    Raises:
        ValueError: if ``name`` is not a relation of ``pos``
    """
    try:
        relation = name if isinstance(name, Relation) else Relation(name)
        return RELATION_SYMBOLS[pos][relation]
    except (ValueError, KeyError):
        raise ValueError(
            f"{name!r} is not a relation of {pos.name.lower()}s"
        ) from None


def relations_for(pos: PartOfSpeech) -> tuple[Relation, ...]:
    """Relation names valid for ``pos``."""
    return tuple(RELATION_SYMBOLS[pos])

"""wnlookup - On-disk lookup into the WordNet lexical database.

Core operations:
- Binary search of sorted index.* files (word → synset offsets)
- Random-access reads of data.* files (synset offset → sense)
- Lazy, per-record resolution of semantic pointers

No in-memory index - every lookup reads only the lines it needs.
"""

import logging

from wnlookup.core import DEFAULT_CONFIG, TRACE, LookupConfig
from wnlookup.core.errors import (
    ConfigError,
    InvalidOffset,
    MalformedRecord,
    WordnetError,
)
from wnlookup.core.pos import PartOfSpeech, Relation
from wnlookup.core.records import IndexRecord, Pointer, Sense
from wnlookup.files import FileHandleRegistry
from wnlookup.parsing import parse_data_line, parse_index_line
from wnlookup.wordnet import Wordnet, normalize

__version__ = "0.1.0"

# Discard records unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ConfigError',
    'DEFAULT_CONFIG',
    'FileHandleRegistry',
    'IndexRecord',
    'InvalidOffset',
    'LookupConfig',
    'MalformedRecord',
    'PartOfSpeech',
    'Pointer',
    'Relation',
    'Sense',
    'TRACE',
    'Wordnet',
    'WordnetError',
    'normalize',
    'parse_data_line',
    'parse_index_line',
]

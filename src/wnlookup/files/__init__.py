"""On-disk access: handle registry, line reader, sorted-file search."""

from wnlookup.files.line_reader import RandomAccessLineReader
from wnlookup.files.registry import FileHandleRegistry
from wnlookup.files.searcher import SortedFileSearcher
from wnlookup.files.source import DataFile, IndexFile, SourceFile

__all__ = [
    'DataFile',
    'FileHandleRegistry',
    'IndexFile',
    'RandomAccessLineReader',
    'SortedFileSearcher',
    'SourceFile',
]

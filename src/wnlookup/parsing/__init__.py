"""Parsers for index.* and data.* lines."""

from wnlookup.parsing.lines import parse_data_line, parse_index_line

__all__ = [
    'parse_data_line',
    'parse_index_line',
]

"""Discovery and checks of WordNet database directories."""

from wnlookup.data.locate import (
    REQUIRED_FILES,
    check_data_dir,
    find_data_dir,
    missing_files,
)

__all__ = [
    'REQUIRED_FILES',
    'check_data_dir',
    'find_data_dir',
    'missing_files',
]

"""Locate a WordNet database directory.

Looks, in order, at ``$WNSEARCHDIR``, ``$WNHOME/dict`` and the NLTK
``corpora/wordnet`` resource. Fetching the data is left to the user:

    >>> import nltk
    >>> nltk.download('wordnet')   # then unzip nltk_data/corpora/wordnet.zip
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from wnlookup.core.errors import ConfigError

logger = logging.getLogger(__name__)

# Files every usable database directory contains
REQUIRED_FILES = (
    "index.noun", "index.verb", "index.adj", "index.adv",
    "data.noun", "data.verb", "data.adj", "data.adv",
)


def check_data_dir(path: str | Path) -> Path:
    """Return ``path`` as a Path if it is an existing directory.

    Raises:
        ConfigError: if it does not exist or is not a directory
    """
    path = Path(path).expanduser()
    if not path.is_dir():
        raise ConfigError(f"WordNet data directory not found: {path}")
    return path


def missing_files(path: str | Path) -> list[str]:
    """Names of REQUIRED_FILES absent from ``path``."""
    path = Path(path)
    return [name for name in REQUIRED_FILES if not (path / name).is_file()]


def _nltk_data_dir() -> Path | None:
    """Directory of NLTK's unzipped wordnet corpus, if installed."""
    import nltk
    from nltk.data import FileSystemPathPointer

    try:
        pointer = nltk.data.find("corpora/wordnet")
    except LookupError:
        return None
    if not isinstance(pointer, FileSystemPathPointer):
        logger.warning(
            "NLTK wordnet corpus is zipped (%s); unzip it to read it directly",
            pointer,
        )
        return None
    return Path(pointer.path)


def find_data_dir() -> Path:
    """Discover a WordNet database directory.

    Returns:
        The first candidate directory that holds every REQUIRED_FILES entry

    Raises:
        ConfigError: if no candidate is usable
    """
    candidates: list[tuple[str, Path]] = []
    if os.environ.get("WNSEARCHDIR"):
        candidates.append(("$WNSEARCHDIR", Path(os.environ["WNSEARCHDIR"])))
    if os.environ.get("WNHOME"):
        candidates.append(("$WNHOME", Path(os.environ["WNHOME"]) / "dict"))

    for source, path in candidates:
        if path.is_dir() and not missing_files(path):
            logger.info("Using WordNet data from %s: %s", source, path)
            return path
        logger.debug("Skipping %s: %s is not a WordNet directory", source, path)

    path = _nltk_data_dir()
    if path is not None and not missing_files(path):
        logger.info("Using WordNet data from NLTK: %s", path)
        return path

    raise ConfigError(
        "No WordNet data directory found. Pass data_dir, set WNSEARCHDIR, "
        "or install the NLTK wordnet corpus (nltk.download('wordnet'))."
    )

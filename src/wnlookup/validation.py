"""Index Validator — check that every lemma of an index file is findable.

Streams the index file line by line and runs the binary search for each
lemma, so a dataset (or new search tuning) can be verified without building
anything in memory.

Example:
    >>> validator = IndexValidator(Wordnet("dict"))
    >>> report = validator.validate("v")
    >>> print(report.summary())
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from tqdm import tqdm

from wnlookup.core.pos import SEARCH_ORDER, PartOfSpeech
from wnlookup.wordnet import Wordnet

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    """Outcome of validating one index file."""

    pos: PartOfSpeech
    checked: int = 0
    missing: list[str] = field(default_factory=list)
    mismatched: list[str] = field(default_factory=list)
    time_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.missing and not self.mismatched

    def summary(self) -> str:
        lines = [
            f"index.{self.pos.file_suffix}: {self.checked} lemmas checked",
            f"  ✓ Found: {self.checked - len(self.missing) - len(self.mismatched)}",
            f"  ✗ Missing: {len(self.missing)}",
            f"  ⚠ Mismatched: {len(self.mismatched)}",
            f"  Time: {self.time_seconds:.1f}s",
        ]
        return "\n".join(lines)


class IndexValidator:
    """Run the sorted-file search against every line of an index file."""

    def __init__(self, wordnet: Wordnet) -> None:
        self.wordnet = wordnet

    def validate(
        self,
        pos: PartOfSpeech | str,
        limit: int | None = None,
        show_progress: bool = False,
    ) -> ValidationReport:
        """Validate the index file of ``pos``.

        Args:
            pos: Part of speech whose index file is checked
            limit: Stop after this many lemmas (None = all)
            show_progress: Show a tqdm progress bar

        Returns:
            ValidationReport listing lemmas the search missed, or found
            with a different line than the one in the file
        """
        pos = PartOfSpeech.parse(pos)
        index_file = self.wordnet.index_file(pos)
        report = ValidationReport(pos=pos)
        start = time.time()

        with open(index_file.path, "rb") as f:
            lines = tqdm(
                f,
                desc=f"Checking index.{pos.file_suffix}",
                unit=" lines",
                disable=not show_progress,
            )
            for raw in lines:
                if limit is not None and report.checked >= limit:
                    break
                # License header lines start with a space
                if raw.startswith(b" ") or not raw.strip():
                    continue
                line = raw.decode(self.wordnet.config.encoding).rstrip()
                lemma = line.split(" ", 1)[0]
                report.checked += 1

                found = index_file.find_line(lemma)
                if found is None:
                    logger.warning("Lemma %r not found in %s", lemma, index_file.path)
                    report.missing.append(lemma)
                elif found != line:
                    logger.warning("Lemma %r found with a different line", lemma)
                    report.mismatched.append(lemma)

        report.time_seconds = time.time() - start
        return report

    def validate_all(self, show_progress: bool = False) -> list[ValidationReport]:
        """Validate the index files of every part of speech."""
        return [
            self.validate(pos, show_progress=show_progress)
            for pos in SEARCH_ORDER
        ]

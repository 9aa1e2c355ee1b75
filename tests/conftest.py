"""Shared fixtures: a generated WordNet database and I/O-counting handles."""

from __future__ import annotations

import os
import sys

import pytest

# Add src and this directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))

from wnlookup import FileHandleRegistry, Wordnet  # noqa: E402
from wordnet_fixture import build_dataset  # noqa: E402


class CountingRegistry(FileHandleRegistry):
    """FileHandleRegistry that counts positioned reads."""

    def __init__(self) -> None:
        super().__init__()
        self.reads = 0

    def read_at(self, path, offset, size):
        self.reads += 1
        return super().read_at(path, offset, size)


@pytest.fixture(scope="session")
def dataset(tmp_path_factory):
    """(directory, lemmas by pos symbol) of the generated database."""
    directory = tmp_path_factory.mktemp("dict")
    lemmas = build_dataset(directory)
    return directory, lemmas


@pytest.fixture(scope="session")
def dict_dir(dataset):
    return dataset[0]


@pytest.fixture
def wordnet(dict_dir):
    with Wordnet(dict_dir) as wn:
        yield wn


@pytest.fixture
def counting_registry():
    with CountingRegistry() as registry:
        yield registry

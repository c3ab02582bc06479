"""Shared fixtures for the n-gram search tests."""

from types import SimpleNamespace

import pytest

from ngram_search import Index

# ECM purpose codes, the catalog this matcher was first written for
OPTIONS = [
    "AEM",
    "ANALYSIS",
    "CAB",
    "CONCESSION",
    "DAR",
    "DATA",
    "DISPOSITION",
    "ESA PO",
    "FPA",
    "MOD",
    "MRB",
    "NTO",
    "OHP/RAD",
    "PROPOSAL/QUOTE",
    "REPAIR",
    "RISK TRANSFER",
    "SAFETY",
    "SAR",
    "SERVICE",
    "SOFTWARE",
    "SOW",
    "SUPPLY",
    "TECH",
    "TIM",
    "TRANSFER",
]


@pytest.fixture
def options():
    return list(OPTIONS)


@pytest.fixture
def index():
    return Index.from_distinct(OPTIONS, 3)


@pytest.fixture
def test_config():
    return SimpleNamespace(
        MAX_EDIT_DISTANCE=2,
        HIGHLIGHT_START="[[",
        HIGHLIGHT_END="]]",
        SHOW_SCORES=True,
    )


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.txt"
    path.write_text(
        "# test catalog\n"
        "DAR\n"
        "\n"
        "SAR\n"
        "SOW | statement of work\n"
        "TECH | technical\n",
        encoding="utf-8",
    )
    return path

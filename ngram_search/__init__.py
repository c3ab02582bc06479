"""
N-gram Search Engine

An in-memory fuzzy text matcher that ranks queries against a small, static
catalog of labels using character n-gram overlap and Okapi BM25 scoring.

Main components:
- Index / IndexBuilder: Inverted n-gram index construction and ranked search
- Collection / CollectionBuilder: Items searchable under several names
- Tokenizer: Fixed-width character n-gram tokenization
- ranker: BM25 scoring and result ranking
- AutoCorrect: Edit-distance label suggestions
- CatalogSearchEngine: Catalog loading and querying front end
"""

from .tokenizer import NGram, Tokenizer, ngrams
from . import ranker
from .indexer import Index, IndexBuilder
from .collection import Collection, CollectionBuilder
from .autocorrect import AutoCorrect
from .search_engine import CatalogSearchEngine
from .utils import TextProcessor, ResultFormatter

__version__ = "1.0.0"
__author__ = "Rohan Jain"

__all__ = [
    "NGram",
    "Tokenizer",
    "ngrams",
    "ranker",
    "Index",
    "IndexBuilder",
    "Collection",
    "CollectionBuilder",
    "AutoCorrect",
    "CatalogSearchEngine",
    "TextProcessor",
    "ResultFormatter"
]

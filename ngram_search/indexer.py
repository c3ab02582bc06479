"""
Inverted n-gram index construction and querying.

IndexBuilder accumulates (item_id, search_term) pairs into an inverted
n-gram index. build() freezes it into an Index, which answers ranked
search and best-match queries and is safe to share between readers.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .tokenizer import NGram, Tokenizer
from . import ranker

logger = logging.getLogger(__name__)

# (term_position, frequency)
Posting = Tuple[int, int]


class IndexBuilder:
    """Mutable accumulator for an Index. Not safe for concurrent insertion."""

    def __init__(self, n: int):
        """Initialize an empty builder for n-grams of width n."""
        self.tokenizer = Tokenizer(n)
        # ngram -> {term_position: frequency}
        self._postings: Dict[NGram, Dict[int, int]] = defaultdict(dict)
        # term_position -> (item_id, length in n-grams)
        self._search_terms: List[Tuple[Any, int]] = []
        self._avg_len = 0.0
        self._consumed = False

    @property
    def n(self) -> int:
        return self.tokenizer.n

    @property
    def average_term_length(self) -> float:
        return self._avg_len

    def __len__(self) -> int:
        return len(self._search_terms)

    def insert(self, item_id: Any, search_term) -> None:
        """
        Index one search term under the given item id.

        Several terms may share an item id (aliases of the same item).

        Args:
            item_id: Opaque identifier returned by searches.
            search_term: Term text (anything convertible to text).
        """
        self._check_open()

        grams = self.tokenizer.tokenize(search_term)
        num_grams = len(grams)

        term_index = len(self._search_terms)
        self._search_terms.append((item_id, num_grams))

        # One posting per (ngram, term); repeats accumulate the frequency
        for gram in grams:
            per_term = self._postings[gram]
            per_term[term_index] = per_term.get(term_index, 0) + 1

        self._avg_len += (num_grams - self._avg_len) / (term_index + 1)

    def build(self) -> "Index":
        """
        Freeze the accumulated state into an Index.

        Posting lists are ordered by n-gram so iteration is deterministic.
        The builder cannot be used afterwards.
        """
        self._check_open()
        self._consumed = True

        postings = {
            gram: tuple(self._postings[gram].items())
            for gram in sorted(self._postings)
        }
        index = Index(self.n, postings, self._avg_len, tuple(self._search_terms))

        logger.debug(
            "Built n-gram index: %d terms, %d unique %d-grams, average length %.3f",
            len(self._search_terms), len(postings), self.n, self._avg_len,
        )
        return index

    def _check_open(self) -> None:
        if self._consumed:
            raise RuntimeError("IndexBuilder has already been built; create a new builder.")


class Index:
    """
    Immutable inverted n-gram index.

    Maps each n-gram to the search terms containing it (with the n-gram's
    frequency in each term). The search term position indexes the
    search_terms tuple, which stores the item id the term points to and the
    term's length in n-grams, so multiple names can point to the same item.
    """

    def __init__(self, n: int, postings: Dict[NGram, Tuple[Posting, ...]], avg_len: float,
                 search_terms: Tuple[Tuple[Any, int], ...]):
        """Use Index.builder(), from_distinct() or from_identified() instead."""
        self.tokenizer = Tokenizer(n)
        self._postings = postings
        self._avg_len = avg_len
        self._search_terms = search_terms

    @classmethod
    def builder(cls, n: int) -> IndexBuilder:
        """Return an empty builder for n-grams of width n."""
        return IndexBuilder(n)

    @classmethod
    def from_distinct(cls, terms: Iterable, n: int) -> "Index":
        """Build an index whose item ids are the positions of the terms."""
        builder = cls.builder(n)
        for item_id, term in enumerate(terms):
            builder.insert(item_id, term)
        return builder.build()

    @classmethod
    def from_identified(cls, pairs: Iterable[Tuple[Any, Any]], n: int) -> "Index":
        """Build an index from explicit (item_id, term) pairs."""
        builder = cls.builder(n)
        for item_id, term in pairs:
            builder.insert(item_id, term)
        return builder.build()

    @property
    def n(self) -> int:
        return self.tokenizer.n

    @property
    def num_terms(self) -> int:
        return len(self._search_terms)

    @property
    def average_term_length(self) -> float:
        return self._avg_len

    @property
    def ngrams(self) -> List[NGram]:
        """Indexed n-grams in sorted order."""
        return list(self._postings)

    def item_id(self, term_index: int) -> Any:
        return self._search_terms[term_index][0]

    def term_length(self, term_index: int) -> int:
        return self._search_terms[term_index][1]

    def get_posting_list(self, gram: str) -> Tuple[Posting, ...]:
        """
        Get the posting list for an n-gram.

        Args:
            gram: N-gram to look up.

        Returns:
            Tuple of (term_position, frequency) pairs, empty if unknown.
        """
        return self._postings.get(gram, ())

    def get_document_frequency(self, gram: str) -> int:
        """Number of search terms containing the n-gram."""
        return len(self.get_posting_list(gram))

    def get_collection_frequency(self, gram: str) -> int:
        """Total occurrences of the n-gram across all search terms."""
        return sum(freq for (_, freq) in self.get_posting_list(gram))

    def search(self, query, max_results: int) -> List[Tuple[Any, float]]:
        """
        Rank the indexed search terms against a query.

        Every query n-gram present in the index adds its BM25 score to each
        search term containing it. Query n-grams absent from the index
        contribute nothing.

        Args:
            query: Query text.
            max_results: Maximum number of results to return.

        Returns:
            List of (item_id, score) tuples sorted by score descending.
            Empty when the index has no terms or the query is shorter than n.
        """
        if max_results < 0:
            raise ValueError(f"max_results must be non-negative, got {max_results}")

        total_terms = len(self._search_terms)
        query_grams = self.tokenizer.tokenize(query)
        if total_terms == 0 or not query_grams:
            return []

        term_scores = [0.0] * total_terms
        for gram in query_grams:
            postings = self._postings.get(gram)
            if not postings:
                continue

            idf = ranker.inverse_document_frequency(total_terms, len(postings))
            for term_index, freq in postings:
                term_len = self._search_terms[term_index][1]
                term_scores[term_index] += ranker.score(term_len, self._avg_len, freq, idf)

        item_ids = [item_id for (item_id, _) in self._search_terms]
        return ranker.rank(term_scores, item_ids, max_results)

    def best_match(self, query) -> Optional[Any]:
        """
        Return the item id of the top result, or None.

        A top score of exactly 0.0 means no query n-gram matched anything,
        which is not a match.
        """
        results = self.search(query, 1)
        if not results:
            return None
        item_id, top_score = results[0]
        if top_score == 0.0:
            return None
        return item_id

    async def search_async(self, query, max_results: int) -> List[Tuple[Any, float]]:
        """Awaitable form of search(); computes the same result without suspending."""
        return self.search(query, max_results)

    async def best_match_async(self, query) -> Optional[Any]:
        """Awaitable form of best_match(); computes the same result without suspending."""
        return self.best_match(query)

    def summarize_index(self) -> None:
        """Print a summary of the inverted index."""
        num_grams = len(self._postings)
        total_postings = sum(len(postings) for postings in self._postings.values())

        print("\n=== Inverted Index Summary ===")
        print(f"N-gram width: {self.n}")
        print(f"Search terms indexed: {len(self._search_terms)}")
        print(f"Unique n-grams: {num_grams}")
        print(f"Total postings: {total_postings}")
        print(f"Average term length (n-grams): {self._avg_len:.2f}")

        posting_lengths = [len(postings) for postings in self._postings.values()]
        if posting_lengths:
            print(f"Average postings per n-gram: {total_postings / num_grams:.2f}")
            print(f"Min posting list length: {min(posting_lengths)}")
            print(f"Max posting list length: {max(posting_lengths)}")

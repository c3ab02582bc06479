"""
Character n-gram tokenization module.

This module turns search terms and queries into fixed-width, lower-cased
character n-grams.
"""

from typing import Dict, Iterable, List, Set, Tuple
from collections import Counter


class NGram(str):
    """A fixed-width character n-gram.

    Equality, hashing and ordering are those of the underlying string, so
    n-grams can be used directly as dictionary keys and sorted
    lexicographically.
    """

    __slots__ = ()

    def __new__(cls, chars, n: int):
        value = "".join(chars)
        if len(value) != n:
            raise ValueError(f"NGram expects exactly {n} characters, got {len(value)}: {value!r}")
        return super().__new__(cls, value)


def ngrams(text, n: int) -> List[NGram]:
    """
    Split text into overlapping n-grams of width n.

    The input is converted with str() and lower-cased before windowing, so
    "MOD" and "mod" yield the same n-grams. Text shorter than n yields an
    empty list.

    Args:
        text: Anything convertible to text.
        n: N-gram width (>= 1).

    Returns:
        List of n-grams in order of appearance.
    """
    if n < 1:
        raise ValueError(f"N-gram width must be a positive integer, got {n}")

    chars = str(text).lower()
    return [NGram(chars[i:i + n], n) for i in range(len(chars) - n + 1)]


class Tokenizer:
    """Handles n-gram tokenization with a fixed width."""

    def __init__(self, n: int):
        """Initialize with the n-gram width."""
        if not isinstance(n, int) or n < 1:
            raise ValueError(f"N-gram width must be a positive integer, got {n!r}")
        self.n = n

    def tokenize(self, text) -> List[NGram]:
        """Tokenize a term or query into n-grams."""
        return ngrams(text, self.n)

    def tokenize_terms(self, terms: Iterable[str]) -> Tuple[Dict[int, List[NGram]], Set[NGram], Counter]:
        """
        Tokenize each term of a catalog.

        Args:
            terms: Search terms, in position order.

        Returns:
            Tuple of (term_ngrams, vocab_set, ngram_freq).
        """
        term_ngrams = {}
        vocab_set = set()
        ngram_freq = Counter()

        for pos, term in enumerate(terms):
            grams = self.tokenize(term)
            term_ngrams[pos] = grams
            vocab_set.update(grams)
            ngram_freq.update(grams)

        return term_ngrams, vocab_set, ngram_freq

    def summarize_vocabulary(self, ngram_freq: Counter, topn: int = 10) -> None:
        """
        Print a summary of n-gram vocabulary statistics.

        Args:
            ngram_freq: N-gram frequency counter.
            topn: Number of top n-grams to show.
        """
        total_occurrences = sum(ngram_freq.values())
        unique_ngrams = len(ngram_freq)
        print("\n=== N-gram Vocabulary Summary ===")
        print(f"Width: {self.n}  |  Unique n-grams: {unique_ngrams}  |  Total occurrences: {total_occurrences}")
        if topn > 0 and unique_ngrams > 0:
            most_common = ngram_freq.most_common(topn)
            preview = ", ".join(f"{gram!r}:{cnt}" for gram, cnt in most_common)
            print(f"Top {topn} n-grams: {preview}")

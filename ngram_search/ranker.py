"""
Term ranking and scoring module.

This module handles the Okapi BM25 relevance score of one n-gram's
contribution to one search term, the IDF weight of an n-gram, and the
final merge/sort of per-term scores into a ranked result list.
"""

import math
from typing import Any, List, Sequence, Tuple

# BM25 tuning constants
K1 = 1.2  # Term frequency saturation
B = 0.75  # Length normalization


def score(term_len: int, avg_len: float, freq: int, idf: float) -> float:
    """
    Score one n-gram's contribution to one search term using Okapi BM25.

    score = idf * (freq * (k1 + 1)) / (freq + k1 * (1 - b + b * term_len / avg_len))

    Negative results (only possible with a negative idf) are floored to zero.

    Args:
        term_len: Length of the search term in n-grams.
        avg_len: Average search term length over the corpus (must be > 0).
        freq: Occurrences of the n-gram in the search term.
        idf: Inverse document frequency of the n-gram.

    Returns:
        Non-negative BM25 score.
    """
    norm = term_len / avg_len
    result = idf * ((freq * (K1 + 1.0)) / (freq + (K1 * (1.0 - B + (B * norm)))))
    return result if result > 0.0 else 0.0


def inverse_document_frequency(total_terms: int, matched_terms: int) -> float:
    """
    Compute the BM25 IDF of an n-gram.

    idf = ln(1 + (N - n + 0.5) / (n + 0.5))

    Args:
        total_terms: Number of search terms in the index (N).
        matched_terms: Number of search terms containing the n-gram (n).

    Returns:
        IDF weight.
    """
    return math.log1p((total_terms - matched_terms + 0.5) / (matched_terms + 0.5))


def rank(term_scores: Sequence[float], item_ids: Sequence[Any], max_results: int) -> List[Tuple[Any, float]]:
    """
    Merge per-term scores with their item ids and sort them.

    Python's sort is stable, so tied scores keep ascending term-position order.

    Args:
        term_scores: Accumulated score per term position.
        item_ids: Item id per term position.
        max_results: Number of results to keep.

    Returns:
        List of (item_id, score) tuples sorted by score descending.
    """
    ranked = list(zip(item_ids, term_scores))
    ranked.sort(key=lambda x: x[1], reverse=True)
    return ranked[:max_results]

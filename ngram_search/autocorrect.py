"""
Query suggestion module.

This module suggests catalog labels for queries that the n-gram index
cannot match (for instance queries shorter than the n-gram width), using
Levenshtein distance.
"""

from typing import Dict, Iterable, List, Optional, Tuple
from collections import defaultdict
from rapidfuzz.distance import Levenshtein


class AutoCorrect:
    """Suggests catalog labels close to a query by edit distance."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def build_len_index(self, labels: Iterable[str]) -> Dict[int, List[str]]:
        """
        Build a length-based index for efficient candidate lookup.

        Args:
            labels: Catalog labels (and aliases).

        Returns:
            Dictionary mapping lower-cased label length to labels of that length.
        """
        index = defaultdict(list)
        for label in labels:
            index[len(label.lower())].append(label)
        return index

    def _candidate_labels(self, word: str, by_len_index: Dict[int, List[str]],
                          max_len_diff: int = None) -> List[str]:
        """
        Collect labels whose length is within max_len_diff of the word's.
        """
        if max_len_diff is None:
            max_len_diff = self.config.MAX_EDIT_DISTANCE

        L = len(word)
        candidates = []

        for dL in range(-max_len_diff, max_len_diff + 1):
            bucket = by_len_index.get(L + dL)
            if bucket:
                candidates.extend(bucket)

        return candidates

    def suggest_correction(self, word: str, by_len_index: Dict[int, List[str]],
                           max_dist: int = None) -> Tuple[Optional[str], Optional[int]]:
        """
        Suggest the closest label for a word.

        Comparison is case-insensitive. Ties keep the label seen first.

        Args:
            word: Query to correct.
            by_len_index: Length-based index of labels.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (best_label, best_distance) or (None, None) if no label is close enough.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        word = word.lower()
        best_label, best_dist = None, None

        for cand in self._candidate_labels(word, by_len_index, max_len_diff=max_dist):
            dist = Levenshtein.distance(word, cand.lower(), score_cutoff=max_dist)
            if dist <= max_dist and (best_dist is None or dist < best_dist):
                best_label, best_dist = cand, dist
                if best_dist == 0:  # Exact match
                    break

        return best_label, best_dist

    def get_similar_terms(self, word: str, by_len_index: Dict[int, List[str]],
                          max_dist: int = None, top_k: int = 5) -> List[Tuple[str, int]]:
        """
        Get labels similar to a word.

        Args:
            word: Input word.
            by_len_index: Length-based index of labels.
            max_dist: Maximum edit distance to consider.
            top_k: Number of labels to return.

        Returns:
            List of (label, distance) tuples sorted by distance.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        word = word.lower()
        similar = []
        for cand in self._candidate_labels(word, by_len_index, max_len_diff=max_dist):
            dist = Levenshtein.distance(word, cand.lower(), score_cutoff=max_dist)
            if dist <= max_dist:
                similar.append((cand, dist))

        similar.sort(key=lambda x: x[1])
        return similar[:top_k]

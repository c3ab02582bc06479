"""
Main CatalogSearchEngine class that orchestrates catalog matching.

This module contains the CatalogSearchEngine class that loads a catalog of
labels, builds the n-gram collection, and answers queries against it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .collection import Collection
from .autocorrect import AutoCorrect
from .utils import TextProcessor, ResultFormatter
import config

logger = logging.getLogger(__name__)


class CatalogSearchEngine:
    """
    Matches free-text queries to the labels of a small, static catalog.

    Each catalog entry is a label plus optional aliases; every name is
    indexed and searches return the label.
    """

    def __init__(self, catalog_path: Optional[Union[str, Path]] = None, config_dict: Optional[Dict] = None):
        """
        Initialize the CatalogSearchEngine.

        Args:
            catalog_path: Path to the catalog file. If None, uses config default.
            config_dict: Optional configuration values overriding the defaults.
        """
        self.config = self._load_config(config_dict)

        self.catalog_path = Path(catalog_path) if catalog_path else Path(self.config.CATALOG_PATH)

        self.text_processor = TextProcessor(self.config)
        self.auto_correct = AutoCorrect(self.config)
        self.result_formatter = ResultFormatter(self.config)

        # State variables
        self.entries: List[Tuple[str, List[str]]] = []
        self.collection: Optional[Collection] = None
        self.by_len_index: Dict[int, List[str]] = {}
        self.alias_to_label: Dict[str, str] = {}

        self._index_built = False

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overridden by the provided dictionary."""
        values = {key: getattr(config, key) for key in dir(config) if key.isupper()}
        if config_dict:
            values.update(config_dict)

        class Config:
            def __init__(self, config_dict):
                for key, value in config_dict.items():
                    setattr(self, key, value)

        return Config(values)

    @property
    def ngram_size(self) -> int:
        return self.config.NGRAM_SIZE

    def load_catalog(self, path: Optional[Union[str, Path]] = None) -> List[Tuple[str, List[str]]]:
        """
        Load entries from a catalog file, replacing any loaded before.

        Args:
            path: Catalog file. If None, uses the engine's catalog path.

        Returns:
            List of (label, names) entries.
        """
        path = Path(path) if path else self.catalog_path
        self.entries = self.text_processor.read_catalog(path)
        logger.info("Loaded %d catalog entries from %s", len(self.entries), path)
        self._index_built = False
        return self.entries

    def add_entries(self, entries: Iterable[Union[str, Tuple[str, Iterable[str]]]]) -> None:
        """
        Add catalog entries programmatically.

        Args:
            entries: Plain labels, or (label, aliases) pairs. The label is
                always searchable by itself in addition to its aliases.
        """
        for entry in entries:
            if isinstance(entry, str):
                label, aliases = entry, []
            else:
                label, aliases = entry
            names = [label] + [a for a in aliases if a != label]
            self.entries.append((label, names))
        self._index_built = False

    def build_index(self, force_rebuild: bool = False) -> None:
        """
        Build the n-gram collection from the catalog entries.

        Loads the catalog file first when no entries were added.

        Args:
            force_rebuild: If True, rebuild even if already built.
        """
        if self._index_built and not force_rebuild:
            logger.info("Index already built. Use force_rebuild=True to rebuild.")
            return

        if not self.entries:
            self.load_catalog()

        builder = Collection.builder(self.ngram_size)
        self.alias_to_label = {}
        for label, names in self.entries:
            builder.insert(label, names)
            for name in names:
                self.alias_to_label.setdefault(name, label)
        self.collection = builder.build()

        self.by_len_index = self.auto_correct.build_len_index(self.alias_to_label)

        self._index_built = True
        logger.info(
            "Built %d-gram index: %d labels, %d names",
            self.ngram_size, len(self.entries), self.collection.index.num_terms,
        )

    def _require_index(self) -> Collection:
        if not self._index_built or self.collection is None:
            raise RuntimeError("Index not built. Call build_index() first.")
        return self.collection

    def search(self, query: str, top_k: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Rank catalog labels against a query.

        A label registered under several names may appear once per matching
        name.

        Args:
            query: Search query string.
            top_k: Number of results to return. If None, uses config default.

        Returns:
            List of (label, score) tuples sorted by relevance.
        """
        collection = self._require_index()
        if top_k is None:
            top_k = self.config.TOP_K_RESULTS
        return collection.search(query, top_k)

    def best_match(self, query: str) -> Optional[str]:
        """Return the best matching label, or None when no n-gram matches."""
        return self._require_index().best_match(query)

    def suggest(self, query: str) -> Optional[str]:
        """
        Suggest a label for a query the n-gram index cannot match.

        Returns:
            Label whose name is within MAX_EDIT_DISTANCE of the query, or None.
        """
        self._require_index()
        if not self.config.AUTO_CORRECT_ENABLED:
            return None
        name, _dist = self.auto_correct.suggest_correction(query.strip(), self.by_len_index)
        if name is None:
            return None
        return self.alias_to_label[name]

    def match(self, query: str) -> Optional[str]:
        """Best n-gram match, falling back to an edit-distance suggestion."""
        label = self.best_match(query)
        if label is None:
            label = self.suggest(query)
            if label is not None:
                logger.debug("No n-gram match for %r; suggesting %r", query, label)
        return label

    def show_results(self, query: str, results: List[Tuple[str, float]]) -> None:
        """Print results in the configured format, or a suggestion if there are none."""
        if results and results[0][1] > 0.0:
            if self.config.RESULT_FORMAT == "list":
                self.result_formatter.print_results_simple(results, query, self.ngram_size)
            else:
                self.result_formatter.print_results_table(results, query, self.ngram_size)
            return

        suggestion = self.suggest(query)
        if suggestion is not None:
            print(f"No matching labels found. Did you mean: {suggestion}?")
        else:
            print("No matching labels found.")

    def interactive_search(self) -> None:
        """
        Start an interactive search session.

        Type 'exit' or 'quit' to end the session.
        """
        if not self._index_built:
            print("Building index first...")
            self.build_index()

        print("\n=== Interactive Search ===")
        print("Type 'exit' or 'quit' to quit.")

        while True:
            try:
                query = input("Enter search query: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nExiting.")
                break

            if not query:
                continue
            if query.lower() in ('exit', 'quit'):
                print("Goodbye!")
                break

            self.show_results(query, self.search(query))

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the built index.

        Returns:
            Dictionary containing various statistics.
        """
        if not self._index_built or self.collection is None:
            return {"error": "Index not built"}

        index = self.collection.index
        return {
            "ngram_size": index.n,
            "num_labels": len(self.collection),
            "num_names": index.num_terms,
            "num_ngrams": len(index.ngrams),
            "avg_name_length": round(index.average_term_length, 3),
        }

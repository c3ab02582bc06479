#!/usr/bin/env python3
"""
Example usage of the N-gram Search Engine.

This script demonstrates how to use the index, collections and the catalog
engine programmatically.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import ngram_search
sys.path.append(str(Path(__file__).parent.parent))

from ngram_search import CatalogSearchEngine, Collection, Index


PURPOSES = [
    "AEM", "ANALYSIS", "CAB", "CONCESSION", "DAR", "DATA", "DISPOSITION",
    "ESA PO", "FPA", "MOD", "MRB", "NTO", "OHP/RAD", "PROPOSAL/QUOTE",
    "REPAIR", "RISK TRANSFER", "SAFETY", "SAR", "SERVICE", "SOFTWARE",
    "SOW", "SUPPLY", "TECH", "TIM", "TRANSFER",
]


def index_example():
    """Rank purposes against free-text labels."""
    print("=== Index Example ===")

    index = Index.from_distinct(PURPOSES, 3)

    for query in ["dev aem", "risk xfer", "softwre update", "qoute"]:
        print(f"\nSearching for: '{query}'")
        for position, score in index.search(query, 3):
            print(f"  {PURPOSES[position]:<16} {score:.4f}")

    best = index.best_match("DAR")
    print(f"\nBest match for 'DAR': {PURPOSES[best] if best is not None else None}")


def collection_example():
    """Search items registered under several names."""
    print("\n=== Collection Example ===")

    collection = Collection.from_items([
        ({"code": "SOW"}, ["SOW", "statement of work"]),
        ({"code": "MRB"}, ["MRB", "material review board"]),
        ({"code": "MOD"}, ["MOD", "modification"]),
    ], 3)

    for query in ["work statement", "review", "modif"]:
        print(f"'{query}' -> {collection.best_match(query)}")

    results = asyncio.run(collection.search_async("board review", 2))
    print(f"Async search: {results}")


def catalog_example():
    """Use the catalog engine with a suggestion fallback."""
    print("\n=== Catalog Engine Example ===")

    engine = CatalogSearchEngine()
    engine.add_entries(PURPOSES)
    engine.build_index()

    for query in ["dev aem", "sa", "tranfer"]:
        print(f"'{query}' -> {engine.match(query)}")

    print(f"Stats: {engine.get_stats()}")


if __name__ == "__main__":
    index_example()
    collection_example()
    catalog_example()

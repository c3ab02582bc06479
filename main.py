#!/usr/bin/env python3
"""
Main entry point for the N-gram Search Engine.

This script provides a command-line interface for matching queries against
a catalog of labels.
"""

import argparse
import logging
import sys

from ngram_search import CatalogSearchEngine
import config


def main():
    """Main entry point for the search engine."""
    parser = argparse.ArgumentParser(
        description="Fuzzy catalog matching with character n-grams and BM25 ranking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                    # Start interactive search
  python main.py --catalog ./labels.txt             # Use custom catalog file
  python main.py --query "dev aem"                  # Single query mode
  python main.py --query "DAR" --best               # Print only the best label
  python main.py --build-only --stats               # Build index and show statistics
        """
    )

    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Catalog file, one label per line with optional '|' aliases (default: data/catalog.txt)"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help=f"Number of results to return (default: {config.TOP_K_RESULTS})"
    )

    parser.add_argument(
        "--ngram-size",
        type=int,
        default=None,
        help=f"Character n-gram width (default: {config.NGRAM_SIZE})"
    )

    parser.add_argument(
        "--best",
        action="store_true",
        help="Print only the best matching label"
    )

    parser.add_argument(
        "--build-only",
        action="store_true",
        help="Only build the index, don't start interactive search"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s: %(message)s")

    overrides = {}
    if args.ngram_size is not None:
        overrides["NGRAM_SIZE"] = args.ngram_size

    # Initialize search engine
    try:
        engine = CatalogSearchEngine(catalog_path=args.catalog, config_dict=overrides)
    except Exception as e:
        print(f"Error initializing search engine: {e}")
        sys.exit(1)

    # Build index
    try:
        engine.build_index()
    except Exception as e:
        print(f"Error building index: {e}")
        sys.exit(1)

    if args.stats:
        stats = engine.get_stats()
        print("\n=== Index Statistics ===")
        for key, value in stats.items():
            print(f"{key}: {value}")
        if engine.config.VERBOSE:
            engine.collection.index.summarize_index()

    if args.build_only:
        print("Index building complete. Exiting.")
        return

    if args.query:
        # Single query mode
        try:
            if args.best:
                label = engine.match(args.query)
                if label is None:
                    print("No matching label found.")
                    sys.exit(1)
                print(label)
            else:
                engine.show_results(args.query, engine.search(args.query, top_k=args.top_k))
        except Exception as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
    else:
        # Interactive mode
        try:
            engine.interactive_search()
        except KeyboardInterrupt:
            print("\nExiting.")
        except Exception as e:
            print(f"Error in interactive mode: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()

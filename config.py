"""
Configuration settings for the N-gram Search Engine.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
CATALOG_PATH = DATA_DIR / "catalog.txt"  # One label per line, aliases separated by "|"

# Index settings
NGRAM_SIZE = 3  # Character n-gram width, fixed per index

# Search settings
TOP_K_RESULTS = 5  # Number of results to return

# Auto-correction settings
AUTO_CORRECT_ENABLED = True  # Suggest a label when nothing matches
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for suggestions

# Output settings
VERBOSE = True  # Enable verbose output during processing
SHOW_SCORES = True  # Show relevance scores in results
RESULT_FORMAT = "table"  # Result format: "table" or "list"

# Highlighting settings
HIGHLIGHT_START = "[["  # Start marker for highlighting
HIGHLIGHT_END = "]]"  # End marker for highlighting

# Debug settings
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR

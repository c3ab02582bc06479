"""
Utility functions for catalog loading and result formatting.

This module contains helpers to read catalog files and to display ranked
labels on the console.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from .tokenizer import ngrams


class TextProcessor:
    """Handles catalog file parsing."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.alias_separator = "|"

    def parse_catalog_line(self, line: str) -> Optional[Tuple[str, List[str]]]:
        """
        Parse one catalog line of the form "LABEL" or "LABEL | alias | alias".

        Args:
            line: Raw line.

        Returns:
            Tuple of (label, names) where names starts with the label itself,
            or None for blank lines and comments.
        """
        text = line.strip()
        if not text or text.startswith("#"):
            return None

        parts = [p.strip() for p in text.split(self.alias_separator)]
        names = [p for p in parts if p]
        if not names:
            return None
        return names[0], names

    def read_catalog(self, path: Union[str, Path]) -> List[Tuple[str, List[str]]]:
        """
        Read a catalog file.

        Args:
            path: Path to a UTF-8 text file, one entry per line.

        Returns:
            List of (label, names) entries in file order.
        """
        entries = []
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                entry = self.parse_catalog_line(line)
                if entry is not None:
                    entries.append(entry)
        return entries


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def _format_ngrams(self, grams: List[str], maxn: int = 12) -> str:
        """Return n-grams as a compact string; truncate long lists with an ellipsis."""
        quoted = [repr(str(g)) for g in grams]
        if len(quoted) <= maxn:
            return "[" + ", ".join(quoted) + "]"
        head = ", ".join(quoted[:maxn // 2])
        tail = ", ".join(quoted[-maxn // 2:])
        return "[" + head + ", …, " + tail + "]"

    def highlight_ngrams(self, label: str, query: str, n: int) -> str:
        """
        Wrap the parts of a label covered by query n-grams with highlight markers.

        Args:
            label: Catalog label.
            query: Query text.
            n: N-gram width.

        Returns:
            Highlighted label.
        """
        grams = set(ngrams(query, n))
        if not grams or len(label) < n:
            return label

        # Mark every character covered by a shared n-gram
        lowered = label.lower()
        covered = [False] * len(label)
        if len(lowered) == len(label):
            for i in range(len(label) - n + 1):
                if lowered[i:i + n] in grams:
                    for j in range(i, i + n):
                        covered[j] = True

        out = []
        inside = False
        for ch, mark in zip(label, covered):
            if mark and not inside:
                out.append(self.config.HIGHLIGHT_START)
                inside = True
            elif not mark and inside:
                out.append(self.config.HIGHLIGHT_END)
                inside = False
            out.append(ch)
        if inside:
            out.append(self.config.HIGHLIGHT_END)
        return "".join(out)

    def print_results_table(self, ranked: List[Tuple[str, float]], query: str, n: int) -> None:
        """
        Render ranked labels as a clean ASCII table.

        Args:
            ranked: List of (label, score) tuples.
            query: Query used for search.
            n: N-gram width used by the index.
        """
        if not ranked:
            print("No matching labels found.")
            return

        rows = []
        for rank, (label, score) in enumerate(ranked, start=1):
            rows.append([str(rank), f"{score:.4f}", self.highlight_ngrams(label, query, n)])

        headers = ["#", "Score", "Label"]
        if not self.config.SHOW_SCORES:
            headers.pop(1)
            rows = [[row[0], row[2]] for row in rows]

        max_widths = [3, 8, 60] if self.config.SHOW_SCORES else [3, 60]
        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            col_widths.append(min(width, max_widths[j]))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        line = " | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers))
        sep = "-+-".join("-" * col_widths[i] for i in range(len(headers)))
        print("\n=== Top Results ===")
        print(line)
        print(sep)

        for row in rows:
            print(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))

        q_preview = self._format_ngrams(ngrams(query, n), maxn=12)
        print(f"\n(query n-grams: {q_preview})\n")

    def print_results_simple(self, ranked: List[Tuple[str, float]], query: str, n: int) -> None:
        """Print one line per ranked label."""
        if not ranked:
            print("No matching labels found.")
            return

        print("\n=== Top Results ===")
        for rank, (label, score) in enumerate(ranked, start=1):
            shown = self.highlight_ngrams(label, query, n)
            if self.config.SHOW_SCORES:
                print(f"#{rank}  score={score:.4f}  {shown}")
            else:
                print(f"#{rank}  {shown}")

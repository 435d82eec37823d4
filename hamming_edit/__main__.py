#!/usr/bin/env python3
"""
Run the reference search (K=9, T=12, U=8) and print one line per witness.

Usage:
    python -m hamming_edit
"""

import sys

from .search import EmbeddingSearch, SearchConfig


def main():
    EmbeddingSearch(SearchConfig()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

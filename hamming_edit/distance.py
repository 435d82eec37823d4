"""
Distance Metrics

Two string metrics compared by the search:

- hamming_distance: positions that differ, equal-length strings only
- edit_distance: unit-cost Levenshtein distance, any lengths

For two strings of equal length, edit_distance <= hamming_distance, and
edit_distance == 1 exactly when hamming_distance == 1. The search relies
on this to skip pairs that cannot disagree.
"""

from typing import Sequence

import numpy as np


def hamming_distance(s1: str, s2: str) -> int:
    """
    Count positions where s1 and s2 differ.

    Raises:
        ValueError: if the strings have different lengths
    """
    if len(s1) != len(s2):
        raise ValueError(
            f"Hamming distance needs equal lengths, got {len(s1)} and {len(s2)}"
        )
    return sum(1 for a, b in zip(s1, s2) if a != b)


def edit_distance(s1: str, s2: str) -> int:
    """
    Levenshtein distance between s1 and s2.

    Fills an (m+1) x (n+1) table with dp[i][0] = i and dp[0][j] = j;
    matching characters copy the diagonal, otherwise the cell is
    1 + min(deletion, insertion, substitution).

    Example:
        >>> edit_distance("kitten", "sitting")
        3
    """
    m, n = len(s1), len(s2)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i - 1] == s2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j],       # deletion
                                   dp[i][j - 1],       # insertion
                                   dp[i - 1][j - 1])   # substitution
    return dp[m][n]


def hamming_matrix(family: Sequence[str]) -> np.ndarray:
    """
    All-pairs Hamming distances of an equal-length family.

    Returns:
        (N, N) integer matrix, entry [i, j] = hamming_distance(family[i], family[j])

    Raises:
        ValueError: if the family mixes string lengths
    """
    if not family:
        return np.zeros((0, 0), dtype=np.int64)
    width = len(family[0])
    for s in family:
        if len(s) != width:
            raise ValueError(
                f"Hamming distance needs equal lengths, got {width} and {len(s)}"
            )
    codes = np.array([[ord(c) for c in s] for s in family], dtype=np.uint32)
    codes = codes.reshape(len(family), width)
    return (codes[:, None, :] != codes[None, :, :]).sum(axis=2).astype(np.int64)

"""
Composition Generator

Enumerates the coefficient arrays A that drive the embedding: integer
vectors of fixed length and fixed sum, entries bounded by a maximum part,
with no forbidden pair of adjacent entries.
"""

from typing import List, Sequence, Tuple

from .constants import FORBIDDEN_ADJACENT, MAX_PART


Composition = Tuple[int, ...]


def is_admissible(seq: Sequence[int]) -> bool:
    """
    Check the adjacency constraint.

    A sequence is admissible when no adjacent pair (seq[i], seq[i+1]) is
    (0, 0), (0, 1) or (1, 0). Pairs such as (1, 1) or anything starting
    with a value >= 2 are allowed.
    """
    for i in range(len(seq) - 1):
        if (seq[i], seq[i + 1]) in FORBIDDEN_ADJACENT:
            return False
    return True


def generate_compositions(length: int,
                          target_sum: int,
                          max_part: int = MAX_PART) -> List[Composition]:
    """
    Generate all admissible compositions.

    Depth-first search over positions 0..length-1. Each position tries
    the values 0..max_part in increasing order and stops as soon as the
    running sum would pass target_sum. Completed sequences are kept when
    they hit target_sum exactly and pass is_admissible().

    Args:
        length: K, number of entries
        target_sum: T, required sum
        max_part: U, largest value a single entry may take

    Returns:
        List of tuples in DFS order (lexicographically ascending)

    Example:
        >>> generate_compositions(2, 2)
        [(0, 2), (1, 1), (2, 0)]
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if target_sum < 0:
        raise ValueError(f"target_sum must be >= 0, got {target_sum}")
    if max_part < 0:
        raise ValueError(f"max_part must be >= 0, got {max_part}")

    result: List[Composition] = []
    current = [0] * length

    def dfs(pos: int, running: int) -> None:
        if pos == length:
            if running == target_sum and is_admissible(current):
                result.append(tuple(current))
            return
        for val in range(max_part + 1):
            if running + val > target_sum:
                break
            current[pos] = val
            dfs(pos + 1, running + val)

    dfs(0, 0)
    return result


def count_compositions(length: int,
                       target_sum: int,
                       max_part: int = MAX_PART) -> int:
    """Number of admissible compositions for (length, target_sum, max_part)."""
    return len(generate_compositions(length, target_sum, max_part))

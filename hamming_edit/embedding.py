"""
Embedding Function

Interleaves a short string x and a long string y under a composition A:

    x[0] y[0:A[0]] x[1] y[A[0]:A[0]+A[1]] ... x[K-1] y[...] x[-1]

Contract (not checked here): len(x) == len(A) + 1 and sum(A) == len(y).
Under the contract the output has length len(x) + len(y). SearchConfig
derives both string lengths from the composition parameters so the
driver never breaks it.
"""

from typing import List, Sequence


def embed_with_array(x: str, y: str, A: Sequence[int]) -> str:
    """
    Embed x and y under the coefficient array A.

    For each i, append x[i] then the next A[i] bits of y. Finally append
    the last bit of x.

    Example:
        >>> embed_with_array("1010", "011", [1, 0, 2])
        '1001110'
    """
    parts = []
    pointer = 0
    for i, k in enumerate(A):
        parts.append(x[i])
        parts.append(y[pointer:pointer + k])
        pointer += k
    parts.append(x[-1])
    return "".join(parts)


def embedded_family(xs: Sequence[str], y: str, A: Sequence[int]) -> List[str]:
    """Embed every x in xs with the same (y, A), preserving xs order."""
    return [embed_with_array(x, y, A) for x in xs]

"""
Binary String Enumeration

Produces every fixed-length bit string in canonical numeric order.
"""

from itertools import product
from typing import List


def binary_strings(length: int) -> List[str]:
    """
    Generate all binary strings of the given length.

    The i-th string (0-indexed) is the MSB-first binary representation
    of i, zero-padded to `length` bits.

    Args:
        length: Number of bits per string (>= 0)

    Returns:
        List of 2**length strings over '0'/'1'

    Example:
        >>> binary_strings(2)
        ['00', '01', '10', '11']
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    # product() varies the last position fastest, i.e. MSB-first counting
    return ["".join(bits) for bits in product("01", repeat=length)]


def binary_value(bits: str) -> int:
    """Interpret an MSB-first bit string as an integer ('' -> 0)."""
    return int(bits, 2) if bits else 0

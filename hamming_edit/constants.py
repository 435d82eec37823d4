# hamming_edit/constants.py
"""
Hamming/Edit Search Constants

This module defines the constants that parametrize a search run:

LAYER 1: Composition Constants (Coefficient Array)
- COMPOSITION_LENGTH: K, number of entries in a composition vector A
- TARGET_SUM: T, the fixed sum of every composition vector
- MAX_PART: U, the upper bound on a single entry
- FORBIDDEN_ADJACENT: adjacent pairs a composition may not contain

LAYER 2: String Lengths (derived)
- SHORT_LENGTH: length of the short strings x (K + 1)
- LONG_LENGTH: length of the long strings y (T)
"""


# =============================================================================
# LAYER 1: Composition Constants (Coefficient Array)
# =============================================================================

COMPOSITION_LENGTH = 9
TARGET_SUM = 12
MAX_PART = 8

# (a[i], a[i+1]) pairs rejected by the adjacency filter
FORBIDDEN_ADJACENT = frozenset({(0, 0), (0, 1), (1, 0)})


# =============================================================================
# LAYER 2: String Lengths (derived, never set independently)
# =============================================================================

# embed_with_array consumes x[0..K-1] plus one trailing bit of x
SHORT_LENGTH = COMPOSITION_LENGTH + 1

# every bit of y is consumed exactly once, so len(y) == sum(A)
LONG_LENGTH = TARGET_SUM

assert 0 <= TARGET_SUM <= COMPOSITION_LENGTH * MAX_PART, \
    "TARGET_SUM must be reachable with COMPOSITION_LENGTH parts of at most MAX_PART"

"""
Hamming/Edit - Embedding Search for Distance-Preserving Interleavings

Exhaustive combinatorial search for coefficient arrays A under which
Hamming distance and Levenshtein distance coincide on a whole family of
embedded binary strings.
"""

__version__ = "0.1.0"

from .strings import binary_strings, binary_value
from .compositions import generate_compositions, count_compositions, is_admissible
from .embedding import embed_with_array, embedded_family
from .distance import hamming_distance, edit_distance, hamming_matrix
from .search import (
    SearchConfig,
    Witness,
    SearchReport,
    EmbeddingSearch,
    first_violation,
    preserves_distances,
)

__all__ = [
    "binary_strings",
    "binary_value",
    "generate_compositions",
    "count_compositions",
    "is_admissible",
    "embed_with_array",
    "embedded_family",
    "hamming_distance",
    "edit_distance",
    "hamming_matrix",
    "SearchConfig",
    "Witness",
    "SearchReport",
    "EmbeddingSearch",
    "first_violation",
    "preserves_distances",
]

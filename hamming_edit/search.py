"""
Embedding Search Driver

Looks for compositions A and long strings y such that embedding every
short string x with (y, A) yields a family on which Hamming distance and
edit distance agree for every pair.

Loop structure:
- outer: compositions A, in generation order
- middle: long strings y, in enumeration order
- inner: every short string x, embedded with (y, A)

The first y that works for a given A is that composition's witness; the
middle loop stops there and the driver moves on to the next A.
Compositions without a witness produce no output.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple
import time

import numpy as np

from .constants import COMPOSITION_LENGTH, TARGET_SUM, MAX_PART
from .strings import binary_strings
from .compositions import Composition, generate_compositions
from .embedding import embedded_family
from .distance import edit_distance, hamming_matrix


# =============================================================================
# SECTION 1: Configuration
# =============================================================================

@dataclass(frozen=True)
class SearchConfig:
    """
    Parameters of one search run.

    Only the composition parameters are configurable; the string lengths
    follow from them so that every (x, y, A) triple satisfies the
    embedding contract len(x) == K + 1 and len(y) == sum(A) == T.

    Attributes:
        composition_length: K, entries per composition
        target_sum: T, sum of every composition
        max_part: U, upper bound of a single entry
    """
    composition_length: int = COMPOSITION_LENGTH
    target_sum: int = TARGET_SUM
    max_part: int = MAX_PART

    def __post_init__(self):
        """Validate configuration."""
        if self.composition_length < 0:
            raise ValueError(f"composition_length must be >= 0, got {self.composition_length}")
        if self.target_sum < 0:
            raise ValueError(f"target_sum must be >= 0, got {self.target_sum}")
        if self.max_part < 0:
            raise ValueError(f"max_part must be >= 0, got {self.max_part}")

    @property
    def short_length(self) -> int:
        """Length of the short strings x (K + 1)."""
        return self.composition_length + 1

    @property
    def long_length(self) -> int:
        """Length of the long strings y (T)."""
        return self.target_sum

    @property
    def embedded_length(self) -> int:
        """Length of every embedded string."""
        return self.short_length + self.long_length


# =============================================================================
# SECTION 2: Results
# =============================================================================

@dataclass(frozen=True)
class Witness:
    """A composition together with the first long string that satisfies it."""
    composition: Composition
    y: str

    def describe(self) -> str:
        coeffs = ", ".join(str(a) for a in self.composition)
        return f"Valid embedding with y = {self.y} and A = [{coeffs}]"


@dataclass
class SearchReport:
    """Outcome of EmbeddingSearch.run()."""
    config: SearchConfig
    witnesses: List[Witness] = field(default_factory=list)
    compositions_checked: int = 0
    families_checked: int = 0
    elapsed: float = 0.0

    def summary(self) -> str:
        return (
            f"{len(self.witnesses)}/{self.compositions_checked} compositions have a witness "
            f"({self.families_checked} families checked in {self.elapsed:.2f}s)"
        )


# =============================================================================
# SECTION 3: Family Verification
# =============================================================================

def first_violation(family: Sequence[str]) -> Optional[Tuple[int, int, int, int]]:
    """
    Find the first pair on which Hamming and edit distance disagree.

    Pairs are visited in (i, j) order with i < j. Only pairs at Hamming
    distance >= 3 can disagree, so edit distance is computed for those
    alone.

    Args:
        family: Equal-length strings

    Returns:
        (i, j, hamming, edit) for the first disagreeing pair, or None
    """
    ham = hamming_matrix(family)
    candidates = np.argwhere(np.triu(ham >= 3, k=1))
    for i, j in candidates:
        i, j = int(i), int(j)
        ed = edit_distance(family[i], family[j])
        if ed != ham[i, j]:
            return (i, j, int(ham[i, j]), ed)
    return None


def preserves_distances(family: Sequence[str]) -> bool:
    """True when edit distance equals Hamming distance on every pair."""
    return first_violation(family) is None


# =============================================================================
# SECTION 4: Driver
# =============================================================================

class EmbeddingSearch:
    """
    Exhaustive witness search for one SearchConfig.

    The short strings, long strings and compositions are generated once,
    up front, and reused for every (A, y) combination.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.short_strings: List[str] = binary_strings(self.config.short_length)
        self.long_strings: List[str] = binary_strings(self.config.long_length)
        self.compositions: List[Composition] = generate_compositions(
            self.config.composition_length,
            self.config.target_sum,
            self.config.max_part,
        )
        self.families_checked = 0

    def find_witness(self, composition: Composition) -> Optional[Witness]:
        """
        Return the first long string y that works for this composition.

        Returns:
            Witness, or None if no y satisfies the property
        """
        for y in self.long_strings:
            family = embedded_family(self.short_strings, y, composition)
            self.families_checked += 1
            if preserves_distances(family):
                return Witness(composition=tuple(composition), y=y)
        return None

    def iter_witnesses(self) -> Iterator[Witness]:
        """Yield at most one witness per composition, in composition order."""
        for composition in self.compositions:
            witness = self.find_witness(composition)
            if witness is not None:
                yield witness

    def run(self, verbose: bool = False) -> SearchReport:
        """
        Run the full search, printing each witness line as it is found.

        Args:
            verbose: Also print a header, progress and a summary

        Returns:
            SearchReport with every witness found
        """
        cfg = self.config
        report = SearchReport(config=cfg)
        start = time.time()
        families_before = self.families_checked
        total = len(self.compositions)

        if verbose:
            print(f"--- Embedding search: K={cfg.composition_length}, "
                  f"T={cfg.target_sum}, U={cfg.max_part} ---")
            print(f"{total} compositions, {len(self.long_strings)} long strings, "
                  f"family size {len(self.short_strings)}")

        for idx, composition in enumerate(self.compositions):
            witness = self.find_witness(composition)
            report.compositions_checked += 1
            if witness is not None:
                report.witnesses.append(witness)
                print(witness.describe())
            if verbose and (idx + 1) % 100 == 0:
                print(f"Checked {idx + 1}/{total} compositions.")

        report.families_checked = self.families_checked - families_before
        report.elapsed = time.time() - start

        if verbose:
            print(report.summary())
        return report

"""
Small-Scale Demonstration of the Embedding Search

The reference run (K=9, T=12) takes a long time in pure Python. This
script walks through the same pipeline on parameters that finish in
seconds:
1. Which compositions are admissible?
2. What does an embedded family look like?
3. Which compositions have a witness, and why do the others fail?
"""

from hamming_edit import (
    EmbeddingSearch,
    SearchConfig,
    embedded_family,
    first_violation,
    generate_compositions,
)


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_compositions():
    print_section("STEP 1: Admissible Compositions")

    for length, target in [(2, 1), (2, 2), (3, 3)]:
        comps = generate_compositions(length, target)
        print(f"K={length}, T={target}: {len(comps)} compositions")
        for comp in comps:
            print(f"  {list(comp)}")


def demonstrate_family():
    print_section("STEP 2: Embedded Family")

    search = EmbeddingSearch(SearchConfig(composition_length=2, target_sum=2))
    composition = search.compositions[0]
    y = search.long_strings[1]
    family = embedded_family(search.short_strings, y, composition)

    print(f"A = {list(composition)}, y = {y}")
    for x, s in zip(search.short_strings, family):
        print(f"  x = {x}  ->  {s}")


def demonstrate_search():
    print_section("STEP 3: Witness Search")

    config = SearchConfig(composition_length=3, target_sum=3)
    search = EmbeddingSearch(config)
    report = search.run(verbose=True)

    found = {w.composition for w in report.witnesses}
    for composition in search.compositions:
        if composition in found:
            continue
        family = embedded_family(search.short_strings, search.long_strings[0], composition)
        violation = first_violation(family)
        if violation is not None:
            i, j, ham, ed = violation
            print(f"A = {list(composition)} fails already at the first y = {search.long_strings[0]}: "
                  f"{family[i]} vs {family[j]} (hamming {ham}, edit {ed})")


if __name__ == "__main__":
    demonstrate_compositions()
    demonstrate_family()
    demonstrate_search()

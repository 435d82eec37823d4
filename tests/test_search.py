"""
Tests for the embedding search driver
"""

import dataclasses

import pytest

from hamming_edit import (
    EmbeddingSearch,
    SearchConfig,
    Witness,
    edit_distance,
    embedded_family,
    first_violation,
    hamming_distance,
    preserves_distances,
)
from hamming_edit.__main__ import main


def naive_witnesses(config):
    """Reference loop: every pair, no shortcuts."""
    search = EmbeddingSearch(config)
    witnesses = []
    for A in search.compositions:
        for y in search.long_strings:
            family = embedded_family(search.short_strings, y, A)
            ok = all(
                edit_distance(family[i], family[j]) == hamming_distance(family[i], family[j])
                for i in range(len(family))
                for j in range(i + 1, len(family))
            )
            if ok:
                witnesses.append(Witness(composition=A, y=y))
                break
    return witnesses


class TestSearchConfig:
    def test_reference_defaults(self):
        config = SearchConfig()
        assert config.composition_length == 9
        assert config.target_sum == 12
        assert config.max_part == 8
        assert config.short_length == 10
        assert config.long_length == 12
        assert config.embedded_length == 22

    def test_lengths_follow_composition(self):
        config = SearchConfig(composition_length=3, target_sum=5)
        assert config.short_length == 4
        assert config.long_length == 5

    def test_negative_values(self):
        with pytest.raises(ValueError):
            SearchConfig(composition_length=-1)
        with pytest.raises(ValueError):
            SearchConfig(target_sum=-1)
        with pytest.raises(ValueError):
            SearchConfig(max_part=-1)

    def test_frozen(self):
        config = SearchConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.target_sum = 3


class TestWitness:
    def test_describe(self):
        witness = Witness(composition=(1, 2, 3), y="0101")
        assert witness.describe() == "Valid embedding with y = 0101 and A = [1, 2, 3]"


class TestFirstViolation:
    def test_shifted_pair(self):
        assert first_violation(["0101", "1010"]) == (0, 1, 4, 2)

    def test_complement_pair_agrees(self):
        assert first_violation(["000", "111"]) is None
        assert preserves_distances(["000", "111"])

    def test_first_in_pair_order(self):
        family = ["0000", "0101", "1010", "0110"]
        i, j, ham, ed = first_violation(family)
        assert (i, j) == (1, 2)
        assert (ham, ed) == (4, 2)

    def test_wide_characters(self):
        assert first_violation(["\u0101\u0102\u0103", "abc"]) is None
        assert first_violation(["\u0101b\u0101b", "b\u0101b\u0101"]) == (0, 1, 4, 2)

    def test_small_families(self):
        assert first_violation([]) is None
        assert first_violation(["01"]) is None


class TestEmbeddingSearch:
    def test_precomputed_inputs(self):
        search = EmbeddingSearch(SearchConfig(composition_length=2, target_sum=2))
        assert search.compositions == [(0, 2), (1, 1), (2, 0)]
        assert len(search.short_strings) == 8
        assert len(search.long_strings) == 4

    def test_family_lengths(self):
        config = SearchConfig(composition_length=3, target_sum=4)
        search = EmbeddingSearch(config)
        for A in search.compositions:
            family = embedded_family(search.short_strings, search.long_strings[5], A)
            assert all(len(s) == config.embedded_length for s in family)

    def test_single_entry_always_first_y(self):
        # only the two x bits vary, so Hamming distance never exceeds 2
        search = EmbeddingSearch(SearchConfig(composition_length=1, target_sum=3))
        witness = search.find_witness((3,))
        assert witness == Witness(composition=(3,), y="000")
        assert search.families_checked == 1

    @pytest.mark.parametrize("length,target_sum", [(2, 2), (2, 3), (3, 3), (3, 4)])
    def test_matches_naive_loop(self, length, target_sum):
        config = SearchConfig(composition_length=length, target_sum=target_sum)
        search = EmbeddingSearch(config)
        assert list(search.iter_witnesses()) == naive_witnesses(config)

    def test_run_prints_witness_lines(self, capsys):
        search = EmbeddingSearch(SearchConfig(composition_length=1, target_sum=2))
        report = search.run()
        out = capsys.readouterr().out
        assert out == "Valid embedding with y = 00 and A = [2]\n"
        assert report.witnesses == [Witness(composition=(2,), y="00")]
        assert report.compositions_checked == 1
        assert report.families_checked == 1

    def test_run_without_compositions(self, capsys):
        report = EmbeddingSearch(SearchConfig(composition_length=2, target_sum=1)).run()
        assert capsys.readouterr().out == ""
        assert report.witnesses == []
        assert report.compositions_checked == 0

    def test_run_matches_iter_witnesses(self, capsys):
        config = SearchConfig(composition_length=3, target_sum=3)
        report = EmbeddingSearch(config).run()
        expected = list(EmbeddingSearch(config).iter_witnesses())
        assert report.witnesses == expected
        lines = capsys.readouterr().out.splitlines()
        assert lines == [w.describe() for w in expected]

    def test_verbose_summary(self, capsys):
        report = EmbeddingSearch(SearchConfig(composition_length=1, target_sum=1)).run(verbose=True)
        out = capsys.readouterr().out
        assert "Embedding search: K=1, T=1, U=8" in out
        assert report.summary() in out


class TestMain:
    def test_main_runs_reference_config(self, monkeypatch, capsys):
        calls = []

        def fake_run(self, verbose=False):
            calls.append(self.config)

        monkeypatch.setattr(EmbeddingSearch, "__init__",
                            lambda self, config=None: setattr(self, "config", config))
        monkeypatch.setattr(EmbeddingSearch, "run", fake_run)
        assert main() == 0
        assert calls == [SearchConfig()]

    def test_main_prints_witness_lines(self, monkeypatch, capsys):
        # the reference configuration is far too slow to run here
        import hamming_edit.__main__ as entry

        monkeypatch.setattr(entry, "SearchConfig",
                            lambda: SearchConfig(composition_length=1, target_sum=2))
        assert entry.main() == 0
        assert capsys.readouterr().out == "Valid embedding with y = 00 and A = [2]\n"

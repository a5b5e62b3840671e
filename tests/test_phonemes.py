"""
Tests for the Phoneme Model
===========================
Tests for inventories, syllables and phonotactics loading in
namekit/generators/phonemes.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.generators.phonemes import (
    Onset,
    Nucleus,
    Coda,
    Syllable,
    parse_phonotactics,
    load_phonotactics,
    reachable_syllables,
)


def _raw_config(**overrides):
    raw = {
        'onset_weights': {'p': 1, 't': 1},
        'nucleus_weights': {'a': 1, 'i': 1},
        'nucleus_exclusions': {'i': ['t']},
        'nasal_onsets': ['m', 'n'],
        'first_null_onset_probability': 0.25,
        'nasal_coda_probability': 0.1,
    }
    raw.update(overrides)
    return raw


class TestSyllableLength:
    """Tests for character-length accounting."""

    def test_full_syllable(self):
        assert len(Syllable(Onset.K, Nucleus.A, Coda.N)) == 4

    def test_open_syllable(self):
        assert len(Syllable(Onset.K, Nucleus.A)) == 2

    def test_bare_vowel(self):
        assert len(Syllable(Onset.NONE, Nucleus.U)) == 1

    def test_vowel_with_nasal(self):
        """Nasal coda counts two characters."""
        assert len(Syllable(Onset.NONE, Nucleus.E, Coda.N)) == 3


class TestSyllable:
    """Tests for Syllable helpers."""

    def test_without_coda(self):
        syl = Syllable(Onset.L, Nucleus.I, Coda.N)
        cleared = syl.without_coda()
        assert cleared == Syllable(Onset.L, Nucleus.I)
        assert syl.coda is Coda.N

    def test_str_is_romanized(self):
        assert str(Syllable(Onset.L, Nucleus.I, Coda.N)) == "lin"
        assert str(Syllable(Onset.NONE, Nucleus.A)) == "a"

    def test_key(self):
        syl = Syllable(Onset.M, Nucleus.O)
        assert syl.key == (Onset.M, Nucleus.O, Coda.NONE)

    def test_hashable(self):
        assert len({Syllable(Onset.P, Nucleus.A), Syllable(Onset.P, Nucleus.A)}) == 1

    @pytest.mark.parametrize("text,expected", [
        ("ka", Syllable(Onset.K, Nucleus.A)),
        ("lin", Syllable(Onset.L, Nucleus.I, Coda.N)),
        ("e", Syllable(Onset.NONE, Nucleus.E)),
        ("un", Syllable(Onset.NONE, Nucleus.U, Coda.N)),
        (" Mo ", Syllable(Onset.M, Nucleus.O)),
    ])
    def test_parse(self, text, expected):
        assert Syllable.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "k", "kka", "ba", "kam", "kaa"])
    def test_parse_rejects(self, text):
        with pytest.raises(ValueError):
            Syllable.parse(text)


class TestNucleus:
    """Tests for vowel backness."""

    def test_back_vowels(self):
        assert {n for n in Nucleus if n.is_back} == {Nucleus.A, Nucleus.O, Nucleus.U}


class TestPhonotactics:
    """Tests for the packaged phonotactics."""

    @pytest.fixture
    def tactics(self):
        return load_phonotactics()

    def test_onset_weights(self, tactics):
        assert tactics.onset_weights[Onset.K] == 91
        assert tactics.onset_weights[Onset.W] == 34
        assert Onset.NONE not in tactics.onset_weights

    def test_nucleus_weights(self, tactics):
        assert tactics.nucleus_weights[Nucleus.A] == 146
        assert tactics.nucleus_weights[Nucleus.I] == 140

    def test_probabilities(self, tactics):
        assert tactics.first_null_onset_probability == 0.25
        assert tactics.nasal_coda_probability == 0.1

    def test_nasal_onsets(self, tactics):
        assert tactics.nasal_onsets == {Onset.M, Onset.N}

    def test_onset_items_exclude_null(self, tactics):
        onsets = [onset for onset, _ in tactics.onset_items()]
        assert Onset.NONE not in onsets
        assert len(onsets) == 9

    def test_excluded_nuclei_weigh_zero(self, tactics):
        after_t = dict(tactics.nucleus_items(Onset.T))
        assert after_t[Nucleus.I] == 0
        assert after_t[Nucleus.A] == 146

        after_w = dict(tactics.nucleus_items(Onset.W))
        assert after_w[Nucleus.O] == 0
        assert after_w[Nucleus.U] == 0
        assert after_w[Nucleus.I] == 140

    @pytest.mark.parametrize("onset,nucleus", [
        (Onset.T, Nucleus.I),
        (Onset.J, Nucleus.I),
        (Onset.W, Nucleus.O),
        (Onset.W, Nucleus.U),
    ])
    def test_disallowed_pairs(self, tactics, onset, nucleus):
        assert not tactics.allows(onset, nucleus)

    def test_reachable_syllables(self):
        reachable = reachable_syllables()
        # 10 onsets x 5 nuclei, minus 4 excluded pairs, each with and without coda
        assert len(reachable) == 92
        assert Syllable(Onset.T, Nucleus.I) not in reachable
        assert Syllable(Onset.NONE, Nucleus.I, Coda.N) in reachable


class TestParsePhonotactics:
    """Tests for config validation."""

    def test_valid(self):
        tactics = parse_phonotactics(_raw_config())
        assert tactics.onset_weights == {Onset.P: 1, Onset.T: 1}
        assert tactics.nucleus_exclusions == {Nucleus.I: frozenset({Onset.T})}

    def test_missing_key(self):
        raw = _raw_config()
        del raw['nucleus_weights']
        with pytest.raises(ValueError, match="nucleus_weights"):
            parse_phonotactics(raw)

    def test_negative_weight(self):
        with pytest.raises(ValueError):
            parse_phonotactics(_raw_config(onset_weights={'p': -1, 't': 2}))

    def test_null_onset_weight_rejected(self):
        with pytest.raises(ValueError, match="null onset"):
            parse_phonotactics(_raw_config(onset_weights={'none': 5, 'p': 1}))

    def test_all_zero_onsets_rejected(self):
        with pytest.raises(ValueError):
            parse_phonotactics(_raw_config(onset_weights={'p': 0}))

    def test_probability_out_of_range(self):
        with pytest.raises(ValueError):
            parse_phonotactics(_raw_config(nasal_coda_probability=1.5))

    def test_unknown_phoneme(self):
        with pytest.raises(ValueError):
            parse_phonotactics(_raw_config(onset_weights={'b': 1}))

"""
Tests for Script Renderers
==========================
Tests for the per-script rendering rules in namekit/scripts.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.generators import Coda, Name, Nucleus, Onset, Syllable, reachable_syllables
from namekit.scripts import RENDERERS, Script, UnreachableSyllableError, write_syllable


def render(text, script):
    return Name.parse(text).write(script)


class TestScriptEnum:
    """Tests for script lookup."""

    def test_twenty_scripts(self):
        assert len(Script) == 20
        assert set(RENDERERS) == set(Script)

    @pytest.mark.parametrize("name,expected", [
        ("latin", Script.LATIN),
        ("latin-title-case", Script.LATIN_TITLE_CASE),
        ("LATIN_TITLE_CASE", Script.LATIN_TITLE_CASE),
        (" Hangul ", Script.HANGUL),
    ])
    def test_from_name(self, name, expected):
        assert Script.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Available scripts"):
            Script.from_name("klingon")


class TestLatin:
    """Tests for Latin and title-case Latin."""

    def test_plain(self):
        assert render("ka-lin-mo", Script.LATIN) == "kalinmo"

    def test_title_case_onset(self):
        assert render("ka-lin-mo", Script.LATIN_TITLE_CASE) == "Kalinmo"

    def test_title_case_vowel(self):
        assert render("a-ka", Script.LATIN_TITLE_CASE) == "Aka"

    def test_title_case_only_first_syllable(self):
        syl = Syllable(Onset.K, Nucleus.A)
        assert write_syllable(syl, Script.LATIN_TITLE_CASE, prev=syl) == "ka"


class TestAlphabets:
    """Tests for letter-by-letter scripts."""

    @pytest.mark.parametrize("script,expected", [
        (Script.GREEK, "καλινμο"),
        (Script.CYRILLIC, "калинмо"),
        (Script.GEORGIAN, "ქალინმო"),
        (Script.FUTHARK, "ᚲᚨᛚᛁᚾᛗᛟ"),
        (Script.OGHAM, "ᚉᚐᚂᚔᚅᚋᚑ"),
    ])
    def test_spelling(self, script, expected):
        assert render("ka-lin-mo", script) == expected

    def test_cyrillic_uses_cyrillic_a(self):
        assert render("a", Script.CYRILLIC) == "а"

    def test_cyrillic_never_emits_ascii(self):
        for syllable in reachable_syllables():
            if syllable.onset is Onset.J and syllable.nucleus is Nucleus.I:
                continue
            text = write_syllable(syllable, Script.CYRILLIC)
            assert not any(ord(c) < 128 for c in text), str(syllable)

    @pytest.mark.parametrize("text,expected", [
        ("ja", "я"),
        ("je", "е"),
        ("jo", "ё"),
        ("jun", "юн"),
        ("ka-ja", "кая"),
    ])
    def test_cyrillic_iotated(self, text, expected):
        assert render(text, Script.CYRILLIC) == expected


class TestSemitic:
    """Tests for Hebrew and Arabic."""

    def test_hebrew_medial_nun(self):
        name = Name([
            Syllable(Onset.NONE, Nucleus.A),
            Syllable(Onset.P, Nucleus.A, Coda.N),
            Syllable(Onset.T, Nucleus.I),
        ])
        assert name.write(Script.HEBREW) == "אָ" + "פָנ" + "טִ"

    def test_hebrew_final_nun(self):
        name = Name([
            Syllable(Onset.NONE, Nucleus.A),
            Syllable(Onset.P, Nucleus.A, Coda.N),
        ])
        assert name.write(Script.HEBREW) == "אָ" + "פָן"

    @pytest.mark.parametrize("text,expected", [
        ("ka", "كَ"),
        ("kan", "كً"),
        ("li", "لِي"),
        ("o", "اُ"),
        ("su", "سِو"),
        ("sun", "سٌو"),
    ])
    def test_arabic(self, text, expected):
        assert render(text, Script.ARABIC) == expected


class TestAbugidas:
    """Tests for Devanagari, Gujarati and Kannada."""

    def test_devanagari_inherent_vowel(self):
        assert render("ka", Script.DEVANAGARI) == "क"

    def test_devanagari_vowel_sign(self):
        assert render("ki", Script.DEVANAGARI) == "कि"

    def test_devanagari_independent_vowel(self):
        assert render("e-ka", Script.DEVANAGARI) == "एक"

    def test_devanagari_anusvara(self):
        assert render("kan", Script.DEVANAGARI) == "कं"
        assert render("kan-ta", Script.DEVANAGARI) == "कंत"

    def test_gujarati_long_a(self):
        assert render("ka", Script.GUJARATI) == "કા"

    def test_gujarati_nasal(self):
        assert render("kan", Script.GUJARATI) == "કાન"
        assert render("kan-ta", Script.GUJARATI) == "કાન્તા"

    def test_kannada_nasal(self):
        assert render("kan", Script.KANNADA) == "ಕನ್"
        assert render("kan-ta", Script.KANNADA) == "ಕಂತ"


class TestBlocks:
    """Tests for syllable-block scripts."""

    def test_hangul(self):
        assert render("ka-lin-mo", Script.HANGUL) == "가린모"

    def test_ascii(self):
        assert render("ka-lin-mo", Script.ASCII) == "KIO"

    def test_syllabics_final(self):
        assert render("lin", Script.SYLLABICS) == "ᓕᓐ"

    def test_hiragana(self):
        assert render("ka-lin-mo", Script.HIRAGANA) == "かりんも"

    def test_hiragana_je(self):
        assert render("je", Script.HIRAGANA) == "江"

    def test_katakana(self):
        assert render("kan", Script.KATAKANA) == "カン"


class TestCoverage:
    """Every reachable syllable renders; unreachable ones raise."""

    @pytest.mark.parametrize("script", list(Script), ids=lambda s: s.value)
    def test_all_reachable_syllables(self, script):
        for syllable in reachable_syllables():
            assert write_syllable(syllable, script), f"{script.value}: {syllable}"

    @pytest.mark.parametrize("script", [
        Script.HANGUL, Script.ASCII, Script.SYLLABICS, Script.HIRAGANA, Script.KATAKANA,
    ])
    @pytest.mark.parametrize("syllable", [
        Syllable(Onset.T, Nucleus.I),
        Syllable(Onset.J, Nucleus.I, Coda.N),
        Syllable(Onset.W, Nucleus.O),
        Syllable(Onset.W, Nucleus.U, Coda.N),
    ], ids=str)
    def test_unreachable_raises(self, script, syllable):
        with pytest.raises(UnreachableSyllableError) as excinfo:
            write_syllable(syllable, script)
        assert excinfo.value.script == script.value
        assert isinstance(excinfo.value, LookupError)

    def test_cyrillic_iotated_i_unreachable(self):
        with pytest.raises(UnreachableSyllableError):
            write_syllable(Syllable(Onset.J, Nucleus.I), Script.CYRILLIC)

    def test_error_message_names_phonemes(self):
        with pytest.raises(UnreachableSyllableError, match="Onset.W"):
            write_syllable(Syllable(Onset.W, Nucleus.O), Script.HANGUL)

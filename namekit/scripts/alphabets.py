#!/usr/bin/env python3
"""
Alphabetic Scripts
==================
Scripts that spell a syllable letter by letter: onset glyph (if any),
nucleus glyph, coda glyph (if any).

Special cases:
- Title-case Latin capitalizes the first glyph of the first syllable only.
- Cyrillic writes a j onset as an iotated vowel (ja -> я) instead of a
  separate consonant letter.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ..generators.phonemes import Coda, Nucleus, Onset, Syllable
from .lookup import lookup


@dataclass(frozen=True)
class Alphabet:
    """Letter tables for one alphabetic script."""
    name: str
    onsets: Dict[Onset, str]
    nuclei: Dict[Nucleus, str]
    final_n: str

    def onset(self, onset: Onset) -> str:
        if onset is Onset.NONE:
            return ''
        return lookup(self.onsets, onset, self.name)

    def nucleus(self, nucleus: Nucleus) -> str:
        return lookup(self.nuclei, nucleus, self.name)

    def coda(self, coda: Coda) -> str:
        return self.final_n if coda is Coda.N else ''

    def spell(self, syllable: Syllable) -> str:
        return self.onset(syllable.onset) + self.nucleus(syllable.nucleus) + self.coda(syllable.coda)


LATIN = Alphabet(
    name='latin',
    onsets={
        Onset.P: 'p', Onset.T: 't', Onset.K: 'k', Onset.S: 's', Onset.M: 'm',
        Onset.N: 'n', Onset.L: 'l', Onset.J: 'j', Onset.W: 'w',
    },
    nuclei={Nucleus.A: 'a', Nucleus.E: 'e', Nucleus.I: 'i', Nucleus.O: 'o', Nucleus.U: 'u'},
    final_n='n',
)

GREEK = Alphabet(
    name='greek',
    onsets={
        Onset.P: 'π', Onset.T: 'τ', Onset.K: 'κ', Onset.S: 'σ', Onset.M: 'μ',
        Onset.N: 'ν', Onset.L: 'λ', Onset.J: 'γ', Onset.W: 'β',
    },
    nuclei={Nucleus.A: 'α', Nucleus.E: 'ε', Nucleus.I: 'ι', Nucleus.O: 'ο', Nucleus.U: 'υ'},
    final_n='ν',
)

# No entry for j: see CYRILLIC_IOTATED.
CYRILLIC = Alphabet(
    name='cyrillic',
    onsets={
        Onset.P: 'п', Onset.T: 'т', Onset.K: 'к', Onset.S: 'с', Onset.M: 'м',
        Onset.N: 'н', Onset.L: 'л', Onset.W: 'в',
    },
    nuclei={Nucleus.A: 'а', Nucleus.E: 'э', Nucleus.I: 'и', Nucleus.O: 'о', Nucleus.U: 'у'},
    final_n='н',
)

CYRILLIC_IOTATED = {
    Nucleus.A: 'я',
    Nucleus.E: 'е',
    Nucleus.O: 'ё',
    Nucleus.U: 'ю',
}

GOTHIC = Alphabet(
    name='gothic',
    onsets={
        Onset.P: '𐍀', Onset.T: '𐍄', Onset.K: '𐌺', Onset.S: '𐍃', Onset.M: '𐌼',
        Onset.N: '𐌽', Onset.L: '𐌻', Onset.J: '𐌾', Onset.W: '𐍅',
    },
    nuclei={Nucleus.A: '𐌰', Nucleus.E: '𐌴', Nucleus.I: '𐌹', Nucleus.O: '𐍉', Nucleus.U: '𐌿'},
    final_n='𐌽',
)

FUTHARK = Alphabet(
    name='futhark',
    onsets={
        Onset.P: 'ᛈ', Onset.T: 'ᛏ', Onset.K: 'ᚲ', Onset.S: 'ᛊ', Onset.M: 'ᛗ',
        Onset.N: 'ᚾ', Onset.L: 'ᛚ', Onset.J: 'ᛃ', Onset.W: 'ᚹ',
    },
    nuclei={Nucleus.A: 'ᚨ', Nucleus.E: 'ᛖ', Nucleus.I: 'ᛁ', Nucleus.O: 'ᛟ', Nucleus.U: 'ᚢ'},
    final_n='ᚾ',
)

OGHAM = Alphabet(
    name='ogham',
    onsets={
        Onset.P: 'ᚁ', Onset.T: 'ᚈ', Onset.K: 'ᚉ', Onset.S: 'ᚄ', Onset.M: 'ᚋ',
        Onset.N: 'ᚅ', Onset.L: 'ᚂ', Onset.J: 'ᚆ', Onset.W: 'ᚃ',
    },
    nuclei={Nucleus.A: 'ᚐ', Nucleus.E: 'ᚓ', Nucleus.I: 'ᚔ', Nucleus.O: 'ᚑ', Nucleus.U: 'ᚒ'},
    final_n='ᚅ',
)

SHAVIAN = Alphabet(
    name='shavian',
    onsets={
        Onset.P: '𐑐', Onset.T: '𐑑', Onset.K: '𐑒', Onset.S: '𐑕', Onset.M: '𐑥',
        Onset.N: '𐑯', Onset.L: '𐑤', Onset.J: '𐑘', Onset.W: '𐑢',
    },
    nuclei={Nucleus.A: '𐑨', Nucleus.E: '𐑧', Nucleus.I: '𐑦', Nucleus.O: '𐑪', Nucleus.U: '𐑩'},
    final_n='𐑯',
)

# Mkhedruli
GEORGIAN = Alphabet(
    name='georgian',
    onsets={
        Onset.P: 'ფ', Onset.T: 'თ', Onset.K: 'ქ', Onset.S: 'ს', Onset.M: 'მ',
        Onset.N: 'ნ', Onset.L: 'ლ', Onset.J: 'ჲ', Onset.W: 'ჳ',
    },
    nuclei={Nucleus.A: 'ა', Nucleus.E: 'ე', Nucleus.I: 'ი', Nucleus.O: 'ო', Nucleus.U: 'უ'},
    final_n='ნ',
)


def render_latin(syllable: Syllable, prev: Optional[Syllable] = None,
                 next: Optional[Syllable] = None) -> str:
    return LATIN.spell(syllable)


def render_latin_title_case(syllable: Syllable, prev: Optional[Syllable] = None,
                            next: Optional[Syllable] = None) -> str:
    text = LATIN.spell(syllable)
    if prev is None:
        return text[:1].upper() + text[1:]
    return text


def render_cyrillic(syllable: Syllable, prev: Optional[Syllable] = None,
                    next: Optional[Syllable] = None) -> str:
    if syllable.onset is Onset.J:
        text = lookup(CYRILLIC_IOTATED, syllable.nucleus, 'cyrillic')
    else:
        text = CYRILLIC.onset(syllable.onset) + CYRILLIC.nucleus(syllable.nucleus)
    return text + CYRILLIC.coda(syllable.coda)


def render_greek(syllable: Syllable, prev: Optional[Syllable] = None,
                 next: Optional[Syllable] = None) -> str:
    return GREEK.spell(syllable)


def render_gothic(syllable: Syllable, prev: Optional[Syllable] = None,
                  next: Optional[Syllable] = None) -> str:
    return GOTHIC.spell(syllable)


def render_futhark(syllable: Syllable, prev: Optional[Syllable] = None,
                   next: Optional[Syllable] = None) -> str:
    return FUTHARK.spell(syllable)


def render_ogham(syllable: Syllable, prev: Optional[Syllable] = None,
                 next: Optional[Syllable] = None) -> str:
    return OGHAM.spell(syllable)


def render_shavian(syllable: Syllable, prev: Optional[Syllable] = None,
                   next: Optional[Syllable] = None) -> str:
    return SHAVIAN.spell(syllable)


def render_georgian(syllable: Syllable, prev: Optional[Syllable] = None,
                    next: Optional[Syllable] = None) -> str:
    return GEORGIAN.spell(syllable)

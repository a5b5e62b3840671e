#!/usr/bin/env python3
"""
Semitic Scripts
===============
Arabic and Hebrew, both written with an explicit consonant seat for every
syllable (alef for the null onset) and vowels as diacritics.

- Arabic picks the vowel diacritic and the nasal ending together from a
  (nucleus, coda) table: the nasal coda is written as tanwin, and long
  vowels add a yeh or waw.
- Hebrew spells the nasal coda with nun, switching to final nun at the end
  of the word.
"""

from typing import Optional

from ..generators.phonemes import Coda, Nucleus, Onset, Syllable
from .lookup import lookup


ARABIC_CONSONANTS = {
    Onset.NONE: 'ا',
    Onset.P: 'ب',
    Onset.T: 'ت',
    Onset.K: 'ك',
    Onset.S: 'س',
    Onset.M: 'م',
    Onset.N: 'ن',
    Onset.L: 'ل',
    Onset.J: 'ي',
    Onset.W: 'و',
}

FATHA = '\u064e'
FATHATAN = '\u064b'
KASRA = '\u0650'
KASRATAN = '\u064d'
DAMMA = '\u064f'
DAMMATAN = '\u064c'
YEH = 'ي'
WAW = 'و'

ARABIC_VOWELS = {
    (Nucleus.A, Coda.NONE): FATHA,
    (Nucleus.A, Coda.N): FATHATAN,
    (Nucleus.E, Coda.NONE): KASRA,
    (Nucleus.E, Coda.N): KASRATAN,
    (Nucleus.I, Coda.NONE): KASRA + YEH,
    (Nucleus.I, Coda.N): KASRATAN + YEH,
    (Nucleus.O, Coda.NONE): DAMMA,
    (Nucleus.O, Coda.N): DAMMATAN,
    (Nucleus.U, Coda.NONE): KASRA + WAW,
    (Nucleus.U, Coda.N): DAMMATAN + WAW,
}

HEBREW_CONSONANTS = {
    Onset.NONE: 'א',
    Onset.P: 'פ',
    Onset.T: 'ט',
    Onset.K: 'ק',
    Onset.S: 'ס',
    Onset.M: 'מ',
    Onset.N: 'נ',
    Onset.L: 'ל',
    Onset.J: 'י',
    Onset.W: 'ו',
}

HEBREW_POINTS = {
    Nucleus.A: '\u05b8',  # qamats
    Nucleus.E: '\u05b6',  # segol
    Nucleus.I: '\u05b4',  # hiriq
    Nucleus.O: '\u05b9',  # holam
    Nucleus.U: '\u05bb',  # qubuts
}

HEBREW_NUN = 'נ'
HEBREW_FINAL_NUN = 'ן'


def render_arabic(syllable: Syllable, prev: Optional[Syllable] = None,
                  next: Optional[Syllable] = None) -> str:
    consonant = lookup(ARABIC_CONSONANTS, syllable.onset, 'arabic')
    return consonant + lookup(ARABIC_VOWELS, (syllable.nucleus, syllable.coda), 'arabic')


def hebrew_nasal(word_final: bool) -> str:
    """Nun in its medial or final letterform."""
    return HEBREW_FINAL_NUN if word_final else HEBREW_NUN


def render_hebrew(syllable: Syllable, prev: Optional[Syllable] = None,
                  next: Optional[Syllable] = None) -> str:
    text = lookup(HEBREW_CONSONANTS, syllable.onset, 'hebrew')
    text += lookup(HEBREW_POINTS, syllable.nucleus, 'hebrew')
    if syllable.coda is Coda.N:
        text += hebrew_nasal(next is None)
    return text

#!/usr/bin/env python3
"""
Abugida Scripts
===============
Devanagari, Gujarati and Kannada.

A consonant letter carries the inherent vowel; other vowels are written
with a dependent vowel sign after it. A syllable without an onset uses the
independent vowel letter instead. How the nasal coda is spelled depends on
the script and, for Gujarati and Kannada, on whether the syllable ends the
word.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ..generators.phonemes import Coda, Nucleus, Onset, Syllable
from .lookup import lookup


@dataclass(frozen=True)
class Abugida:
    """Letter tables for one abugida."""
    name: str
    consonants: Dict[Onset, str]
    vowels: Dict[Nucleus, str]
    # Dependent vowel signs; a missing nucleus is the inherent vowel.
    vowel_signs: Dict[Nucleus, str]
    final_n: str
    medial_n: str

    def syllable_body(self, syllable: Syllable) -> str:
        if syllable.onset is Onset.NONE:
            return lookup(self.vowels, syllable.nucleus, self.name)
        consonant = lookup(self.consonants, syllable.onset, self.name)
        return consonant + self.vowel_signs.get(syllable.nucleus, '')

    def coda(self, coda: Coda, word_final: bool) -> str:
        if coda is Coda.NONE:
            return ''
        return self.final_n if word_final else self.medial_n

    def spell(self, syllable: Syllable, next: Optional[Syllable]) -> str:
        return self.syllable_body(syllable) + self.coda(syllable.coda, next is None)


DEVANAGARI_ANUSVARA = '\u0902'

DEVANAGARI = Abugida(
    name='devanagari',
    consonants={
        Onset.P: 'प', Onset.T: 'त', Onset.K: 'क', Onset.S: 'स', Onset.M: 'म',
        Onset.N: 'न', Onset.L: 'ल', Onset.J: 'य', Onset.W: 'व',
    },
    vowels={Nucleus.A: 'अ', Nucleus.E: 'ए', Nucleus.I: 'इ', Nucleus.O: 'ओ', Nucleus.U: 'उ'},
    vowel_signs={
        Nucleus.E: '\u0947',
        Nucleus.I: '\u093f',
        Nucleus.O: '\u094b',
        Nucleus.U: '\u0941',
    },
    final_n=DEVANAGARI_ANUSVARA,
    medial_n=DEVANAGARI_ANUSVARA,
)

GUJARATI_NA = 'ન'
GUJARATI_VIRAMA = '\u0acd'

# Gujarati writes the long vowels, so A takes the AA sign too.
GUJARATI = Abugida(
    name='gujarati',
    consonants={
        Onset.P: 'પ', Onset.T: 'ત', Onset.K: 'ક', Onset.S: 'સ', Onset.M: 'મ',
        Onset.N: GUJARATI_NA, Onset.L: 'લ', Onset.J: 'ય', Onset.W: 'વ',
    },
    vowels={Nucleus.A: 'આ', Nucleus.E: 'એ', Nucleus.I: 'ઈ', Nucleus.O: 'ઓ', Nucleus.U: 'ઊ'},
    vowel_signs={
        Nucleus.A: '\u0abe',
        Nucleus.E: '\u0ac7',
        Nucleus.I: '\u0ac0',
        Nucleus.O: '\u0acb',
        Nucleus.U: '\u0ac2',
    },
    final_n=GUJARATI_NA,
    medial_n=GUJARATI_NA + GUJARATI_VIRAMA,
)

KANNADA_NA = 'ನ'
KANNADA_VIRAMA = '\u0ccd'

KANNADA = Abugida(
    name='kannada',
    consonants={
        Onset.P: 'ಪ', Onset.T: 'ತ', Onset.K: 'ಕ', Onset.S: 'ಸ', Onset.M: 'ಮ',
        Onset.N: KANNADA_NA, Onset.L: 'ಲ', Onset.J: 'ಯ', Onset.W: 'ವ',
    },
    vowels={Nucleus.A: 'ಅ', Nucleus.E: 'ಎ', Nucleus.I: 'ಇ', Nucleus.O: 'ಒ', Nucleus.U: 'ಉ'},
    vowel_signs={
        Nucleus.E: '\u0cc6',
        Nucleus.I: '\u0cbf',
        Nucleus.O: '\u0cca',
        Nucleus.U: '\u0cc1',
    },
    final_n=KANNADA_NA + KANNADA_VIRAMA,
    medial_n='\u0c82',
)


def render_devanagari(syllable: Syllable, prev: Optional[Syllable] = None,
                      next: Optional[Syllable] = None) -> str:
    return DEVANAGARI.spell(syllable, next)


def render_gujarati(syllable: Syllable, prev: Optional[Syllable] = None,
                    next: Optional[Syllable] = None) -> str:
    return GUJARATI.spell(syllable, next)


def render_kannada(syllable: Syllable, prev: Optional[Syllable] = None,
                   next: Optional[Syllable] = None) -> str:
    return KANNADA.spell(syllable, next)

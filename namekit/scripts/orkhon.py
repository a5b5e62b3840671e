#!/usr/bin/env python3
"""
Orkhon Runic
============
Old Turkic runes with vowel harmony and positional consonant forms.

Most consonants come in a back-vowel and a front-vowel form. When the
onset rune already shows the harmony of its vowel, a following A or I is
left unwritten. Further rules look across syllable boundaries:

- t and j after a nasal coda fuse with it into the nt and ny runes; the
  coda itself is then not written.
- w after an open syllable ending in o or u is elided.
- A nasal coda takes the back or front n rune according to the vowel of
  the next syllable (front at the end of the word).
"""

from typing import Optional, Tuple

from ..generators.phonemes import Coda, Nucleus, Onset, Syllable


ORKHON_A = '𐰀'
ORKHON_I = '𐰃'
ORKHON_E = '𐰅'
ORKHON_O = '𐰆'

# onset -> (back form, front form)
ORKHON_HARMONIC = {
    Onset.P: ('𐰉', '𐰋'),
    Onset.T: ('𐱃', '𐱅'),
    Onset.K: ('𐰴', '𐰚'),
    Onset.S: ('𐰽', '𐰾'),
    Onset.N: ('𐰣', '𐰤'),
    Onset.L: ('𐰞', '𐰠'),
    Onset.J: ('𐰖', '𐰘'),
}

# Onsets fused with a preceding nasal coda.
ORKHON_NASAL_LIGATURES = {
    Onset.T: '𐰦',
    Onset.J: '𐰪',
}

ORKHON_M = '𐰢'
ORKHON_W = ORKHON_O

ORKHON_BACK_N, ORKHON_FRONT_N = ORKHON_HARMONIC[Onset.N]


def _closed_by_nasal(syllable: Optional[Syllable]) -> bool:
    return syllable is not None and syllable.coda is Coda.N


def onset_rune(onset: Onset, prev: Optional[Syllable], is_back: bool) -> Tuple[str, bool]:
    """
    Pick the rune for an onset.

    Returns
    -------
    tuple[str, bool]
        The rune ('' when nothing is written) and whether it already
        carries the vowel's backness.
    """
    if onset is Onset.NONE:
        return '', False
    if onset in ORKHON_NASAL_LIGATURES and _closed_by_nasal(prev):
        return ORKHON_NASAL_LIGATURES[onset], False
    if onset is Onset.M:
        return ORKHON_M, False
    if onset is Onset.W:
        if (prev is not None and prev.coda is Coda.NONE
                and prev.nucleus in (Nucleus.O, Nucleus.U)):
            return '', False
        return ORKHON_W, False
    back, front = ORKHON_HARMONIC[onset]
    return (back if is_back else front), True


def nucleus_rune(nucleus: Nucleus, has_backness: bool) -> str:
    if nucleus is Nucleus.A:
        return '' if has_backness else ORKHON_A
    if nucleus is Nucleus.I:
        return '' if has_backness else ORKHON_I
    if nucleus is Nucleus.E:
        return ORKHON_E
    return ORKHON_O


def coda_rune(coda: Coda, next: Optional[Syllable]) -> str:
    if coda is Coda.NONE:
        return ''
    if next is None:
        return ORKHON_FRONT_N
    if next.onset in ORKHON_NASAL_LIGATURES:
        return ''
    return ORKHON_BACK_N if next.nucleus.is_back else ORKHON_FRONT_N


def render_orkhon(syllable: Syllable, prev: Optional[Syllable] = None,
                  next: Optional[Syllable] = None) -> str:
    onset, has_backness = onset_rune(syllable.onset, prev, syllable.nucleus.is_back)
    return onset + nucleus_rune(syllable.nucleus, has_backness) + coda_rune(syllable.coda, next)

#!/usr/bin/env python3
"""
Syllable Sampler
================
Draws syllables under the phonotactics in phonemes/phonotactics.yaml.

A name is built in two phases:

1. ``draw_syllable`` is called once per position. Each call makes exactly
   three draws, in order: onset, nucleus, coda. The nasal coda is drawn
   tentatively.
2. ``suppress_nasal_clusters`` walks the raw sequence once and clears the
   coda of any syllable followed by a nasal onset (m, n), so a coda n never
   runs into a following nasal.

Usage:
    from namekit.generators.syllable_generator import SyllableGenerator

    gen = SyllableGenerator()
    syllables = gen.generate(rng, count=3)
"""

from typing import List, Optional, Sequence

from .entropy import SeededRandom
from .phonemes import Coda, Nucleus, Onset, Phonotactics, Syllable, load_phonotactics


class SyllableGenerator:
    """Weighted syllable sampler."""

    def __init__(self, phonotactics: Phonotactics = None):
        self.phonotactics = phonotactics or load_phonotactics()

    def draw_onset(self, rng: SeededRandom, initial: bool) -> Onset:
        if initial and rng.chance(self.phonotactics.first_null_onset_probability):
            return Onset.NONE
        return rng.weighted_choice(self.phonotactics.onset_items())

    def draw_nucleus(self, rng: SeededRandom, onset: Onset) -> Nucleus:
        return rng.weighted_choice(self.phonotactics.nucleus_items(onset))

    def draw_coda(self, rng: SeededRandom) -> Coda:
        if rng.chance(self.phonotactics.nasal_coda_probability):
            return Coda.N
        return Coda.NONE

    def draw_syllable(self, rng: SeededRandom, initial: bool) -> Syllable:
        """
        Draw one syllable with a tentative coda.

        Parameters
        ----------
        rng : SeededRandom
            Randomness source
        initial : bool
            True for the first syllable of a name, the only position where
            the null onset can occur.
        """
        onset = self.draw_onset(rng, initial)
        nucleus = self.draw_nucleus(rng, onset)
        coda = self.draw_coda(rng)
        return Syllable(onset, nucleus, coda)

    def suppress_nasal_clusters(self, syllables: Sequence[Syllable]) -> List[Syllable]:
        """Clear the coda of every syllable followed by a nasal onset."""
        nasal = self.phonotactics.nasal_onsets
        result = list(syllables)
        for i in range(len(result) - 1):
            if result[i + 1].onset in nasal and result[i].coda is not Coda.NONE:
                result[i] = result[i].without_coda()
        return result

    def generate(self, rng: SeededRandom, count: int) -> List[Syllable]:
        """Draw `count` syllables and normalize nasal clusters."""
        raw = [self.draw_syllable(rng, initial=(i == 0)) for i in range(count)]
        return self.suppress_nasal_clusters(raw)


_default: Optional[SyllableGenerator] = None


def get_syllable_generator() -> SyllableGenerator:
    """Shared sampler over the packaged phonotactics."""
    global _default
    if _default is None:
        _default = SyllableGenerator()
    return _default


__all__ = [
    'SyllableGenerator',
    'get_syllable_generator',
]

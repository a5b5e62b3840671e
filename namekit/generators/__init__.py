#!/usr/bin/env python3
"""
Name Generators
===============
Syllable synthesis and length-bounded name generation:
- phonemes: onset/nucleus/coda inventories and phonotactics config
- entropy: seeded randomness source
- syllable_generator: weighted syllable sampler
- name_generator: names, syllable-count distributions, rejection sampling
"""

from .phonemes import (
    Onset,
    Nucleus,
    Coda,
    Syllable,
    Phonotactics,
    load_phonotactics,
    reachable_syllables,
)
from .entropy import (
    SeededRandom,
    seed_from_text,
    MAX_POISSON_LAMBDA,
)
from .syllable_generator import (
    SyllableGenerator,
    get_syllable_generator,
)
from .name_generator import (
    FixedCount,
    PoissonCount,
    SyllableCountDistribution,
    syllable_count_distribution,
    Name,
    NameGenerator,
    validate_lengths,
)

__all__ = [
    # Phonemes
    'Onset',
    'Nucleus',
    'Coda',
    'Syllable',
    'Phonotactics',
    'load_phonotactics',
    'reachable_syllables',
    # Randomness
    'SeededRandom',
    'seed_from_text',
    'MAX_POISSON_LAMBDA',
    # Sampling
    'SyllableGenerator',
    'get_syllable_generator',
    # Names
    'FixedCount',
    'PoissonCount',
    'SyllableCountDistribution',
    'syllable_count_distribution',
    'Name',
    'NameGenerator',
    'validate_lengths',
]

#!/usr/bin/env python3
"""
Name Generator
==============
Builds whole names out of sampled syllables and keeps them within a
character-length window.

Components:
- SyllableCountDistribution: how many syllables a candidate gets, either
  a fixed count or a minimum plus a Poisson-distributed excess
- Name: an ordered syllable sequence that renders itself into any script
- NameGenerator: rejection sampling of candidates against the length
  bounds

Usage:
    from namekit.generators.name_generator import NameGenerator
    from namekit.generators.entropy import SeededRandom
    from namekit.scripts import Script

    gen = NameGenerator(min_length=4, max_length=8)
    rng = SeededRandom.from_text("example")
    gen.generate(rng, Script.LATIN_TITLE_CASE)
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from ..scripts import Script, write_syllable
from .entropy import SeededRandom
from .phonemes import Syllable
from .syllable_generator import SyllableGenerator, get_syllable_generator

logger = logging.getLogger(__name__)


# =============================================================================
# Syllable Count
# =============================================================================

@dataclass(frozen=True)
class FixedCount:
    """Every candidate has exactly `syllables` syllables."""
    syllables: int

    def draw(self, rng: SeededRandom) -> int:
        return self.syllables


@dataclass(frozen=True)
class PoissonCount:
    """Candidates have `minimum` syllables plus a Poisson(rate) excess."""
    minimum: int
    rate: float

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError(f"Poisson rate must be non-negative, got {self.rate}")

    def draw(self, rng: SeededRandom) -> int:
        return self.minimum + rng.poisson(self.rate)


SyllableCountDistribution = Union[FixedCount, PoissonCount]


def syllable_count_distribution(min_length: int,
                                max_length: Optional[int] = None) -> SyllableCountDistribution:
    """
    Derive the syllable-count distribution for a length window.

    A syllable is one to four characters long, so at least ceil(min / 3)
    syllables are needed; roughly (max + 1) / 2 is a generous ceiling.
    Without a maximum the ceiling is taken as (min + 7) / 2.
    """
    min_syllables = -(-min_length // 3)
    if max_length is not None:
        max_syllables = (max_length + 1) // 2
    else:
        max_syllables = (min_length + 7) // 2

    if min_syllables == max_syllables:
        return FixedCount(min_syllables)
    return PoissonCount(min_syllables, float(max_syllables - min_syllables))


# =============================================================================
# Names
# =============================================================================

class Name:
    """
    An ordered sequence of syllables.

    Rendering is a pure function of the sequence: each syllable is written
    with its left and right neighbours as context.
    """

    def __init__(self, syllables: Iterable[Syllable]):
        self.syllables: Tuple[Syllable, ...] = tuple(syllables)

    @classmethod
    def random(cls, rng: SeededRandom, distribution: SyllableCountDistribution,
               sampler: SyllableGenerator = None) -> 'Name':
        """Draw a syllable count, then that many syllables."""
        sampler = sampler or get_syllable_generator()
        count = distribution.draw(rng)
        return cls(sampler.generate(rng, count))

    @classmethod
    def parse(cls, text: str) -> 'Name':
        """Parse hyphen-separated romanized syllables, e.g. "ka-lin-mo"."""
        parts = [p for p in text.split('-') if p.strip()]
        if not parts:
            raise ValueError("Name needs at least one syllable")
        return cls(Syllable.parse(p) for p in parts)

    def __len__(self) -> int:
        return sum(len(s) for s in self.syllables)

    def __iter__(self):
        return iter(self.syllables)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.syllables == other.syllables

    def __hash__(self) -> int:
        return hash(self.syllables)

    def __repr__(self) -> str:
        return f"Name({'-'.join(str(s) for s in self.syllables)!r})"

    def __str__(self) -> str:
        return self.romanized

    def neighbours(self) -> Iterable[Tuple[Optional[Syllable], Syllable, Optional[Syllable]]]:
        """Yield (prev, syllable, next) for every position."""
        last = len(self.syllables) - 1
        for i, syllable in enumerate(self.syllables):
            prev = self.syllables[i - 1] if i > 0 else None
            next = self.syllables[i + 1] if i < last else None
            yield prev, syllable, next

    def write(self, script: Script) -> str:
        """Render the name in `script`."""
        return ''.join(
            write_syllable(syllable, script, prev, next)
            for prev, syllable, next in self.neighbours()
        )

    def render_all(self, scripts: Sequence[Script] = None) -> Dict[Script, str]:
        """Render the name in several scripts (all of them by default)."""
        if scripts is None:
            scripts = list(Script)
        return {script: self.write(script) for script in scripts}

    @property
    def romanized(self) -> str:
        return self.write(Script.LATIN)


# =============================================================================
# Length-bounded Generation
# =============================================================================

def validate_lengths(min_length: int, max_length: Optional[int] = None) -> Tuple[bool, str]:
    """
    Check a length window before building a NameGenerator.

    NameGenerator trusts its bounds; a window it cannot satisfy makes
    generation loop forever.
    """
    if min_length is None or min_length < 1:
        return False, "Minimum length must be at least 1"
    if max_length is not None:
        if max_length < 1:
            return False, "Maximum length must be at least 1"
        if max_length < min_length:
            return False, f"Maximum length ({max_length}) is below minimum length ({min_length})"
    return True, ""


class NameGenerator:
    """
    Generates names whose character length lies in [min_length, max_length].

    Candidates are drawn whole and discarded until one fits; there is no
    retry cap. Validate the bounds with validate_lengths first.

    Usage:
        gen = NameGenerator(min_length=3)
        gen.generate(rng, Script.HANGUL)
    """

    def __init__(self, min_length: int, max_length: Optional[int] = None,
                 sampler: SyllableGenerator = None):
        self.min_length = min_length
        self.max_length = max_length
        self.sampler = sampler or get_syllable_generator()
        self.syllable_count = syllable_count_distribution(min_length, max_length)
        logger.debug("Length window [%s, %s]: syllable count %s",
                     min_length, max_length, self.syllable_count)

    def accepts(self, name: Name) -> bool:
        length = len(name)
        if length < self.min_length:
            return False
        return self.max_length is None or length <= self.max_length

    def generate_name(self, rng: SeededRandom) -> Name:
        """Draw candidates until one fits the length window."""
        rejected = 0
        while True:
            name = Name.random(rng, self.syllable_count, self.sampler)
            if self.accepts(name):
                if rejected:
                    logger.debug("Accepted %r after %d rejected candidates", name, rejected)
                return name
            rejected += 1

    def generate(self, rng: SeededRandom, script: Script = Script.LATIN) -> str:
        """Generate a name and render it in `script`."""
        return self.generate_name(rng).write(script)


__all__ = [
    'FixedCount',
    'PoissonCount',
    'SyllableCountDistribution',
    'syllable_count_distribution',
    'Name',
    'NameGenerator',
    'validate_lengths',
]

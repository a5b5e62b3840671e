#!/usr/bin/env python3
"""
Phoneme Model
=============
Closed phoneme inventories for syllable synthesis and the loader for the
phonotactics configuration that drives the sampler.

Usage:
    from namekit.generators.phonemes import (
        Onset, Nucleus, Coda, Syllable, load_phonotactics
    )

    syl = Syllable(Onset.K, Nucleus.A, Coda.N)
    len(syl)            # 4
    syl.nucleus.is_back # True

    tactics = load_phonotactics()
    tactics.onset_weights[Onset.K]  # 91
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Tuple

import yaml


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent


# =============================================================================
# Phoneme Inventories
# =============================================================================

class Onset(Enum):
    """Syllable-initial consonant, or its absence."""
    NONE = "none"
    P = "p"
    T = "t"
    K = "k"
    S = "s"
    M = "m"
    N = "n"
    L = "l"
    J = "j"
    W = "w"

    @property
    def length(self) -> int:
        return 0 if self is Onset.NONE else 1


class Nucleus(Enum):
    """Syllable vowel."""
    A = "a"
    E = "e"
    I = "i"
    O = "o"
    U = "u"

    @property
    def length(self) -> int:
        return 1

    @property
    def is_back(self) -> bool:
        """Back vowels drive the Orkhon harmony rules."""
        return self in (Nucleus.A, Nucleus.O, Nucleus.U)


class Coda(Enum):
    """Syllable-final consonant, or its absence."""
    NONE = "none"
    N = "n"

    @property
    def length(self) -> int:
        # A nasal coda weighs two characters in the length budget no matter
        # how many glyphs a script spends on it.
        return 2 if self is Coda.N else 0


_SYLLABLE_RE = re.compile(r"^([ptksmnljw]?)([aeiou])(n?)$")


@dataclass(frozen=True)
class Syllable:
    """An (onset, nucleus, coda) triple."""
    onset: Onset
    nucleus: Nucleus
    coda: Coda = Coda.NONE

    def __len__(self) -> int:
        return self.onset.length + self.nucleus.length + self.coda.length

    def without_coda(self) -> 'Syllable':
        """Return a copy of this syllable with the coda cleared."""
        return replace(self, coda=Coda.NONE)

    @classmethod
    def parse(cls, text: str) -> 'Syllable':
        """Parse a romanized syllable such as "ka", "lin" or "e"."""
        match = _SYLLABLE_RE.match(text.strip().lower())
        if not match:
            raise ValueError(f"Not a syllable: '{text}'")
        onset, nucleus, coda = match.groups()
        return cls(
            Onset(onset) if onset else Onset.NONE,
            Nucleus(nucleus),
            Coda.N if coda else Coda.NONE,
        )

    @property
    def key(self) -> Tuple[Onset, Nucleus, Coda]:
        return (self.onset, self.nucleus, self.coda)

    def __str__(self) -> str:
        onset = '' if self.onset is Onset.NONE else self.onset.value
        coda = '' if self.coda is Coda.NONE else self.coda.value
        return f"{onset}{self.nucleus.value}{coda}"


# =============================================================================
# Phonotactics
# =============================================================================

@dataclass(frozen=True)
class Phonotactics:
    """Typed view of phonotactics.yaml."""
    onset_weights: Dict[Onset, int]
    nucleus_weights: Dict[Nucleus, int]
    nucleus_exclusions: Dict[Nucleus, FrozenSet[Onset]]
    nasal_onsets: FrozenSet[Onset]
    first_null_onset_probability: float
    nasal_coda_probability: float

    def onset_items(self) -> List[Tuple[Onset, int]]:
        """Weighted onset options, in inventory order."""
        return [(onset, self.onset_weights.get(onset, 0))
                for onset in Onset if onset is not Onset.NONE]

    def nucleus_items(self, onset: Onset) -> List[Tuple[Nucleus, int]]:
        """Weighted nucleus options after `onset`, excluded vowels at weight 0."""
        items = []
        for nucleus in Nucleus:
            weight = self.nucleus_weights.get(nucleus, 0)
            if onset in self.nucleus_exclusions.get(nucleus, frozenset()):
                weight = 0
            items.append((nucleus, weight))
        return items

    def allows(self, onset: Onset, nucleus: Nucleus) -> bool:
        """Whether the sampler can ever pair `onset` with `nucleus`."""
        return onset not in self.nucleus_exclusions.get(nucleus, frozenset())


def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Phoneme config not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _require(raw: Dict[str, Any], key: str):
    value = raw.get(key)
    if value is None:
        raise ValueError(f"phonotactics.{key} must be set in phonotactics.yaml")
    return value


def _weight(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"phonotactics.{key} must be a non-negative integer, got {value!r}")
    return value


def _probability(value: Any, key: str) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"phonotactics.{key} must be within [0, 1], got {value}")
    return value


def parse_phonotactics(raw: Dict[str, Any]) -> Phonotactics:
    """Build a Phonotactics from a raw mapping (as loaded from YAML)."""
    onset_weights = {
        Onset(str(name)): _weight(weight, f"onset_weights.{name}")
        for name, weight in _require(raw, 'onset_weights').items()
    }
    if Onset.NONE in onset_weights:
        raise ValueError("phonotactics.onset_weights may not weight the null onset")
    if not any(onset_weights.values()):
        raise ValueError("phonotactics.onset_weights needs at least one positive weight")

    nucleus_weights = {
        Nucleus(str(name)): _weight(weight, f"nucleus_weights.{name}")
        for name, weight in _require(raw, 'nucleus_weights').items()
    }

    exclusions = {
        Nucleus(str(name)): frozenset(Onset(str(o)) for o in onsets)
        for name, onsets in (raw.get('nucleus_exclusions') or {}).items()
    }

    return Phonotactics(
        onset_weights=onset_weights,
        nucleus_weights=nucleus_weights,
        nucleus_exclusions=exclusions,
        nasal_onsets=frozenset(Onset(str(o)) for o in _require(raw, 'nasal_onsets')),
        first_null_onset_probability=_probability(
            _require(raw, 'first_null_onset_probability'), 'first_null_onset_probability'),
        nasal_coda_probability=_probability(
            _require(raw, 'nasal_coda_probability'), 'nasal_coda_probability'),
    )


@lru_cache(maxsize=1)
def load_phonotactics() -> Phonotactics:
    """Load the sampler configuration from phonotactics.yaml."""
    return parse_phonotactics(_load_yaml('phonotactics.yaml'))


def reachable_syllables() -> List[Syllable]:
    """Every syllable the sampler can emit under the loaded phonotactics."""
    tactics = load_phonotactics()
    return [
        Syllable(onset, nucleus, coda)
        for onset in Onset
        for nucleus in Nucleus
        for coda in Coda
        if tactics.allows(onset, nucleus)
    ]


__all__ = [
    'Onset',
    'Nucleus',
    'Coda',
    'Syllable',
    'Phonotactics',
    'parse_phonotactics',
    'load_phonotactics',
    'reachable_syllables',
    'PHONEMES_DIR',
]

#!/usr/bin/env python3
"""
Entropy Module for Name Generation
==================================
The randomness source consumed by the syllable sampler and the length
controller.

Features:
- Deterministic generation from an integer or textual seed
- Fresh OS entropy when no seed is given
- Weighted selection over (item, weight) pairs
- Boolean draws with a given probability
- Poisson draws for the syllable-count distribution

A textual seed is reduced to an integer through SHA-256, so the same
seed string reproduces the same names on every platform.
"""

import hashlib
import math
import os
import random
from typing import Any, List, Optional, Tuple


# Largest Poisson rate the sampler accepts; larger rates are clamped.
MAX_POISSON_LAMBDA = 1.844674407370955e19

# Below this rate Poisson draws use multiplication of uniforms; above it
# they use transformed rejection (PTRS).
_POISSON_INVERSION_LIMIT = 10.0


def seed_from_text(text: str) -> int:
    """Derive a 64-bit integer seed from a seed string."""
    digest = hashlib.sha256(text.encode('utf-8')).digest()
    return int.from_bytes(digest[:8], 'big')


class SeededRandom:
    """
    Random number generator with the draws the name engine needs.

    The draw order of every method is fixed, so two instances built from
    the same seed produce the same sequence of results.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int.from_bytes(os.urandom(8), 'big')
        self.seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def from_text(cls, text: str) -> 'SeededRandom':
        """Build a generator seeded from the SHA-256 digest of `text`."""
        return cls(seed_from_text(text))

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be within [0, 1], got {probability}")
        return self._rng.random() < probability

    def weighted_choice(self, items: List[Tuple[Any, int]]) -> Any:
        """
        Choose from items with weights.

        Args:
            items: List of (item, weight) tuples. Items with weight 0 are
                never selected.

        Returns:
            Randomly selected item based on weights
        """
        candidates = [(item, weight) for item, weight in items if weight > 0]
        if not candidates:
            raise IndexError("Cannot choose from empty sequence")

        total = sum(w for _, w in candidates)
        r = self._rng.random() * total

        cumulative = 0
        for item, weight in candidates:
            cumulative += weight
            if r < cumulative:
                return item

        return candidates[-1][0]

    def poisson(self, lam: float) -> int:
        """Draw from a Poisson distribution with rate `lam`."""
        if lam < 0 or math.isnan(lam):
            raise ValueError(f"Poisson rate must be non-negative, got {lam}")
        lam = min(lam, MAX_POISSON_LAMBDA)
        if lam == 0:
            return 0
        if lam < _POISSON_INVERSION_LIMIT:
            return self._poisson_multiplication(lam)
        return self._poisson_ptrs(lam)

    def _poisson_multiplication(self, lam: float) -> int:
        limit = math.exp(-lam)
        count = 0
        product = self._rng.random()
        while product > limit:
            count += 1
            product *= self._rng.random()
        return count

    def _poisson_ptrs(self, lam: float) -> int:
        # Hormann's transformed rejection with squeeze.
        slam = math.sqrt(lam)
        loglam = math.log(lam)
        b = 0.931 + 2.53 * slam
        a = -0.059 + 0.02483 * b
        invalpha = 1.1239 + 1.1328 / (b - 3.4)
        vr = 0.9277 - 3.6224 / (b - 2)

        while True:
            u = self._rng.random() - 0.5
            v = self._rng.random()
            us = 0.5 - abs(u)
            if us == 0:
                continue
            k = math.floor((2 * a / us + b) * u + lam + 0.43)
            if us >= 0.07 and v <= vr:
                return k
            if k < 0 or (us < 0.013 and v > us):
                continue
            if (math.log(v) + math.log(invalpha) - math.log(a / (us * us) + b)
                    <= -lam + k * loglam - math.lgamma(k + 1)):
                return k


__all__ = [
    'SeededRandom',
    'seed_from_text',
    'MAX_POISSON_LAMBDA',
]

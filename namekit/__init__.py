#!/usr/bin/env python3
"""
namekit - Pronounceable Name Synthesizer
========================================

Generates artificial names from a small syllable phonotactics model and
renders them in twenty writing systems.

Quick Start
-----------
    from namekit import NameGenerator, Script, SeededRandom

    gen = NameGenerator(min_length=4, max_length=8)
    rng = SeededRandom.from_text("my seed")

    gen.generate(rng, Script.LATIN_TITLE_CASE)   # e.g. 'Kalimo'

    name = gen.generate_name(rng)
    name.write(Script.HANGUL)
    name.render_all()

Modules
-------
    namekit.generators - Phoneme model, sampler, length-bounded generation
    namekit.scripts    - Per-script renderers
    namekit.settings   - Application settings (configs/app.yaml)

CLI Usage
---------
    python -m namekit generate -n 10 --script hangul --seed demo
    python -m namekit scripts
"""

__version__ = "0.2.0"

# Generators must load before scripts: name_generator imports the renderers.
from . import generators
from . import scripts

from .generators import (
    Onset,
    Nucleus,
    Coda,
    Syllable,
    SeededRandom,
    seed_from_text,
    SyllableGenerator,
    Name,
    NameGenerator,
    validate_lengths,
)
from .scripts import (
    Script,
    UnreachableSyllableError,
    write_syllable,
)

__all__ = [
    '__version__',
    'generators',
    'scripts',
    'Onset',
    'Nucleus',
    'Coda',
    'Syllable',
    'SeededRandom',
    'seed_from_text',
    'SyllableGenerator',
    'Name',
    'NameGenerator',
    'validate_lengths',
    'Script',
    'UnreachableSyllableError',
    'write_syllable',
]

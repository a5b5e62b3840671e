#!/usr/bin/env python3
"""
Script Renderers
================
Renders syllables into one of twenty writing systems.

Every renderer is a pure function ``(syllable, prev, next) -> str``; the
neighbours are the adjacent syllables of the name (None at the ends).

Usage:
    from namekit.scripts import Script, write_syllable

    write_syllable(syllable, Script.HEBREW, prev=None, next=None)
"""

from enum import Enum
from typing import Callable, Dict, Optional

from ..generators.phonemes import Syllable
from . import abugidas, alphabets, blocks, orkhon, semitic
from .lookup import UnreachableSyllableError


class Script(Enum):
    """Writing systems a name can be rendered into."""
    ARABIC = "arabic"
    ASCII = "ascii"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    GREEK = "greek"
    GUJARATI = "gujarati"
    HANGUL = "hangul"
    KANNADA = "kannada"
    HEBREW = "hebrew"
    LATIN = "latin"
    LATIN_TITLE_CASE = "latin-title-case"
    SYLLABICS = "syllabics"
    SHAVIAN = "shavian"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    FUTHARK = "futhark"
    GOTHIC = "gothic"
    OGHAM = "ogham"
    GEORGIAN = "georgian"
    ORKHON = "orkhon"

    @classmethod
    def from_name(cls, name: str) -> 'Script':
        """
        Resolve a script from its command-line spelling.

        Accepts the kebab-case value or the member name, case-insensitively
        ("latin-title-case", "LATIN_TITLE_CASE").

        Raises:
            ValueError: If no script matches
        """
        key = name.strip().lower().replace('_', '-')
        for script in cls:
            if script.value == key:
                return script
        available = ', '.join(s.value for s in cls)
        raise ValueError(f"Unknown script '{name}'. Available scripts: {available}")


Renderer = Callable[[Syllable, Optional[Syllable], Optional[Syllable]], str]

RENDERERS: Dict[Script, Renderer] = {
    Script.ARABIC: semitic.render_arabic,
    Script.ASCII: blocks.render_ascii,
    Script.CYRILLIC: alphabets.render_cyrillic,
    Script.DEVANAGARI: abugidas.render_devanagari,
    Script.GREEK: alphabets.render_greek,
    Script.GUJARATI: abugidas.render_gujarati,
    Script.HANGUL: blocks.render_hangul,
    Script.KANNADA: abugidas.render_kannada,
    Script.HEBREW: semitic.render_hebrew,
    Script.LATIN: alphabets.render_latin,
    Script.LATIN_TITLE_CASE: alphabets.render_latin_title_case,
    Script.SYLLABICS: blocks.render_syllabics,
    Script.SHAVIAN: alphabets.render_shavian,
    Script.HIRAGANA: blocks.render_hiragana,
    Script.KATAKANA: blocks.render_katakana,
    Script.FUTHARK: alphabets.render_futhark,
    Script.GOTHIC: alphabets.render_gothic,
    Script.OGHAM: alphabets.render_ogham,
    Script.GEORGIAN: alphabets.render_georgian,
    Script.ORKHON: orkhon.render_orkhon,
}


def write_syllable(syllable: Syllable, script: Script,
                   prev: Optional[Syllable] = None,
                   next: Optional[Syllable] = None) -> str:
    """Render one syllable in `script`, given its neighbours in the name."""
    return RENDERERS[script](syllable, prev, next)


__all__ = [
    'Script',
    'RENDERERS',
    'write_syllable',
    'UnreachableSyllableError',
]

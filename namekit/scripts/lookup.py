#!/usr/bin/env python3
"""
Glyph Table Lookup
==================
Shared helpers for the per-script glyph tables.

Script tables only hold the combinations the syllable sampler can produce.
A lookup outside that set means the sampler constraints and the tables
have drifted apart; it raises instead of falling back to a default glyph.
"""

from typing import Any, Hashable, Mapping


class UnreachableSyllableError(LookupError):
    """A script was asked to render a combination the sampler never produces."""

    def __init__(self, script: str, key: Any):
        self.script = script
        self.key = key
        super().__init__(f"{script}: no rendering for unreachable combination {_describe(key)}")


def _describe(key: Any) -> str:
    if isinstance(key, tuple):
        return '(' + ', '.join(_describe(part) for part in key) + ')'
    name = getattr(key, 'name', None)
    if name is not None:
        return f"{type(key).__name__}.{name}"
    return repr(key)


def lookup(table: Mapping[Hashable, str], key: Hashable, script: str) -> str:
    """Return table[key], raising UnreachableSyllableError when absent."""
    try:
        return table[key]
    except KeyError:
        raise UnreachableSyllableError(script, key) from None


__all__ = [
    'UnreachableSyllableError',
    'lookup',
]

#!/usr/bin/env python3
"""
Syllable-Block Scripts
======================
Scripts that spell a syllable with a single lookup rather than letter by
letter:

- Hangul and the ASCII-art script map the whole (onset, nucleus, coda)
  triple to one glyph.
- Canadian syllabics, hiragana and katakana map (onset, nucleus) to one
  glyph and add a separate final for the nasal coda.

Tables only list reachable combinations; see lookup.UnreachableSyllableError.
"""

from typing import Optional

from ..generators.phonemes import Coda, Nucleus, Onset, Syllable
from .lookup import lookup


HANGUL = {
    (Onset.NONE, Nucleus.A, Coda.NONE): '아',
    (Onset.NONE, Nucleus.E, Coda.NONE): '어',
    (Onset.NONE, Nucleus.O, Coda.NONE): '오',
    (Onset.NONE, Nucleus.U, Coda.NONE): '우',
    (Onset.NONE, Nucleus.I, Coda.NONE): '이',
    (Onset.NONE, Nucleus.A, Coda.N): '안',
    (Onset.NONE, Nucleus.E, Coda.N): '언',
    (Onset.NONE, Nucleus.O, Coda.N): '온',
    (Onset.NONE, Nucleus.U, Coda.N): '운',
    (Onset.NONE, Nucleus.I, Coda.N): '인',
    (Onset.J, Nucleus.A, Coda.NONE): '야',
    (Onset.J, Nucleus.E, Coda.NONE): '여',
    (Onset.J, Nucleus.O, Coda.NONE): '요',
    (Onset.J, Nucleus.U, Coda.NONE): '유',
    (Onset.J, Nucleus.A, Coda.N): '얀',
    (Onset.J, Nucleus.E, Coda.N): '연',
    (Onset.J, Nucleus.O, Coda.N): '욘',
    (Onset.J, Nucleus.U, Coda.N): '윤',
    (Onset.W, Nucleus.A, Coda.NONE): '와',
    (Onset.W, Nucleus.E, Coda.NONE): '워',
    (Onset.W, Nucleus.I, Coda.NONE): '위',
    (Onset.W, Nucleus.A, Coda.N): '완',
    (Onset.W, Nucleus.E, Coda.N): '원',
    (Onset.W, Nucleus.I, Coda.N): '윈',
    (Onset.K, Nucleus.A, Coda.NONE): '가',
    (Onset.K, Nucleus.E, Coda.NONE): '거',
    (Onset.K, Nucleus.O, Coda.NONE): '고',
    (Onset.K, Nucleus.U, Coda.NONE): '구',
    (Onset.K, Nucleus.I, Coda.NONE): '기',
    (Onset.K, Nucleus.A, Coda.N): '간',
    (Onset.K, Nucleus.E, Coda.N): '건',
    (Onset.K, Nucleus.O, Coda.N): '곤',
    (Onset.K, Nucleus.U, Coda.N): '군',
    (Onset.K, Nucleus.I, Coda.N): '긴',
    (Onset.N, Nucleus.A, Coda.NONE): '나',
    (Onset.N, Nucleus.E, Coda.NONE): '너',
    (Onset.N, Nucleus.O, Coda.NONE): '노',
    (Onset.N, Nucleus.U, Coda.NONE): '누',
    (Onset.N, Nucleus.I, Coda.NONE): '니',
    (Onset.N, Nucleus.A, Coda.N): '난',
    (Onset.N, Nucleus.E, Coda.N): '넌',
    (Onset.N, Nucleus.O, Coda.N): '논',
    (Onset.N, Nucleus.U, Coda.N): '눈',
    (Onset.N, Nucleus.I, Coda.N): '닌',
    (Onset.T, Nucleus.A, Coda.NONE): '다',
    (Onset.T, Nucleus.E, Coda.NONE): '더',
    (Onset.T, Nucleus.O, Coda.NONE): '도',
    (Onset.T, Nucleus.U, Coda.NONE): '두',
    (Onset.T, Nucleus.A, Coda.N): '단',
    (Onset.T, Nucleus.E, Coda.N): '던',
    (Onset.T, Nucleus.O, Coda.N): '돈',
    (Onset.T, Nucleus.U, Coda.N): '둔',
    (Onset.L, Nucleus.A, Coda.NONE): '라',
    (Onset.L, Nucleus.E, Coda.NONE): '러',
    (Onset.L, Nucleus.O, Coda.NONE): '로',
    (Onset.L, Nucleus.U, Coda.NONE): '루',
    (Onset.L, Nucleus.I, Coda.NONE): '리',
    (Onset.L, Nucleus.A, Coda.N): '란',
    (Onset.L, Nucleus.E, Coda.N): '런',
    (Onset.L, Nucleus.O, Coda.N): '론',
    (Onset.L, Nucleus.U, Coda.N): '룬',
    (Onset.L, Nucleus.I, Coda.N): '린',
    (Onset.M, Nucleus.A, Coda.NONE): '마',
    (Onset.M, Nucleus.E, Coda.NONE): '머',
    (Onset.M, Nucleus.O, Coda.NONE): '모',
    (Onset.M, Nucleus.U, Coda.NONE): '무',
    (Onset.M, Nucleus.I, Coda.NONE): '미',
    (Onset.M, Nucleus.A, Coda.N): '만',
    (Onset.M, Nucleus.E, Coda.N): '먼',
    (Onset.M, Nucleus.O, Coda.N): '몬',
    (Onset.M, Nucleus.U, Coda.N): '문',
    (Onset.M, Nucleus.I, Coda.N): '민',
    (Onset.P, Nucleus.A, Coda.NONE): '바',
    (Onset.P, Nucleus.E, Coda.NONE): '버',
    (Onset.P, Nucleus.O, Coda.NONE): '보',
    (Onset.P, Nucleus.U, Coda.NONE): '부',
    (Onset.P, Nucleus.I, Coda.NONE): '비',
    (Onset.P, Nucleus.A, Coda.N): '반',
    (Onset.P, Nucleus.E, Coda.N): '번',
    (Onset.P, Nucleus.O, Coda.N): '본',
    (Onset.P, Nucleus.U, Coda.N): '분',
    (Onset.P, Nucleus.I, Coda.N): '빈',
    (Onset.S, Nucleus.A, Coda.NONE): '사',
    (Onset.S, Nucleus.E, Coda.NONE): '서',
    (Onset.S, Nucleus.O, Coda.NONE): '소',
    (Onset.S, Nucleus.U, Coda.NONE): '수',
    (Onset.S, Nucleus.I, Coda.NONE): '시',
    (Onset.S, Nucleus.A, Coda.N): '산',
    (Onset.S, Nucleus.E, Coda.N): '선',
    (Onset.S, Nucleus.O, Coda.N): '손',
    (Onset.S, Nucleus.U, Coda.N): '순',
    (Onset.S, Nucleus.I, Coda.N): '신',
}

# Arbitrary printable stand-ins, one per triple.
ASCII_ART = {
    (Onset.NONE, Nucleus.A, Coda.NONE): 'a',
    (Onset.NONE, Nucleus.E, Coda.NONE): 'e',
    (Onset.NONE, Nucleus.O, Coda.NONE): 'o',
    (Onset.NONE, Nucleus.U, Coda.NONE): '0',
    (Onset.NONE, Nucleus.I, Coda.NONE): 'i',
    (Onset.NONE, Nucleus.A, Coda.N): 'A',
    (Onset.NONE, Nucleus.E, Coda.N): '&',
    (Onset.NONE, Nucleus.O, Coda.N): '7',
    (Onset.NONE, Nucleus.U, Coda.N): 'U',
    (Onset.NONE, Nucleus.I, Coda.N): '!',
    (Onset.J, Nucleus.A, Coda.NONE): 'Y',
    (Onset.J, Nucleus.E, Coda.NONE): 'y',
    (Onset.J, Nucleus.O, Coda.NONE): 'J',
    (Onset.J, Nucleus.U, Coda.NONE): ',',
    (Onset.J, Nucleus.A, Coda.N): 'j',
    (Onset.J, Nucleus.E, Coda.N): '"',
    (Onset.J, Nucleus.O, Coda.N): '>',
    (Onset.J, Nucleus.U, Coda.N): '<',
    (Onset.W, Nucleus.A, Coda.NONE): 'w',
    (Onset.W, Nucleus.E, Coda.NONE): 'V',
    (Onset.W, Nucleus.I, Coda.NONE): 'W',
    (Onset.W, Nucleus.A, Coda.N): '1',
    (Onset.W, Nucleus.E, Coda.N): 'v',
    (Onset.W, Nucleus.I, Coda.N): '|',
    (Onset.K, Nucleus.A, Coda.NONE): 'K',
    (Onset.K, Nucleus.E, Coda.NONE): 'G',
    (Onset.K, Nucleus.O, Coda.NONE): 'H',
    (Onset.K, Nucleus.U, Coda.NONE): 'q',
    (Onset.K, Nucleus.I, Coda.NONE): 'k',
    (Onset.K, Nucleus.A, Coda.N): '}',
    (Onset.K, Nucleus.E, Coda.N): 'g',
    (Onset.K, Nucleus.O, Coda.N): 'h',
    (Onset.K, Nucleus.U, Coda.N): '{',
    (Onset.K, Nucleus.I, Coda.N): 'Q',
    (Onset.N, Nucleus.A, Coda.NONE): 'n',
    (Onset.N, Nucleus.E, Coda.NONE): '^',
    (Onset.N, Nucleus.O, Coda.NONE): '*',
    (Onset.N, Nucleus.U, Coda.NONE): '/',
    (Onset.N, Nucleus.I, Coda.NONE): 'N',
    (Onset.N, Nucleus.A, Coda.N): '#',
    (Onset.N, Nucleus.E, Coda.N): '-',
    (Onset.N, Nucleus.O, Coda.N): '_',
    (Onset.N, Nucleus.U, Coda.N): ')',
    (Onset.N, Nucleus.I, Coda.N): '(',
    (Onset.T, Nucleus.A, Coda.NONE): 'T',
    (Onset.T, Nucleus.E, Coda.NONE): 'E',
    (Onset.T, Nucleus.O, Coda.NONE): 't',
    (Onset.T, Nucleus.U, Coda.NONE): '2',
    (Onset.T, Nucleus.A, Coda.N): 'X',
    (Onset.T, Nucleus.E, Coda.N): 'x',
    (Onset.T, Nucleus.O, Coda.N): 'D',
    (Onset.T, Nucleus.U, Coda.N): 'd',
    (Onset.L, Nucleus.A, Coda.NONE): 'L',
    (Onset.L, Nucleus.E, Coda.NONE): 'r',
    (Onset.L, Nucleus.O, Coda.NONE): '~',
    (Onset.L, Nucleus.U, Coda.NONE): '5',
    (Onset.L, Nucleus.I, Coda.NONE): 'l',
    (Onset.L, Nucleus.A, Coda.N): '\'',
    (Onset.L, Nucleus.E, Coda.N): '$',
    (Onset.L, Nucleus.O, Coda.N): 'R',
    (Onset.L, Nucleus.U, Coda.N): ';',
    (Onset.L, Nucleus.I, Coda.N): 'I',
    (Onset.M, Nucleus.A, Coda.NONE): 'M',
    (Onset.M, Nucleus.E, Coda.NONE): '?',
    (Onset.M, Nucleus.O, Coda.NONE): 'O',
    (Onset.M, Nucleus.U, Coda.NONE): 'u',
    (Onset.M, Nucleus.I, Coda.NONE): 'm',
    (Onset.M, Nucleus.A, Coda.N): '`',
    (Onset.M, Nucleus.E, Coda.N): '9',
    (Onset.M, Nucleus.O, Coda.N): '@',
    (Onset.M, Nucleus.U, Coda.N): '3',
    (Onset.M, Nucleus.I, Coda.N): '8',
    (Onset.P, Nucleus.A, Coda.NONE): 'b',
    (Onset.P, Nucleus.E, Coda.NONE): 'B',
    (Onset.P, Nucleus.O, Coda.NONE): 'p',
    (Onset.P, Nucleus.U, Coda.NONE): 'f',
    (Onset.P, Nucleus.I, Coda.NONE): 'P',
    (Onset.P, Nucleus.A, Coda.N): '6',
    (Onset.P, Nucleus.E, Coda.N): 'F',
    (Onset.P, Nucleus.O, Coda.N): '=',
    (Onset.P, Nucleus.U, Coda.N): '+',
    (Onset.P, Nucleus.I, Coda.N): '%',
    (Onset.S, Nucleus.A, Coda.NONE): 'c',
    (Onset.S, Nucleus.E, Coda.NONE): 'Z',
    (Onset.S, Nucleus.O, Coda.NONE): 'S',
    (Onset.S, Nucleus.U, Coda.NONE): 'z',
    (Onset.S, Nucleus.I, Coda.NONE): 's',
    (Onset.S, Nucleus.A, Coda.N): ']',
    (Onset.S, Nucleus.E, Coda.N): '[',
    (Onset.S, Nucleus.O, Coda.N): '\\',
    (Onset.S, Nucleus.U, Coda.N): '4',
    (Onset.S, Nucleus.I, Coda.N): 'C',
}

SYLLABICS = {
    (Onset.NONE, Nucleus.A): 'ᐊ',
    (Onset.NONE, Nucleus.E): 'ᐁ',
    (Onset.NONE, Nucleus.I): 'ᐃ',
    (Onset.NONE, Nucleus.O): 'ᐅ',
    (Onset.NONE, Nucleus.U): 'ᐆ',
    (Onset.P, Nucleus.A): 'ᐸ',
    (Onset.P, Nucleus.E): 'ᐯ',
    (Onset.P, Nucleus.I): 'ᐱ',
    (Onset.P, Nucleus.O): 'ᐳ',
    (Onset.P, Nucleus.U): 'ᐴ',
    (Onset.T, Nucleus.A): 'ᑕ',
    (Onset.T, Nucleus.E): 'ᑌ',
    (Onset.T, Nucleus.O): 'ᑐ',
    (Onset.T, Nucleus.U): 'ᑑ',
    (Onset.K, Nucleus.A): 'ᑲ',
    (Onset.K, Nucleus.E): 'ᑫ',
    (Onset.K, Nucleus.I): 'ᑭ',
    (Onset.K, Nucleus.O): 'ᑯ',
    (Onset.K, Nucleus.U): 'ᑰ',
    (Onset.S, Nucleus.A): 'ᓴ',
    (Onset.S, Nucleus.E): 'ᓭ',
    (Onset.S, Nucleus.I): 'ᓯ',
    (Onset.S, Nucleus.O): 'ᓱ',
    (Onset.S, Nucleus.U): 'ᓲ',
    (Onset.M, Nucleus.A): 'ᒪ',
    (Onset.M, Nucleus.E): 'ᒣ',
    (Onset.M, Nucleus.I): 'ᒥ',
    (Onset.M, Nucleus.O): 'ᒧ',
    (Onset.M, Nucleus.U): 'ᒨ',
    (Onset.N, Nucleus.A): 'ᓇ',
    (Onset.N, Nucleus.E): 'ᓀ',
    (Onset.N, Nucleus.I): 'ᓂ',
    (Onset.N, Nucleus.O): 'ᓄ',
    (Onset.N, Nucleus.U): 'ᓅ',
    (Onset.L, Nucleus.A): 'ᓚ',
    (Onset.L, Nucleus.E): 'ᓓ',
    (Onset.L, Nucleus.I): 'ᓕ',
    (Onset.L, Nucleus.O): 'ᓗ',
    (Onset.L, Nucleus.U): 'ᓘ',
    (Onset.J, Nucleus.A): 'ᔭ',
    (Onset.J, Nucleus.E): 'ᔦ',
    (Onset.J, Nucleus.O): 'ᔪ',
    (Onset.J, Nucleus.U): 'ᔫ',
    (Onset.W, Nucleus.A): 'ᕙ',
    (Onset.W, Nucleus.E): 'ᕓ',
    (Onset.W, Nucleus.I): 'ᕕ',
}
SYLLABICS_FINAL_N = 'ᓐ'

HIRAGANA = {
    (Onset.NONE, Nucleus.A): 'あ',
    (Onset.NONE, Nucleus.I): 'い',
    (Onset.NONE, Nucleus.U): 'う',
    (Onset.NONE, Nucleus.E): 'え',
    (Onset.NONE, Nucleus.O): 'お',
    (Onset.K, Nucleus.A): 'か',
    (Onset.K, Nucleus.I): 'き',
    (Onset.K, Nucleus.U): 'く',
    (Onset.K, Nucleus.E): 'け',
    (Onset.K, Nucleus.O): 'こ',
    (Onset.S, Nucleus.A): 'さ',
    (Onset.S, Nucleus.I): 'し',
    (Onset.S, Nucleus.U): 'す',
    (Onset.S, Nucleus.E): 'せ',
    (Onset.S, Nucleus.O): 'そ',
    (Onset.T, Nucleus.A): 'た',
    (Onset.T, Nucleus.U): 'つ',
    (Onset.T, Nucleus.E): 'て',
    (Onset.T, Nucleus.O): 'と',
    (Onset.N, Nucleus.A): 'な',
    (Onset.N, Nucleus.I): 'に',
    (Onset.N, Nucleus.U): 'ぬ',
    (Onset.N, Nucleus.E): 'ね',
    (Onset.N, Nucleus.O): 'の',
    (Onset.P, Nucleus.A): 'は',
    (Onset.P, Nucleus.I): 'ひ',
    (Onset.P, Nucleus.U): 'ふ',
    (Onset.P, Nucleus.E): 'へ',
    (Onset.P, Nucleus.O): 'ほ',
    (Onset.M, Nucleus.A): 'ま',
    (Onset.M, Nucleus.I): 'み',
    (Onset.M, Nucleus.U): 'む',
    (Onset.M, Nucleus.E): 'め',
    (Onset.M, Nucleus.O): 'も',
    (Onset.J, Nucleus.A): 'や',
    (Onset.J, Nucleus.U): 'ゆ',
    (Onset.J, Nucleus.E): '江',
    (Onset.J, Nucleus.O): 'よ',
    (Onset.L, Nucleus.A): 'ら',
    (Onset.L, Nucleus.I): 'り',
    (Onset.L, Nucleus.U): 'る',
    (Onset.L, Nucleus.E): 'れ',
    (Onset.L, Nucleus.O): 'ろ',
    (Onset.W, Nucleus.A): 'わ',
    (Onset.W, Nucleus.I): 'ゐ',
    (Onset.W, Nucleus.E): 'ゑ',
}
HIRAGANA_FINAL_N = 'ん'

KATAKANA = {
    (Onset.NONE, Nucleus.A): 'ア',
    (Onset.NONE, Nucleus.I): 'イ',
    (Onset.NONE, Nucleus.U): 'ウ',
    (Onset.NONE, Nucleus.E): 'エ',
    (Onset.NONE, Nucleus.O): 'オ',
    (Onset.K, Nucleus.A): 'カ',
    (Onset.K, Nucleus.I): 'キ',
    (Onset.K, Nucleus.U): 'ク',
    (Onset.K, Nucleus.E): 'ケ',
    (Onset.K, Nucleus.O): 'コ',
    (Onset.S, Nucleus.A): 'サ',
    (Onset.S, Nucleus.I): 'シ',
    (Onset.S, Nucleus.U): 'ス',
    (Onset.S, Nucleus.E): 'セ',
    (Onset.S, Nucleus.O): 'ソ',
    (Onset.T, Nucleus.A): 'タ',
    (Onset.T, Nucleus.U): 'ツ',
    (Onset.T, Nucleus.E): 'テ',
    (Onset.T, Nucleus.O): 'ト',
    (Onset.N, Nucleus.A): 'ナ',
    (Onset.N, Nucleus.I): 'ニ',
    (Onset.N, Nucleus.U): 'ヌ',
    (Onset.N, Nucleus.E): 'ネ',
    (Onset.N, Nucleus.O): 'ノ',
    (Onset.P, Nucleus.A): 'ハ',
    (Onset.P, Nucleus.I): 'ヒ',
    (Onset.P, Nucleus.U): 'フ',
    (Onset.P, Nucleus.E): 'ヘ',
    (Onset.P, Nucleus.O): 'ホ',
    (Onset.M, Nucleus.A): 'マ',
    (Onset.M, Nucleus.I): 'ミ',
    (Onset.M, Nucleus.U): 'ム',
    (Onset.M, Nucleus.E): 'メ',
    (Onset.M, Nucleus.O): 'モ',
    (Onset.J, Nucleus.A): 'ヤ',
    (Onset.J, Nucleus.U): 'ユ',
    (Onset.J, Nucleus.E): 'エ',
    (Onset.J, Nucleus.O): 'ヨ',
    (Onset.L, Nucleus.A): 'ラ',
    (Onset.L, Nucleus.I): 'リ',
    (Onset.L, Nucleus.U): 'ル',
    (Onset.L, Nucleus.E): 'レ',
    (Onset.L, Nucleus.O): 'ロ',
    (Onset.W, Nucleus.A): 'ワ',
    (Onset.W, Nucleus.I): 'ヰ',
    (Onset.W, Nucleus.E): 'ヱ',
}
KATAKANA_FINAL_N = 'ン'


def render_hangul(syllable: Syllable, prev: Optional[Syllable] = None,
                  next: Optional[Syllable] = None) -> str:
    return lookup(HANGUL, syllable.key, 'hangul')


def render_ascii(syllable: Syllable, prev: Optional[Syllable] = None,
                 next: Optional[Syllable] = None) -> str:
    return lookup(ASCII_ART, syllable.key, 'ascii')


def _moraic(table, final_n: str, script: str, syllable: Syllable) -> str:
    glyph = lookup(table, (syllable.onset, syllable.nucleus), script)
    if syllable.coda is Coda.N:
        glyph += final_n
    return glyph


def render_syllabics(syllable: Syllable, prev: Optional[Syllable] = None,
                     next: Optional[Syllable] = None) -> str:
    return _moraic(SYLLABICS, SYLLABICS_FINAL_N, 'syllabics', syllable)


def render_hiragana(syllable: Syllable, prev: Optional[Syllable] = None,
                    next: Optional[Syllable] = None) -> str:
    return _moraic(HIRAGANA, HIRAGANA_FINAL_N, 'hiragana', syllable)


def render_katakana(syllable: Syllable, prev: Optional[Syllable] = None,
                    next: Optional[Syllable] = None) -> str:
    return _moraic(KATAKANA, KATAKANA_FINAL_N, 'katakana', syllable)

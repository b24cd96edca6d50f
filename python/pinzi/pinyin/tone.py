"""Pinyin tone marks.

Converts between tone-marked syllables (``hǎo``) and toneless syllables with
a tone number (``hao`` + 3, or ``hao3``). Tone 5 is the neutral tone and has
no mark.
"""

from typing import Optional

# Vowel -> glyphs for tones 1-4, then the plain (neutral) form.
# Order matters: parse_pinyin_tone checks vowels in this order.
TONE_MARKS: dict[str, str] = {
    "a": "āáǎàa",
    "e": "ēéěèe",
    "i": "īíǐìi",
    "o": "ōóǒòo",
    "u": "ūúǔùu",
    "ü": "ǖǘǚǜü",
    "v": "ǖǘǚǜü",  # ascii stand-in for ü
}

PINYIN_VOWELS = frozenset(TONE_MARKS)

NEUTRAL_TONE = 5
TONE_DIGITS = "012345"


def is_pinyin_vowel(char: Optional[str]) -> bool:
    """Check if a character is a pinyin vowel (``v`` counts as ``ü``)."""
    return char is not None and char in PINYIN_VOWELS


def _with_tone(vowel: str, tone: int) -> str:
    return TONE_MARKS[vowel][tone - 1]


def _plain(vowel: str) -> str:
    return TONE_MARKS[vowel][NEUTRAL_TONE - 1]


def parse_pinyin_tone(pinyin: str) -> tuple[str, int]:
    """Split a tone-marked syllable into its toneless form and tone number.

    The first marked vowel found (checking a, e, i, o, u, ü and tones 1-4 in
    that order) decides the tone; that glyph is replaced by its plain vowel.

    Args:
        pinyin: Syllable, e.g. "niú".

    Returns:
        (toneless, tone), e.g. ("niu", 2). Unmarked input gives tone 5.
    """
    for vowel in ("a", "e", "i", "o", "u", "ü"):
        for tone in range(1, 5):
            glyph = _with_tone(vowel, tone)
            if glyph in pinyin:
                return pinyin.replace(glyph, vowel, 1), tone
    return pinyin, NEUTRAL_TONE


def convert_pinyin_with_tone_number_to_tone_mark(pinyin: str) -> str:
    """Convert a syllable with a trailing tone number to use a tone mark.

    Also converts ``v`` to ``ü``. The mark goes on the first vowel matching,
    in order of checking at each position:
        1. an ``a`` or ``e``
        2. an ``o`` followed by ``u``
        3. the second of two adjacent vowels
        4. a lone vowel

    Args:
        pinyin: Syllable with optional tone digit, e.g. "hao3". A missing
            digit, 0 and 5 all mean no mark.

    Returns:
        Tone-marked syllable, e.g. "hǎo".
    """
    if not pinyin:
        return pinyin

    tone = 0
    if pinyin[-1] in TONE_DIGITS:
        tone = TONE_DIGITS.index(pinyin[-1])
        pinyin = pinyin[:-1]
    if tone == NEUTRAL_TONE:
        tone = 0

    result = []
    i = 0
    while i < len(pinyin):
        char = pinyin[i]
        next_char = pinyin[i + 1] if i + 1 < len(pinyin) else None

        if tone and is_pinyin_vowel(char):
            if char in ("a", "e"):
                result.append(_with_tone(char, tone))
            elif char == "o" and next_char == "u":
                result.append(_with_tone(char, tone))
            elif is_pinyin_vowel(next_char):
                result.append(_plain(char))
                result.append(_with_tone(next_char, tone))
                i += 1
            else:
                result.append(_with_tone(char, tone))
            tone = 0
        elif is_pinyin_vowel(char):
            result.append(_plain(char))
        else:
            result.append(char)
        i += 1

    return "".join(result)

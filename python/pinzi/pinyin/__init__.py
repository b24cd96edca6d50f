"""Mandarin pinyin phonology.

Provides tone mark conversion and chart-driven initial/final splitting.

Usage:
    from pinzi.pinyin import (
        convert_pinyin_with_tone_number_to_tone_mark,
        parse_pinyin_tone,
        get_chart,
        split_pinyin,
    )

    convert_pinyin_with_tone_number_to_tone_mark("hao3")  # "hǎo"
    parse_pinyin_tone("hǎo")                              # ("hao", 3)
    split_pinyin("hǎo", get_chart("standard"))            # ("h", "ao", 3)
"""

from .tone import (
    TONE_MARKS,
    PINYIN_VOWELS,
    NEUTRAL_TONE,
    is_pinyin_vowel,
    parse_pinyin_tone,
    convert_pinyin_with_tone_number_to_tone_mark,
)
from .chart import (
    Production,
    PinyinInitialGroupId,
    PinyinInitialGroup,
    PinyinChart,
    expand_combinations,
    get_chart,
    register_chart,
    list_charts,
    load_pinyin_syllables,
)
from .split import split_toneless_pinyin, split_pinyin

__all__ = [
    "TONE_MARKS",
    "PINYIN_VOWELS",
    "NEUTRAL_TONE",
    "is_pinyin_vowel",
    "parse_pinyin_tone",
    "convert_pinyin_with_tone_number_to_tone_mark",
    "Production",
    "PinyinInitialGroupId",
    "PinyinInitialGroup",
    "PinyinChart",
    "expand_combinations",
    "get_chart",
    "register_chart",
    "list_charts",
    "load_pinyin_syllables",
    "split_toneless_pinyin",
    "split_pinyin",
]

"""Split pinyin syllables into initial, final and tone using a chart."""

from typing import Optional

from ..errors import PinyinDataError
from .chart import PinyinChart
from .tone import parse_pinyin_tone


def split_toneless_pinyin(pinyin: str, chart: PinyinChart) -> Optional[tuple[str, str]]:
    """Split a toneless syllable (``hao``, not ``hǎo``) into initial and final.

    Overrides are checked first. Otherwise every initial that prefixes the
    syllable is tried, longest first, and the first one whose remainder is
    exactly a final wins.

    Args:
        pinyin: Toneless syllable.
        chart: Chart defining initials and finals.

    Returns:
        (initial_label, final_label), or None if the chart can't split it.
    """
    initials = chart.expanded_initials()
    finals = chart.expanded_finals()

    override = chart.overrides.get(pinyin)
    if override:
        return override

    for initial_label, initial in initials:
        if not pinyin.startswith(initial):
            continue
        rest = pinyin[len(initial):]
        for final_label, final in finals:
            if rest == final:
                return initial_label, final_label

    return None


def split_pinyin(pinyin: str, chart: PinyinChart) -> tuple[str, str, int]:
    """Split a tone-marked syllable into (initial, final, tone).

    Raises:
        PinyinDataError: If the syllable doesn't fit the chart. Syllables come
            from curated data, so this means the data is inconsistent.
    """
    toneless, tone = parse_pinyin_tone(pinyin)

    result = split_toneless_pinyin(toneless, chart)
    if result is None:
        raise PinyinDataError(
            f"Could not split pinyin {toneless!r} with chart {chart.name or '?'}",
            pinyin=pinyin,
        )

    initial, final = result
    return initial, final, tone

"""Exceptions raised by pinzi.

Malformed reference data is treated as fatal: callers get an exception, never
a degraded result. A syllable that simply does not fit a chart is not an
error (see ``split_toneless_pinyin``).
"""

from typing import Optional


class PinziError(Exception):
    """Base class for all pinzi errors."""


class IdsParseError(PinziError, ValueError):
    """An IDS string could not be parsed."""

    def __init__(self, message: str, ids: str = "", position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at {position} in {ids!r})"
        super().__init__(message)
        self.ids = ids
        self.position = position


class ChartError(PinziError, ValueError):
    """Chart data is malformed or the chart name is unknown."""


class PinyinDataError(PinziError):
    """A syllable from reference data could not be split.

    Raised by ``split_pinyin``; indicates a corrupt or incomplete chart or
    dictionary entry rather than bad user input.
    """

    def __init__(self, message: str, pinyin: str):
        super().__init__(message)
        self.pinyin = pinyin

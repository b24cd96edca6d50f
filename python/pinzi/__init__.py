"""pinzi - Chinese character and pinyin toolkit.

Two small pieces of language data machinery:
    - IDS: parse, serialize, walk and flatten Ideographic Description
      Sequences, the notation for how a character is built from components
    - Pinyin: tone mark conversion and splitting syllables into initial and
      final according to a pluggable chart

Example:
    "⿰木目" -> LeftToRight(木, 目)                 (相)
    "hao3"  -> "hǎo" -> ("h", "ao", 3)

Usage:
    from pinzi.ids import parse_ids, walk_ids, flatten_ids, ids_to_string
    from pinzi.pinyin import (
        convert_pinyin_with_tone_number_to_tone_mark,
        get_chart,
        split_pinyin,
    )

    node = parse_ids("⿱⿱亠口小")
    ids_to_string(flatten_ids(node))  # "⿳亠口小"

    mark = convert_pinyin_with_tone_number_to_tone_mark("zhuang4")  # "zhuàng"
    split_pinyin(mark, get_chart("standard"))   # ("zh", "uang", 4)
    split_pinyin(mark, get_chart("hmm"))        # ("zhu", "ang", 4)
"""

__version__ = "0.1.0"

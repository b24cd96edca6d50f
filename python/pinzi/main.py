"""pinzi CLI - IDS and pinyin toolkit.

Usage:
    python -m pinzi.main ids "⿱⿱亠口小" --flatten
    python -m pinzi.main tone hao3 niú
    python -m pinzi.main split hǎo zhuàng --chart hmm
    python -m pinzi.main check --chart mm
"""

import argparse
import json
import logging
import sys
from typing import Optional

from . import config as cfg
from .errors import ChartError, IdsParseError, PinyinDataError
from .ids import (
    LeafCharacter,
    flatten_ids,
    ids_to_string,
    parse_ids_strict,
    stroke_count_to_character,
    walk_ids,
)
from .pinyin import (
    NEUTRAL_TONE,
    convert_pinyin_with_tone_number_to_tone_mark,
    get_chart,
    list_charts,
    load_pinyin_syllables,
    parse_pinyin_tone,
    split_pinyin,
    split_toneless_pinyin,
)


def _leaf_text(leaf) -> str:
    if isinstance(leaf, LeafCharacter):
        return leaf.character
    return f"{stroke_count_to_character(leaf.stroke_count)} ({leaf.stroke_count} strokes)"


def cmd_ids(args: argparse.Namespace) -> int:
    """Parse IDS strings and show their structure."""
    status = 0
    for text in args.text:
        try:
            node = parse_ids_strict(text)
        except IdsParseError as e:
            print(f"{text}: ERROR - {e}")
            status = 1
            continue

        if args.flatten:
            node = flatten_ids(node)

        if args.json:
            print(json.dumps(node.to_dict(), ensure_ascii=False, indent=2))
            continue

        print(f"{text}: {ids_to_string(node)}")
        for leaf in walk_ids(node):
            print(f"    {_leaf_text(leaf)}")
    return status


def cmd_tone(args: argparse.Namespace) -> int:
    """Convert between tone numbers and tone marks."""
    for syllable in args.syllable:
        if syllable[-1:].isdigit():
            print(f"{syllable}: {convert_pinyin_with_tone_number_to_tone_mark(syllable)}")
        else:
            toneless, tone = parse_pinyin_tone(syllable)
            print(f"{syllable}: {toneless} {tone}")
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    """Split syllables into initial, final and tone."""
    chart = get_chart(args.chart)
    status = 0
    for syllable in args.syllable:
        if syllable[-1:].isdigit():
            syllable = convert_pinyin_with_tone_number_to_tone_mark(syllable)
        try:
            initial, final, tone = split_pinyin(syllable, chart)
        except PinyinDataError as e:
            print(f"{syllable}: ERROR - {e}")
            status = 1
            continue
        tone_text = "neutral" if tone == NEUTRAL_TONE else str(tone)
        print(f"{syllable}: initial={initial} final={final} tone={tone_text}")
    return status


def cmd_check(args: argparse.Namespace) -> int:
    """Check charts for duplicate surfaces and syllable coverage."""
    names = [args.chart] if args.chart else list_charts()
    syllables = load_pinyin_syllables()

    print("=" * 60)
    print("pinzi - Pinyin Chart Check")
    print("=" * 60)
    print(f"Charts: {', '.join(names)}")
    print(f"Syllables: {len(syllables):,}")

    failed = False
    for name in names:
        chart = get_chart(name)
        print(f"\n  [{name}]")

        duplicate_initials = chart.duplicate_initials()
        duplicate_finals = chart.duplicate_finals()
        unsplit = [s for s in syllables if split_toneless_pinyin(s, chart) is None]

        print(f"    Initials: {len(chart.initial_productions())}")
        print(f"    Finals: {len(chart.finals)}")
        print(f"    Overrides: {len(chart.overrides)}")
        if duplicate_initials:
            print(f"    Duplicate initials: {', '.join(duplicate_initials)}")
        if duplicate_finals:
            print(f"    Duplicate finals: {', '.join(duplicate_finals)}")
        if unsplit:
            print(f"    Could not split: {', '.join(unsplit)}")

        if duplicate_initials or duplicate_finals or unsplit:
            failed = True
            print("    FAIL")
        else:
            print(f"    OK - {len(syllables):,} syllables")

    print("\n" + "=" * 60)
    print("Failed!" if failed else "Done!")
    print("=" * 60)

    return 1 if failed else 0


def cmd_charts(args: argparse.Namespace) -> int:
    """List registered charts."""
    default = cfg.default_chart()
    for name in list_charts():
        marker = " (default)" if name == default else ""
        print(f"{name}{marker}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="pinzi - IDS and pinyin toolkit"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.default_verbose(),
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ids_parser = subparsers.add_parser("ids", help="Parse IDS strings")
    ids_parser.add_argument("text", nargs="+", help="IDS strings, e.g. ⿰木目")
    ids_parser.add_argument(
        "--flatten",
        action="store_true",
        help="Collapse ⿱⿱ to ⿳ and ⿰⿰ to ⿲",
    )
    ids_parser.add_argument("--json", action="store_true", help="Print the tree as JSON")
    ids_parser.set_defaults(func=cmd_ids)

    tone_parser = subparsers.add_parser(
        "tone", help="Convert hao3 <-> hǎo"
    )
    tone_parser.add_argument("syllable", nargs="+")
    tone_parser.set_defaults(func=cmd_tone)

    split_parser = subparsers.add_parser(
        "split", help="Split syllables into initial, final and tone"
    )
    split_parser.add_argument("syllable", nargs="+")
    split_parser.add_argument(
        "--chart",
        "-c",
        type=str,
        default=None,
        help=f"Chart name (default: {cfg.default_chart()})",
    )
    split_parser.set_defaults(func=cmd_split)

    check_parser = subparsers.add_parser(
        "check", help="Check chart well-formedness and coverage"
    )
    check_parser.add_argument(
        "--chart",
        "-c",
        type=str,
        default=None,
        help="Chart name (default: all charts)",
    )
    check_parser.set_defaults(func=cmd_check)

    charts_parser = subparsers.add_parser("charts", help="List charts")
    charts_parser.set_defaults(func=cmd_charts)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
            stream=sys.stdout,
        )

    try:
        return args.func(args)
    except ChartError as e:
        print(f"ERROR - {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

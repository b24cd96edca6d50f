"""Tests for splitting syllables into initial and final."""

import pytest

from pinzi.errors import PinyinDataError
from pinzi.pinyin import (
    get_chart,
    load_pinyin_syllables,
    split_pinyin,
    split_toneless_pinyin,
)

STANDARD_CASES = [
    ("a", "∅", "a"),
    ("an", "∅", "an"),
    ("ê", "∅", "ê"),
    ("ju", "j", "ü"),
    ("qu", "q", "ü"),
    ("xu", "x", "ü"),
    ("bu", "b", "u"),
    ("pu", "p", "u"),
    ("mu", "m", "u"),
    ("fu", "f", "u"),
    ("du", "d", "u"),
    ("tu", "t", "u"),
    ("nu", "n", "u"),
    ("niu", "n", "iu"),
    ("lu", "l", "u"),
    ("gu", "g", "u"),
    ("ku", "k", "u"),
    ("hu", "h", "u"),
    ("er", "∅", "er"),
    ("yi", "∅", "i"),
    ("ya", "∅", "ia"),
    ("yo", "∅", "io"),
    ("ye", "∅", "ie"),
    ("yai", "∅", "iai"),
    ("yao", "∅", "iao"),
    ("you", "∅", "iu"),
    ("yan", "∅", "ian"),
    ("yin", "∅", "in"),
    ("yang", "∅", "iang"),
    ("ying", "∅", "ing"),
    ("wu", "∅", "u"),
    ("wa", "∅", "ua"),
    ("wo", "∅", "uo"),
    ("wai", "∅", "uai"),
    ("wei", "∅", "ui"),
    ("wan", "∅", "uan"),
    ("wen", "∅", "un"),
    ("wang", "∅", "uang"),
    ("weng", "∅", "ong"),
    ("ong", "∅", "ong"),
    ("yu", "∅", "ü"),
    ("yue", "∅", "üe"),
    ("yuan", "∅", "üan"),
    ("yun", "∅", "ün"),
    ("yong", "∅", "iong"),
    ("jue", "j", "üe"),
    ("juan", "j", "üan"),
    ("jun", "j", "ün"),
    ("jiong", "j", "iong"),
    ("que", "q", "üe"),
    ("quan", "q", "üan"),
    ("qun", "q", "ün"),
    ("qiong", "q", "iong"),
    ("xue", "x", "üe"),
    ("xuan", "x", "üan"),
    ("xun", "x", "ün"),
    ("xiong", "x", "iong"),
]

MM_CASES = [
    ("zhang", "zh", "ang"),
    ("bao", "b", "ao"),
    ("ao", "∅", "ao"),
    ("ba", "b", "a"),
    ("ci", "c", "∅"),
    ("chi", "ch", "∅"),
    ("cong", "cu", "(e)ng"),
    ("chong", "chu", "(e)ng"),
    ("chui", "chu", "ei"),
    ("diu", "di", "ou"),
    ("miu", "mi", "ou"),
    ("niu", "ni", "ou"),
    ("you", "y", "ou"),
    ("yin", "y", "(e)n"),
    ("ê", "∅", "e"),
    ("er", "∅", "∅"),
    ("zha", "zh", "a"),
    ("zhong", "zhu", "(e)ng"),
    ("zhe", "zh", "e"),
    ("ta", "t", "a"),
    ("a", "∅", "a"),
    ("xing", "xi", "(e)ng"),
    ("qing", "qi", "(e)ng"),
]

HMM_CASES = [
    ("a", "∅", "a"),
    ("er", "∅", "∅"),
    ("ci", "c", "∅"),
    ("yi", "yi", "∅"),
    ("ya", "yi", "a"),
    ("wa", "wu", "a"),
    ("wu", "wu", "∅"),
    ("bi", "bi", "∅"),
    ("bin", "bi", "(e)n"),
    ("meng", "m", "(e)ng"),
    ("ming", "mi", "(e)ng"),
    ("li", "li", "∅"),
    ("diu", "di", "ou"),
    ("niu", "ni", "ou"),
    ("lu", "lu", "∅"),
    ("lü", "lü", "∅"),
    ("tie", "ti", "e"),
    ("zhou", "zh", "ou"),
    ("zhuo", "zhu", "o"),
    ("shua", "shu", "a"),
]

HH_CASES = [
    ("a", "_", "a"),
    ("bi", "bi", "_"),
    ("niu", "ni", "(o)u"),
    ("tie", "ti", "e"),
    ("zhou", "zh", "(o)u"),
    ("zhuo", "zhu", "o"),
    ("er", "_", "_"),
    ("shi", "sh", "_"),
    ("you", "yi", "(o)u"),
    ("wu", "wu", "_"),
]


class TestSplitTonelessPinyin:
    """Tests for split_toneless_pinyin on a small chart."""

    @pytest.mark.parametrize(
        "pinyin, expected",
        [
            ("sha", ("sh", "a")),
            ("san", ("s", "an")),
            ("shang", ("sh", "ang")),
            ("hang", ("h", "ang")),
            ("a", ("∅", "a")),
            ("yi", ("∅", "i")),
            ("ang", ("∅", "ang")),
        ],
    )
    def test_split(self, tiny_chart, pinyin, expected):
        """Test the longest matching initial is used."""
        assert split_toneless_pinyin(pinyin, tiny_chart) == expected

    def test_backtracks_to_shorter_initial(self, tiny_chart):
        """Test a shorter initial is tried when the longest leaves no final."""
        # sh + "ui" has no final; s + "hui" does.
        assert split_toneless_pinyin("shui", tiny_chart) == ("s", "ui")

    def test_override_first(self, tiny_chart):
        """Test overrides win over the chart."""
        assert split_toneless_pinyin("shi", tiny_chart) == ("sh", "-i")

    @pytest.mark.parametrize("pinyin", ["xa", "sho", "shaa", ""])
    def test_no_split(self, tiny_chart, pinyin):
        """Test None when no initial and final fit."""
        assert split_toneless_pinyin(pinyin, tiny_chart) is None


class TestPackagedChartSplits:
    """Tests for the shipped charts."""

    @pytest.mark.parametrize("pinyin, initial, final", STANDARD_CASES)
    def test_standard(self, pinyin, initial, final):
        assert split_toneless_pinyin(pinyin, get_chart("standard")) == (initial, final)

    @pytest.mark.parametrize("pinyin, initial, final", MM_CASES)
    def test_mm(self, pinyin, initial, final):
        assert split_toneless_pinyin(pinyin, get_chart("mm")) == (initial, final)

    @pytest.mark.parametrize("pinyin, initial, final", HMM_CASES)
    def test_hmm(self, pinyin, initial, final):
        assert split_toneless_pinyin(pinyin, get_chart("hmm")) == (initial, final)

    @pytest.mark.parametrize("pinyin, initial, final", HH_CASES)
    def test_hh(self, pinyin, initial, final):
        assert split_toneless_pinyin(pinyin, get_chart("hh")) == (initial, final)

    @pytest.mark.parametrize("name", ["standard", "mm", "hmm", "hh"])
    def test_covers_all_syllables(self, name):
        """Test every syllable in the reference list splits."""
        chart = get_chart(name)
        unsplit = [s for s in load_pinyin_syllables() if split_toneless_pinyin(s, chart) is None]
        assert unsplit == []


class TestSplitPinyin:
    """Tests for split_pinyin with tone marks."""

    @pytest.mark.parametrize(
        "pinyin, expected",
        [
            ("hǎo", ("h", "ao", 3)),
            ("zhuàng", ("zh", "uang", 4)),
            ("nǚ", ("n", "ü", 3)),
            ("xué", ("x", "üe", 2)),
            ("ma", ("m", "a", 5)),
            ("ēr", ("∅", "er", 1)),
        ],
    )
    def test_standard(self, pinyin, expected):
        """Test tone-marked syllables split with the standard chart."""
        assert split_pinyin(pinyin, get_chart("standard")) == expected

    def test_mm(self):
        assert split_pinyin("xíng", get_chart("mm")) == ("xi", "(e)ng", 2)

    def test_unsplittable(self, tiny_chart):
        """Test a syllable the chart can't split raises PinyinDataError."""
        with pytest.raises(PinyinDataError) as exc_info:
            split_pinyin("xǎ", tiny_chart)
        assert exc_info.value.pinyin == "xǎ"
        assert "'xa'" in str(exc_info.value)
        assert "tiny" in str(exc_info.value)

import pytest

from structurer.patterns import (
    BlockKind,
    bracket_inner,
    classify_block,
    is_category_id,
    is_latin_gloss,
    is_term_id,
    strip_marker,
)


@pytest.mark.parametrize("text, expected", [
    ("3.1", True),
    ("3.12", True),
    (" 3.1 ", True),
    ("3.1.1", False),
    ("3.1 基本用語", False),
    ("4.1", False),
])
def test_category_id(text, expected):
    assert is_category_id(text) is expected


@pytest.mark.parametrize("text, expected", [
    ("3.1.1", True),
    ("3.10.12", True),
    ("3.1", False),
    ("3.1.1.1", False),
    ("3.1.1 品質", False),
])
def test_term_id(text, expected):
    assert is_term_id(text) is expected


def test_bracket_inner():
    assert bracket_inner("（ISO 9001:2015, 3.1 参照）") == "ISO 9001:2015, 3.1 参照"
    assert bracket_inner("(see 3.1)") == "see 3.1"
    assert bracket_inner("〔注〕") == "注"
    assert bracket_inner("［JIS］") == "JIS"
    assert bracket_inner("[JIS]") == "JIS"
    assert bracket_inner("（外（内）側）") == "外（内）側"
    assert bracket_inner("（a）と（b）") is None
    assert bracket_inner("品質（quality）") is None
    assert bracket_inner("（閉じていない") is None
    assert bracket_inner("（") is None


@pytest.mark.parametrize("text, kind", [
    ("（ISO 9001:2015, 3.1 参照）", BlockKind.REMARK),
    ("注記1 特性とは、区別可能な性質をいう。", BlockKind.NOTE),
    ("注記 ほにゃらら", BlockKind.NOTE),
    ("例1 ある製品の寸法", BlockKind.EXAMPLE),
    ("例 ある製品", BlockKind.EXAMPLE),
    ("例", BlockKind.EXAMPLE),
    ("例えば製品", BlockKind.NAME),
    ("要求事項（3.6.4）を満たす程度", BlockKind.DEFINITION),
    ("要求事項を満たす程度。", BlockKind.DEFINITION),
    ("区別可能な性質をいう", BlockKind.DEFINITION),
    ("組織が、目標を達成する", BlockKind.DEFINITION),
    ("組織は、目標を達成する", BlockKind.DEFINITION),
    ("品質（quality）", BlockKind.NAME),
    ("組織的", BlockKind.NAME),
])
def test_classify_block(text, kind):
    assert classify_block(text) is kind


def test_latin_gloss():
    assert is_latin_gloss("（quality）")
    assert is_latin_gloss("(quality management system)")
    assert not is_latin_gloss("（参考）")
    assert not is_latin_gloss("（ISO 9001:2015, 3.1 参照）")
    assert not is_latin_gloss("quality")


def test_strip_marker():
    assert strip_marker("注記1 特性とは", BlockKind.NOTE) == "特性とは"
    assert strip_marker("注記12：特性とは", BlockKind.NOTE) == "特性とは"
    assert strip_marker("例2 製品", BlockKind.EXAMPLE) == "製品"
    assert strip_marker("例：製品", BlockKind.EXAMPLE) == "製品"
    assert strip_marker("注記", BlockKind.NOTE) == ""

import pytest
import requests

from html_parser import ExtractionError, extract_blocks, extract_title, fetch_markup
from html_parser import parser as html_parser_module

SAMPLE = """<!DOCTYPE html>
<html>
<head><title>JIS Q 9000:2015</title><style>p { color: red; }</style></head>
<body>
  <h1>品質マネジメントシステム－基本及び用語</h1>
  <p>3.1</p>
  <p>基本用語</p>
  <p>3.1.1</p>
  <p>品質<span>（quality）</span></p>
  <p>対象に本来備わっている
     特性の集まりが、要求事項を満たす程度。</p>
  <p>   </p>
  <script>var x = "3.9";</script>
  <!-- 3.8 -->
</body>
</html>
"""


def test_extracts_leaf_blocks_in_order():
    assert extract_blocks(SAMPLE) == [
        "品質マネジメントシステム－基本及び用語",
        "3.1",
        "基本用語",
        "3.1.1",
        "品質（quality）",
        "対象に本来備わっている特性の集まりが、要求事項を満たす程度。",
    ]


def test_extraction_is_deterministic():
    assert extract_blocks(SAMPLE) == extract_blocks(SAMPLE)


def test_loose_text_in_container_forms_its_own_block():
    html = "<div>3.1<p>基本用語</p>尾注</div>"
    assert extract_blocks(html) == ["3.1", "基本用語", "尾注"]


def test_nested_containers_do_not_duplicate_text():
    html = "<table><tr><td>3.1.1</td><td><p>品質</p><p>定義。</p></td></tr></table>"
    assert extract_blocks(html) == ["3.1.1", "品質", "定義。"]


def test_latin_whitespace_is_collapsed_not_removed():
    assert extract_blocks("<p>ISO   9001:2015,\n 3.1</p>") == ["ISO 9001:2015, 3.1"]


def test_wordprocessingml_paragraphs():
    xml = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<w:document><w:body>"
        "<w:p><w:r><w:t>3.1</w:t></w:r></w:p>"
        "<w:p><w:r><w:t>基本</w:t></w:r><w:r><w:t>用語</w:t></w:r></w:p>"
        "<w:p></w:p>"
        "</w:body></w:document>"
    )
    assert extract_blocks(xml) == ["3.1", "基本用語"]


def test_irregular_markup_is_tolerated():
    assert extract_blocks("<p>3.1<p>基本用語</div><li>3.1.1") == ["3.1", "基本用語", "3.1.1"]


def test_bytes_input_with_declared_charset():
    raw = '<meta charset="utf-8"><p>品質</p>'.encode("utf-8")
    assert extract_blocks(raw) == ["品質"]


@pytest.mark.parametrize("raw", [None, 42, ["<p>x</p>"]])
def test_non_text_input_raises(raw):
    with pytest.raises(ExtractionError):
        extract_blocks(raw)


def test_title_from_title_element():
    assert extract_title(SAMPLE) == "JIS Q 9000:2015"


def test_title_falls_back_to_h1_then_none():
    assert extract_title("<h1>用語\n集</h1><p>x</p>") == "用語集"
    assert extract_title("<p>x</p>") is None


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status
        self.encoding = None
        self.apparent_encoding = "utf-8"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_fetch_markup(monkeypatch):
    calls = []

    def fake_get(url, timeout, headers):
        calls.append((url, timeout))
        return _FakeResponse("<p>3.1</p>")

    monkeypatch.setattr(html_parser_module.requests, "get", fake_get)

    assert fetch_markup("https://example.com/v", timeout=5) == "<p>3.1</p>"
    assert calls == [("https://example.com/v", 5)]


def test_fetch_markup_wraps_http_errors(monkeypatch):
    monkeypatch.setattr(
        html_parser_module.requests, "get",
        lambda url, timeout, headers: _FakeResponse("", status=404),
    )

    with pytest.raises(ExtractionError):
        fetch_markup("https://example.com/missing")


def test_marker_spacing_survives_cleanup():
    html = "<p>例　ある製品の寸法。</p><p>注記1 特性とは、\n区別可能な性質をいう。</p>"
    assert extract_blocks(html) == ["例 ある製品の寸法。", "注記1 特性とは、区別可能な性質をいう。"]


def test_body_nested_in_unclosed_head_is_kept():
    html = (
        "<html><head><title>JIS Q 9000</title><body>"
        "<p>3.1</p><p>基本用語</p><p>3.1.1</p><p>品質（quality）</p><p>定義である。</p>"
        "</body></html>"
    )
    assert extract_blocks(html) == ["3.1", "基本用語", "3.1.1", "品質（quality）", "定義である。"]
    assert extract_title(html) == "JIS Q 9000"


def test_line_break_splits_a_paragraph():
    html = "<p>3.1</p><p>基本用語</p><p>3.1.1<br>品質</p><p>定義。</p>"
    assert extract_blocks(html) == ["3.1", "基本用語", "3.1.1", "品質", "定義。"]

import pytest

from wikikit import text


def test_trim_left():
    assert text.trim_left("  hello") == "hello"
    assert text.trim_left("hello") == "hello"
    assert text.trim_left("") == ""
    assert text.trim_left("  ") == ""
    assert text.trim_left("\t\nhello") == "hello"


def test_trim_right():
    assert text.trim_right("hello  ") == "hello"
    assert text.trim_right("hello") == "hello"
    assert text.trim_right("") == ""
    assert text.trim_right("hello\n\t") == "hello"


def test_trim():
    assert text.trim("  hello  ") == "hello"
    assert text.trim("hello") == "hello"
    assert text.trim("") == ""
    assert text.trim("  ") == ""


def test_trim_keeps_non_ascii_whitespace():
    assert text.trim("\u00a0x\u00a0") == "\u00a0x\u00a0"


def test_collapse_whitespace():
    assert text.collapse_whitespace("hello   world") == "hello world"
    assert text.collapse_whitespace("  hello  world  ") == " hello world "
    assert text.collapse_whitespace("a\t\nb") == "a b"


def test_to_lower_ascii():
    assert text.to_lower_ascii("Hello World") == "hello world"
    assert text.to_lower_ascii("HELLO") == "hello"
    assert text.to_lower_ascii("123") == "123"


def test_case_conversion_ascii_only():
    assert text.to_lower_ascii("ÄB") == "Äb"
    assert text.to_upper_ascii("äb") == "äB"
    assert text.to_upper_ascii("hello") == "HELLO"


def test_equals_ignore_case_ascii():
    assert text.equals_ignore_case_ascii("Hello", "hello")
    assert text.equals_ignore_case_ascii("HELLO", "hello")
    assert not text.equals_ignore_case_ascii("Hello", "world")
    assert not text.equals_ignore_case_ascii("Hello", "Hell")


def test_starts_with_ends_with():
    assert text.starts_with("hello world", "hello")
    assert not text.starts_with("hello world", "world")
    assert text.ends_with("hello world", "world")
    assert not text.ends_with("hello world", "hello")


def test_starts_with_ignore_case_ascii():
    assert text.starts_with_ignore_case_ascii("#REDIRECT [[X]]", "#redirect")
    assert not text.starts_with_ignore_case_ascii("#RE", "#redirect")
    assert not text.starts_with_ignore_case_ascii("other", "#redirect")


def test_split():
    assert text.split("a,b,c", ",") == ["a", "b", "c"]
    assert text.split("a||b", "||") == ["a", "b"]


def test_split_keeps_empty_parts_and_empty_delimiter():
    assert text.split(",a,", ",") == ["", "a", ""]
    assert text.split("abc", "") == ["abc"]
    assert text.split("", ",") == [""]


def test_split_n():
    assert text.split_n("a,b,c,d", ",", 2) == ["a", "b,c,d"]
    assert text.split_n("a,b", ",", 0) == []
    assert text.split_n("a,b,c", ",", 1) == ["a,b,c"]
    assert text.split_n("a,b", ",", 5) == ["a", "b"]


def test_split_n_negative_raises():
    with pytest.raises(ValueError):
        text.split_n("a,b", ",", -1)


def test_split_any():
    assert text.split_any("a, b;;c", ", ;") == ["a", "b", "c"]
    assert text.split_any(",,", ",") == []
    assert text.split_any("abc", "") == ["abc"]
    assert text.split_any("a]b[c", "[]") == ["a", "b", "c"]


def test_join():
    assert text.join(["a", "b", "c"], ", ") == "a, b, c"
    assert text.join([], "-") == ""


def test_replace_all():
    assert text.replace_all("hello world", "o", "0") == "hell0 w0rld"
    assert text.replace_all("aaa", "a", "bb") == "bbbbbb"
    assert text.replace_all("test", "x", "y") == "test"
    assert text.replace_all("test", "", "y") == "test"


def test_replace_first():
    assert text.replace_first("a-b-c", "-", "+") == "a+b-c"
    assert text.replace_first("abc", "x", "y") == "abc"


def test_count_occurrences():
    assert text.count_occurrences("hello world", "o") == 2
    assert text.count_occurrences("aaa", "aa") == 1
    assert text.count_occurrences("test", "x") == 0
    assert text.count_occurrences("test", "") == 0


def test_find_all():
    assert text.find_all("abcabc", "bc") == [1, 4]
    assert text.find_all("aaaa", "aa") == [0, 2]
    assert text.find_all("abc", "") == []


def test_parse_int():
    assert text.parse_int("123") == 123
    assert text.parse_int("-42") == -42
    assert text.parse_int("  456  ") == 456
    assert text.parse_int("abc") is None
    assert text.parse_int("") is None


def test_parse_int_rejects_partial_and_plus():
    assert text.parse_int("12a") is None
    assert text.parse_int("+5") is None
    assert text.parse_int("-") is None


def test_decode_html_entities():
    assert text.decode_html_entities("&amp;") == "&"
    assert text.decode_html_entities("&lt;&gt;") == "<>"
    assert text.decode_html_entities("&quot;hello&quot;") == '"hello"'
    assert text.decode_html_entities("&#60;") == "<"
    assert text.decode_html_entities("&#x3C;") == "<"


def test_decode_html_entities_other_cases():
    assert text.decode_html_entities("a&nbsp;b") == "a b"
    assert text.decode_html_entities("&apos;") == "'"
    assert text.decode_html_entities("&#233;") == "é"
    assert text.decode_html_entities("&unknown;") == "&unknown;"
    assert text.decode_html_entities("a & b") == "a & b"
    assert text.decode_html_entities("&#0;") == "&#0;"


def test_encode_html_entities():
    assert text.encode_html_entities("<a href=\"x\">'&'</a>") == (
        "&lt;a href=&quot;x&quot;&gt;&#39;&amp;&#39;&lt;/a&gt;"
    )


def test_encode_decode_round_trip():
    original = "Tom & Jerry <\"quoted\">"
    assert text.decode_html_entities(text.encode_html_entities(original)) == original


def test_strip_tags():
    assert text.strip_tags("<b>bold</b> text") == "bold text"
    assert text.strip_tags("a<br/>b") == "ab"
    assert text.strip_tags("a > b") == "a  b"
    assert text.strip_tags("a <unclosed") == "a "


def test_split_lines():
    assert text.split_lines("a\nb\nc") == ["a", "b", "c"]
    assert len(text.split_lines("a\r\nb\rc")) == 3
    assert text.split_lines("a\r\nb\rc") == ["a", "b", "c"]
    assert text.split_lines("a\n") == ["a", ""]
    assert text.split_lines("") == [""]


def test_count_lines():
    assert text.count_lines("") == 0
    assert text.count_lines("a") == 1
    assert text.count_lines("a\r\nb\rc\n") == 4


def test_get_line():
    assert text.get_line("a\nb\nc", 1) == "b"
    assert text.get_line("a\nb", 5) is None
    assert text.get_line("a\nb", -1) is None
    assert text.get_line("a\nb", 0) == "a"
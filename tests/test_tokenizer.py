import unittest

from laxhtml.tokenizer import (
    extract_attributes,
    find_comment_end,
    find_declaration_end,
    find_rawtext_end,
    is_comment_start,
    is_declaration_start,
    scan_tag,
)


def attrs_of(text):
    return extract_attributes(text, 0, len(text))


class TestScanTag(unittest.TestCase):
    def test_simple_open_tag(self):
        tag = scan_tag("<div>", 0)
        assert tag.name == "div"
        assert not tag.is_closing
        assert not tag.self_closing
        assert tag.attributes is None
        assert tag.end == 4

    def test_closing_tag_is_lowercased(self):
        tag = scan_tag("</DIV >", 0)
        assert tag.is_closing
        assert tag.name == "div"
        assert tag.end == 6

    def test_closing_tag_never_has_attributes(self):
        tag = scan_tag("</a href=x>", 0)
        assert tag.is_closing
        assert tag.name == "a"
        assert tag.attributes is None

    def test_self_closing_marker(self):
        tag = scan_tag("<br/>", 0)
        assert tag.name == "br"
        assert tag.self_closing

    def test_self_closing_with_attributes(self):
        tag = scan_tag('<img src="a.png" />', 0)
        assert tag.self_closing
        assert tag.attributes == {"src": "a.png"}

    def test_scan_from_offset(self):
        tag = scan_tag("text<p class=intro>", 4)
        assert tag.name == "p"
        assert tag.attributes == {"class": "intro"}
        assert tag.end == 18

    def test_missing_terminator(self):
        assert scan_tag("<p class='x'", 0) is None
        assert scan_tag("<", 0) is None

    def test_empty_and_unnamed_tags(self):
        assert scan_tag("<>", 0).name == ""
        assert scan_tag("< p>", 0).name == ""
        closing = scan_tag("</>", 0)
        assert closing.is_closing
        assert closing.name == ""

    def test_name_stops_at_unicode_whitespace(self):
        tag = scan_tag("<p\u3000id=x>", 0)
        assert tag.name == "p"
        assert tag.attributes == {"id": "x"}


class TestExtractAttributes(unittest.TestCase):
    def test_quote_styles(self):
        assert attrs_of(" a=1 b=\"2\" c='3'") == {"a": "1", "b": "2", "c": "3"}

    def test_quoted_value_keeps_whitespace(self):
        assert attrs_of(' title="x  y"') == {"title": "x  y"}

    def test_bare_key(self):
        assert attrs_of(" checked") == {"checked": ""}

    def test_key_with_trailing_equals(self):
        assert attrs_of(" src=a.png alt=") == {"src": "a.png", "alt": ""}

    def test_spaces_around_equals(self):
        assert attrs_of(' a = "x"') == {"a": "x"}

    def test_no_pairs(self):
        assert attrs_of("") is None
        assert attrs_of("   ") is None
        assert attrs_of(" =x") is None

    def test_leading_equals_drops_the_pair(self):
        assert scan_tag("<a =x>", 0).attributes is None
        assert attrs_of(" =x id=y") == {"id": "y"}

    def test_unterminated_quote_runs_to_end(self):
        assert attrs_of(' title="unterminated') == {"title": "unterminated"}

    def test_adjacent_quoted_pairs(self):
        assert attrs_of(' a="1"b="2"') == {"a": "1", "b": "2"}

    def test_missing_equals_takes_next_token_as_value(self):
        assert attrs_of(" disabled hidden") == {"disabled": "hidden"}

    def test_keys_lowercased_last_wins(self):
        assert attrs_of(" A=1 a=2") == {"a": "2"}

    def test_value_case_preserved(self):
        assert attrs_of(" Class=MixedCase") == {"class": "MixedCase"}

    def test_values_are_entity_decoded(self):
        assert attrs_of(' t="&lt;b&gt; &amp; &#65;"') == {"t": "<b> & A"}

    def test_other_quote_inside_value(self):
        assert attrs_of(" a='say \"hi\"'") == {"a": 'say "hi"'}

    def test_sub_range(self):
        source = '<a href="x" id=y>'
        assert extract_attributes(source, 2, len(source) - 1) == {"href": "x", "id": "y"}


class TestMarkupSkipping(unittest.TestCase):
    def test_comment_detection(self):
        assert is_comment_start("x<!-- c -->", 1)
        assert not is_comment_start("<!- c ->", 0)
        assert is_declaration_start("<!DOCTYPE html>", 0)
        assert not is_declaration_start("<p>", 0)

    def test_comment_end(self):
        assert find_comment_end("<!-- x -->y", 0) == 10
        assert find_comment_end("<!-->", 0) == 5
        assert find_comment_end("<!-- x", 0) is None

    def test_declaration_end(self):
        assert find_declaration_end("<!DOCTYPE html>", 0) == 15
        assert find_declaration_end("<!>", 0) == 3
        assert find_declaration_end("<!DOCTYPE", 0) is None

    def test_rawtext_end(self):
        assert find_rawtext_end("a{}</STYLE>", 0, "style") == 3
        assert find_rawtext_end("</style>a</style>", 1, "style") == 9
        assert find_rawtext_end("a{}</style", 0, "style") is None


if __name__ == "__main__":
    unittest.main()

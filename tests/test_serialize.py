import unittest

from laxhtml import HtmlTag, LaxHTML, Node, TextSpan, parse_document, to_html, to_test_format


class TestTestFormat(unittest.TestCase):
    def test_attributes_sorted_under_element(self):
        root = parse_document("<a id=1 href=x>t</a>")
        assert to_test_format(root) == "\n".join(
            [
                "| <a>",
                '|   href="x"',
                '|   id="1"',
                '|   "t"',
            ]
        )

    def test_siblings_at_root(self):
        root = parse_document("<br>x<hr>")
        assert to_test_format(root) == '| <br>\n| "x"\n| <hr>'

    def test_empty_tree(self):
        assert to_test_format(parse_document("")) == ""

    def test_indent_argument(self):
        root = Node.create_root()
        Node.create_element_child(root, HtmlTag("p"))
        assert to_test_format(root.children[0], 4) == "|     <p>"


class TestToHtml(unittest.TestCase):
    def test_round_trip_of_clean_markup(self):
        html = '<div class="a"><p>x<br>y</p></div>'
        assert to_html(parse_document(html)) == html

    def test_unclosed_elements_are_closed(self):
        assert to_html(parse_document("<p>a<b>b")) == "<p>a<b></b></p>b"

    def test_empty_value_is_bare_key(self):
        assert to_html(parse_document("<input disabled>")) == "<input disabled>"

    def test_attribute_escaping(self):
        root = Node.create_root()
        Node.create_element_child(root, HtmlTag("a", False, {"title": 'say "hi" & go'}))
        assert to_html(root) == '<a title="say &quot;hi&quot; &amp; go"></a>'

    def test_text_is_verbatim(self):
        root = Node.create_root()
        Node.create_text_child(root, TextSpan("a &amp; <b>"))
        assert to_html(root) == "a &amp; <b>"

    def test_self_closed_element_has_no_end_tag(self):
        assert to_html(parse_document("<div/>x")) == "<div>x"


class TestDeepTrees(unittest.TestCase):
    def setUp(self):
        self.depth = 1500
        self.doc = LaxHTML("<ul>" + "<li>item" * self.depth + "</ul>")

    def test_to_html_of_unclosed_list_items(self):
        html = self.doc.to_html()
        assert html.startswith("<ul><li>item<li>item")
        assert html.endswith("</li>" * self.depth + "</ul>")
        assert html.count("<li>") == self.depth

    def test_to_test_format_of_unclosed_list_items(self):
        lines = self.doc.to_test_format().split("\n")
        assert len(lines) == 1 + 2 * self.depth
        assert lines[0] == "| <ul>"
        assert lines[-1] == "| " + " " * (2 * self.depth + 2) + '"item"'


if __name__ == "__main__":
    unittest.main()

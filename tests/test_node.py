import unittest

from laxhtml import HtmlTag, Node, TextSpan, find_ancestor_by_tag_name


def build_chain(*names):
    """root -> names[0] -> names[1] -> ...; returns (root, deepest)."""
    root = Node.create_root()
    node = root
    for name in names:
        node = Node.create_element_child(node, HtmlTag(name))
    return root, node


class TestNodeFactory(unittest.TestCase):
    def test_root(self):
        root = Node.create_root()
        assert root.parent is None
        assert root.tag is None
        assert root.text is None
        assert root.is_root
        assert root.tag_name == "#root"
        assert root.attributes == {}

    def test_children_in_insertion_order(self):
        root = Node.create_root()
        first = Node.create_element_child(root, HtmlTag("p"))
        second = Node.create_text_child(root, TextSpan("abc"))
        assert root.children == [first, second]
        assert first.parent is root
        assert second.parent is root
        assert second.is_text
        assert second.tag_name == "#text"

    def test_text_nodes_reject_children(self):
        root = Node.create_root()
        text = Node.create_text_child(root, TextSpan("abc"))
        with self.assertRaises(ValueError):
            Node.create_text_child(text, TextSpan("x"))
        with self.assertRaises(ValueError):
            Node.create_element_child(text, HtmlTag("b"))


class TestHtmlTag(unittest.TestCase):
    def test_descriptor_is_immutable(self):
        tag = HtmlTag("a", False, {"href": "x"})
        with self.assertRaises(AttributeError):
            tag.name = "b"
        with self.assertRaises(TypeError):
            tag.attributes["href"] = "y"

    def test_attribute_helpers(self):
        tag = HtmlTag("a", False, {"href": "x"})
        assert tag.has_attribute("HREF")
        assert tag.get_attribute("Href") == "x"
        assert tag.get_attribute("title") == ""
        assert tag.get_attribute("title", None) is None

    def test_attributes_are_copied(self):
        attrs = {"id": "1"}
        tag = HtmlTag("div", False, attrs)
        attrs["id"] = "2"
        assert tag.get_attribute("id") == "1"

    def test_repr(self):
        assert repr(HtmlTag("br", True)) == "<br />"
        assert repr(HtmlTag("a", False, {"href": "x"})) == "<a href='x'>"


class TestFindAncestorByTagName(unittest.TestCase):
    def test_closing_lands_on_parent_of_match(self):
        root, span = build_chain("div", "span")
        div = span.parent
        assert find_ancestor_by_tag_name(span, "span") is div
        assert find_ancestor_by_tag_name(span, "div") is root

    def test_match_is_case_insensitive(self):
        root, span = build_chain("div", "span")
        assert find_ancestor_by_tag_name(span, "DIV") is root

    def test_nearest_match_wins(self):
        root, inner = build_chain("div", "div", "p")
        outer = root.children[0]
        assert find_ancestor_by_tag_name(inner, "div") is outer

    def test_no_match_returns_start(self):
        root, span = build_chain("div", "span")
        assert find_ancestor_by_tag_name(span, "table") is span

    def test_root_is_never_matched(self):
        root = Node.create_root()
        assert find_ancestor_by_tag_name(root, "div") is root


class TestTraversal(unittest.TestCase):
    def setUp(self):
        source = "abc"
        self.root = Node.create_root()
        div = Node.create_element_child(self.root, HtmlTag("div"))
        Node.create_text_child(div, TextSpan(source, 0, 1))
        p = Node.create_element_child(div, HtmlTag("p"))
        Node.create_text_child(p, TextSpan(source, 1, 1))
        Node.create_element_child(self.root, HtmlTag("p"))
        Node.create_text_child(self.root, TextSpan(source, 2, 1))

    def test_iter_descendants_is_preorder(self):
        order = [node.tag_name for node in self.root.iter_descendants()]
        assert order == ["div", "#text", "p", "#text", "p", "#text"]

    def test_text_content(self):
        assert self.root.text_content == "abc"
        assert self.root.children[0].text_content == "ab"

    def test_find_first_and_all(self):
        assert self.root.find_first("p") is self.root.children[0].children[1]
        assert len(self.root.find_all("p")) == 2
        assert self.root.find_first("table") is None

    def test_repr(self):
        assert repr(self.root) == "Node(#root, children=3)"
        assert repr(self.root.children[0]) == "Node(<div>, children=2)"
        assert repr(self.root.children[2]) == "Node(#text='c')"


if __name__ == "__main__":
    unittest.main()

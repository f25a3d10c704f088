from .serialize import to_test_format

ROOT_NAME = "#root"
TEXT_NAME = "#text"


class Node:
    """A node of the parsed tree.

    - tag: HtmlTag descriptor for elements, None for text nodes and the root
    - text: TextSpan for text nodes, None otherwise
    - children: child Nodes in document order
    - parent: reference to the parent Node (None for the root)

    Nodes are only ever appended; nothing is removed or moved once created.
    """

    __slots__ = ("children", "parent", "tag", "text")

    def __init__(self, parent=None, tag=None, text=None):
        self.parent = parent
        self.tag = tag
        self.text = text
        self.children = []

    @classmethod
    def create_root(cls):
        return cls()

    @classmethod
    def create_text_child(cls, parent, span):
        if parent.is_text:
            msg = "Text nodes cannot have children"
            raise ValueError(msg)
        node = cls(parent=parent, text=span)
        parent.children.append(node)
        return node

    @classmethod
    def create_element_child(cls, parent, tag):
        if parent.is_text:
            msg = "Text nodes cannot have children"
            raise ValueError(msg)
        node = cls(parent=parent, tag=tag)
        parent.children.append(node)
        return node

    @property
    def is_root(self):
        return self.parent is None

    @property
    def is_text(self):
        return self.text is not None

    @property
    def is_void(self):
        return self.tag is not None and self.tag.is_void

    @property
    def tag_name(self):
        if self.tag is not None:
            return self.tag.name
        if self.text is not None:
            return TEXT_NAME
        return ROOT_NAME

    @property
    def attributes(self):
        if self.tag is None:
            return {}
        return self.tag.attributes

    @property
    def text_content(self):
        """All descendant text in document order."""
        if self.text is not None:
            return self.text.text
        return "".join(node.text.text for node in self.iter_descendants() if node.text is not None)

    def iter_descendants(self):
        """Yield descendants depth-first, parents before children."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def find_first(self, tag_name):
        """First descendant element named ``tag_name``, or None."""
        for node in self.iter_descendants():
            if node.tag is not None and node.tag.name == tag_name:
                return node
        return None

    def find_all(self, tag_name):
        return [node for node in self.iter_descendants() if node.tag is not None and node.tag.name == tag_name]

    def to_test_format(self, indent=0):
        return to_test_format(self, indent)

    def __repr__(self):
        if self.text is not None:
            return f"Node(#text='{self.text.text[:30]}')"
        if self.tag is None:
            return f"Node(#root, children={len(self.children)})"
        return f"Node(<{self.tag.name}>, children={len(self.children)})"


def find_ancestor_by_tag_name(node, name):
    """Find where the cursor lands when ``</name>`` closes from ``node``.

    Walks from ``node`` up to (not including) the root looking for the nearest
    element named ``name`` (case-insensitive) and returns that element's
    parent, i.e. the element is closed together with everything opened inside
    it. When no element matches, ``node`` itself is returned and the end tag
    has no effect. Never fails; bounded by tree depth.
    """
    name = name.lower()
    current = node
    while current is not None and current.parent is not None:
        if current.tag is not None and current.tag.name.lower() == name:
            return current.parent
        current = current.parent
    return node

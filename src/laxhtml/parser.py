"""LaxHTML parser entry points."""

from .serialize import to_html, to_test_format
from .treebuilder import TreeBuilder


class ParserOpts:
    __slots__ = ("collect_errors", "debug")

    def __init__(self, collect_errors=False, debug=False):
        self.collect_errors = bool(collect_errors)
        self.debug = bool(debug)


class LaxHTML:
    """Parse ``html`` eagerly into a tree rooted at ``root``.

    Malformed markup never raises; with ``collect_errors=True`` each recovery
    the builder applied is recorded in ``errors`` as a ParseError.
    """

    __slots__ = ("errors", "opts", "root", "source", "tree_builder")

    def __init__(self, html, *, collect_errors=False, debug=False, opts=None):
        if html is None:
            html = ""
        if not isinstance(html, str):
            msg = f"LaxHTML expects a decoded str, got {type(html).__name__}"
            raise TypeError(msg)
        self.source = html
        self.opts = opts or ParserOpts(collect_errors=collect_errors, debug=debug)
        self.tree_builder = TreeBuilder(
            html,
            collect_errors=self.opts.collect_errors,
            debug=self.opts.debug,
        )
        self.tree_builder.run()
        self.root = self.tree_builder.finish()
        self.errors = self.tree_builder.errors

    @property
    def text(self):
        return self.root.text_content

    def to_test_format(self):
        return to_test_format(self.root)

    def to_html(self):
        return to_html(self.root)


def parse_document(source, *, collect_errors=False, debug=False):
    """Parse ``source`` and return the root Node. Defined for every string."""
    return LaxHTML(source, collect_errors=collect_errors, debug=debug).root

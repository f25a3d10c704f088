from .constants import VOID_ELEMENTS, is_void_tag
from .entities import decode_entities
from .node import Node, find_ancestor_by_tag_name
from .parser import LaxHTML, ParserOpts, parse_document
from .serialize import to_html, to_test_format
from .span import TextSpan
from .tokens import HtmlTag, ParseError

__all__ = [
    "VOID_ELEMENTS",
    "HtmlTag",
    "LaxHTML",
    "Node",
    "ParseError",
    "ParserOpts",
    "TextSpan",
    "decode_entities",
    "find_ancestor_by_tag_name",
    "is_void_tag",
    "parse_document",
    "to_html",
    "to_test_format",
]

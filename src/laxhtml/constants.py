"""Markup constants for the lax scanner.

Element names are kept in lists for stable iteration order, with frozenset
companions for the lookups done on the hot path.

Usage:
    from laxhtml.constants import VOID_ELEMENTS, is_void_tag

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
"""

# Elements that never take children. Includes the legacy names (basefont,
# frame, isindex, ...) still found in real-world documents.
VOID_ELEMENTS = [
    "area",
    "base",
    "basefont",
    "bgsound",
    "br",
    "col",
    "embed",
    "frame",
    "hr",
    "img",
    "input",
    "isindex",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
]

_VOID_ELEMENT_SET = frozenset(VOID_ELEMENTS)

# Elements whose content is captured verbatim up to the literal closing tag.
RAWTEXT_ELEMENTS = [
    "style",
]

TAG_OPEN = "<"
TAG_CLOSE = ">"
COMMENT_START = "<!--"
COMMENT_END = "-->"
DECLARATION_START = "<!"

# Forward step past "<" when a comment or declaration never terminates, or
# when a tag has no usable name.
RECOVERY_SKIP = 2


def is_void_tag(name):
    """Return True if ``name`` (already lowercased) can never have children."""
    return name in _VOID_ELEMENT_SET

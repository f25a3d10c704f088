"""Tag scanning over the raw source string.

Everything here works by index into the source. Nothing raises on malformed
markup: the scanner reports "no terminator" with ``None`` and leaves the
recovery decision to the tree builder.
"""

import re

from .constants import COMMENT_END, COMMENT_START, DECLARATION_START, TAG_CLOSE
from .entities import decode_entities
from .tokens import ScannedTag

_QUOTES = "\"'"
_RAWTEXT_END_PATTERNS = {}


def _rawtext_end_pattern(tag_name):
    pattern = _RAWTEXT_END_PATTERNS.get(tag_name)
    if pattern is None:
        pattern = re.compile(re.escape(f"</{tag_name}>"), re.IGNORECASE)
        _RAWTEXT_END_PATTERNS[tag_name] = pattern
    return pattern


def is_comment_start(source, index):
    return source.startswith(COMMENT_START, index)


def is_declaration_start(source, index):
    return source.startswith(DECLARATION_START, index)


def find_comment_end(source, index):
    """Index just past the ``-->`` closing the comment at ``index``, or None."""
    close = source.find(COMMENT_END, index + len(DECLARATION_START))
    if close < 0:
        return None
    return close + len(COMMENT_END)


def find_declaration_end(source, index):
    """Index just past the ``>`` closing the declaration at ``index``, or None."""
    close = source.find(TAG_CLOSE, index + len(DECLARATION_START))
    if close < 0:
        return None
    return close + 1


def find_rawtext_end(source, start, tag_name):
    """Index of the first case-insensitive ``</tag_name>`` at or after ``start``."""
    match = _rawtext_end_pattern(tag_name).search(source, start)
    if match is None:
        return None
    return match.start()


def scan_tag(source, index):
    """Scan the tag whose ``<`` sits at ``index``.

    Returns a ScannedTag, or None when no ``>`` follows. The interior is the
    text between ``<`` and ``>`` minus one trailing ``/``; a leading ``/`` marks
    a closing tag, which never carries attributes.
    """
    end = source.find(TAG_CLOSE, index + 1)
    if end < 0:
        return None

    start = index + 1
    stop = end
    is_closing = start < stop and source[start] == "/"
    if is_closing:
        start += 1
    self_closing = stop > start and source[stop - 1] == "/"
    if self_closing:
        stop -= 1

    name_end = start
    while name_end < stop and not source[name_end].isspace():
        name_end += 1
    name = source[start:name_end].lower()

    attributes = None
    if not is_closing and name_end < stop:
        attributes = extract_attributes(source, name_end, stop)
    return ScannedTag(is_closing, name, attributes, end, self_closing)


def extract_attributes(source, start, stop):
    """Extract ``key=value`` pairs from ``source[start:stop]``.

    Keys are lowercased and later duplicates win. Values may be single-quoted,
    double-quoted or bare; a key with no value maps to ``""``. Returns None
    when no pair was found.
    """
    attributes = None
    index = start
    while index < stop:
        while index < stop and source[index].isspace():
            index += 1
        if index >= stop:
            break

        key_end = index
        while key_end < stop and not source[key_end].isspace() and source[key_end] != "=":
            key_end += 1
        key = source[index:key_end]

        index = key_end
        while index < stop and (source[index].isspace() or source[index] == "="):
            index += 1

        value = ""
        value_end = index
        quote = None
        if index < stop:
            if source[index] in _QUOTES:
                quote = source[index]
                index += 1
                value_end = source.find(quote, index, stop)
                if value_end < 0:
                    value_end = stop
            else:
                while value_end < stop and not source[value_end].isspace():
                    value_end += 1
            value = decode_entities(source[index:value_end])

        if key:
            if attributes is None:
                attributes = {}
            attributes[key.lower()] = value

        index = value_end + 1 if quote else value_end
    return attributes

"""Single-pass tree construction.

The builder keeps one cursor into the tree under construction. Text and
elements are appended under the cursor; opening a non-void element moves the
cursor down to it, and an end tag moves it back up by name. There is no stack
of open elements: the parent links of the tree serve as one.

Every malformed construct has a fixed recovery and parsing never raises:

- an unterminated comment or declaration skips two characters and scanning
  carries on from there;
- a tag without a usable name creates nothing;
- a tag without a terminating ``>``, or a raw-text element without its closing
  tag, ends the scan and the unscanned remainder is dropped;
- an end tag that matches nothing open is ignored.

Text left over after the last construct always goes to the root, whichever
element the cursor is in at that point.
"""

from .constants import RAWTEXT_ELEMENTS, RECOVERY_SKIP, TAG_OPEN, is_void_tag
from .node import Node, find_ancestor_by_tag_name
from .span import TextSpan
from .tokenizer import (
    find_comment_end,
    find_declaration_end,
    find_rawtext_end,
    is_comment_start,
    is_declaration_start,
    scan_tag,
)
from .tokens import HtmlTag, ParseError


class TreeBuilder:
    __slots__ = (
        "collect_errors",
        "cursor",
        "env_debug",
        "errors",
        "position",
        "root",
        "source",
    )

    def __init__(self, source, collect_errors=False, debug=False):
        self.source = source
        self.collect_errors = bool(collect_errors)
        self.env_debug = bool(debug)
        self.errors = []
        self.root = Node.create_root()
        self.cursor = self.root
        # Index just past the last consumed construct; None once the scan is abandoned
        self.position = 0

    def debug(self, message, indent=4):
        if self.env_debug:
            print(f"{' ' * indent}TreeBuilder: {message}")

    def run(self):
        source = self.source
        while self.position is not None:
            tag_index = source.find(TAG_OPEN, self.position)
            if tag_index < 0:
                break
            self.append_text(self.cursor, self.position, tag_index)

            if is_comment_start(source, tag_index):
                self.position = self.skip_markup(find_comment_end(source, tag_index), tag_index, "eof-in-comment")
            elif is_declaration_start(source, tag_index):
                self.position = self.skip_markup(
                    find_declaration_end(source, tag_index), tag_index, "eof-in-declaration"
                )
            else:
                self.position = self.process_tag(tag_index)

        self.append_tail()

    def finish(self):
        return self.root

    def append_text(self, parent, start, stop):
        """Add ``source[start:stop]`` under ``parent``, whitespace-only runs included."""
        if stop <= start:
            return None
        self.debug(f"text [{start}:{stop}] under {parent!r}")
        return Node.create_text_child(parent, TextSpan(self.source, start, stop - start))

    def append_tail(self):
        if self.position is None or self.position >= len(self.source):
            return
        tail = TextSpan(self.source, self.position)
        if tail.is_empty_or_whitespace():
            return
        self.debug(f"trailing text [{tail.start}:{tail.end}] under root")
        Node.create_text_child(self.root, tail)

    def skip_markup(self, end, tag_index, error_code):
        if end is None:
            self.parse_error(error_code, tag_index)
            return tag_index + RECOVERY_SKIP
        self.debug(f"skipped markup [{tag_index}:{end}]")
        return end

    def process_tag(self, tag_index):
        """Apply the tag at ``tag_index``; return where scanning resumes (None to stop)."""
        scanned = scan_tag(self.source, tag_index)
        if scanned is None:
            self.parse_error("eof-in-tag", tag_index)
            self.debug(f"no '>' after {tag_index}, abandoning the rest of the document")
            return None

        if not scanned.name:
            self.parse_error("invalid-tag-name", tag_index)
            if scanned.is_closing:
                return scanned.end + 1
            return tag_index + RECOVERY_SKIP

        if scanned.is_closing:
            self.close_element(scanned.name, tag_index)
            return scanned.end + 1

        element = self.open_element(scanned)
        if element.tag.name in RAWTEXT_ELEMENTS and not element.is_void:
            return self.capture_rawtext(element, scanned.end + 1, tag_index)
        return scanned.end + 1

    def open_element(self, scanned):
        is_void = is_void_tag(scanned.name) or scanned.self_closing
        tag = HtmlTag(scanned.name, is_void, scanned.attributes)
        element = Node.create_element_child(self.cursor, tag)
        if is_void:
            self.debug(f"void {tag!r} under {self.cursor!r}")
        else:
            self.debug(f"open {tag!r} under {self.cursor!r}")
            self.cursor = element
        return element

    def close_element(self, name, tag_index):
        if is_void_tag(name):
            self.parse_error("end-tag-for-void-element", tag_index)
            return
        if self.cursor.parent is None:
            self.parse_error("end-tag-at-root", tag_index)
            return
        target = find_ancestor_by_tag_name(self.cursor, name)
        if target is self.cursor:
            self.parse_error("unexpected-end-tag", tag_index)
            return
        self.debug(f"close </{name}>: {self.cursor!r} -> {target!r}")
        self.cursor = target

    def capture_rawtext(self, element, start, tag_index):
        """Take everything up to ``</name>`` as a single text child of ``element``.

        Scanning resumes at the closing tag itself, which then closes the
        element like any other end tag.
        """
        close = find_rawtext_end(self.source, start, element.tag.name)
        if close is None:
            self.parse_error("eof-in-rawtext", tag_index)
            self.debug(f"no </{element.tag.name}> after {start}, abandoning the rest of the document")
            return None
        self.append_text(element, start, close)
        return close

    def parse_error(self, code, offset):
        self.debug(f"parse error {code} at {offset}")
        if not self.collect_errors:
            return
        line = self.source.count("\n", 0, offset) + 1
        column = offset - self.source.rfind("\n", 0, offset)
        self.errors.append(ParseError(code, line=line, column=column))

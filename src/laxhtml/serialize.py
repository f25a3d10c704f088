"""Serialization helpers for LaxHTML trees.

Unclosed tags nest, so trees from sloppy markup can be thousands of levels
deep. Both serializers walk with an explicit stack rather than recursing.
"""


def to_test_format(node, indent=0):
    """Dump ``node`` in the html5lib test format ('| ' prefixed, indented)."""
    if node.is_root:
        stack = [(child, indent) for child in reversed(node.children)]
    else:
        stack = [(node, indent)]

    lines = []
    while stack:
        current, depth = stack.pop()
        padding = " " * depth
        if current.is_text:
            lines.append(f'| {padding}"{current.text.text}"')
            continue

        lines.append(f"| {padding}<{current.tag.name}>")
        # Attributes on their own lines, sorted for deterministic output
        for key, value in sorted(current.tag.attributes.items()):
            lines.append(f'| {padding}  {key}="{value}"')
        stack.extend((child, depth + 2) for child in reversed(current.children))
    return "\n".join(lines)


def _escape_attribute(value):
    return value.replace("&", "&amp;").replace('"', "&quot;")


def _start_tag(tag):
    attr_str = ""
    if tag.attributes:
        attr_parts = []
        for key, value in tag.attributes.items():
            if value == "":
                attr_parts.append(key)
            else:
                attr_parts.append(f'{key}="{_escape_attribute(value)}"')
        attr_str = " " + " ".join(attr_parts)
    return f"<{tag.name}{attr_str}>"


def to_html(node):
    """Serialize ``node`` back to markup.

    Text is emitted verbatim (it was never decoded), void elements get no end
    tag, and every other element is closed explicitly.
    """
    parts = []
    # Pending end tags sit on the stack as plain strings
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, str):
            parts.append(current)
            continue
        if current.is_text:
            parts.append(current.text.text)
            continue
        if current.is_root:
            stack.extend(reversed(current.children))
            continue

        parts.append(_start_tag(current.tag))
        if current.tag.is_void:
            continue
        stack.append(f"</{current.tag.name}>")
        stack.extend(reversed(current.children))
    return "".join(parts)

from types import MappingProxyType

_EMPTY_ATTRIBUTES = MappingProxyType({})


class HtmlTag:
    """Immutable descriptor of an opening tag: name, void flag and attributes."""

    __slots__ = ("_attributes", "_is_void", "_name")

    def __init__(self, name, is_void=False, attributes=None):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_is_void", bool(is_void))
        if attributes:
            object.__setattr__(self, "_attributes", MappingProxyType(dict(attributes)))
        else:
            object.__setattr__(self, "_attributes", _EMPTY_ATTRIBUTES)

    def __setattr__(self, name, value):
        msg = "HtmlTag is immutable"
        raise AttributeError(msg)

    @property
    def name(self):
        return self._name

    @property
    def is_void(self):
        return self._is_void

    @property
    def attributes(self):
        return self._attributes

    def has_attribute(self, key):
        return key.lower() in self._attributes

    def get_attribute(self, key, default=""):
        return self._attributes.get(key.lower(), default)

    def __repr__(self):
        if self._attributes:
            parts = [f"{key}={value!r}" for key, value in self._attributes.items()]
            attrs = " " + " ".join(parts)
        else:
            attrs = ""
        closing = " /" if self._is_void else ""
        return f"<{self._name}{attrs}{closing}>"


class ScannedTag:
    """What the tag scanner found between ``<`` and the terminating ``>``.

    ``end`` is the index of the terminating ``>``; ``self_closing`` is set when
    the raw tag ends with ``/>``.
    """

    __slots__ = ("attributes", "end", "is_closing", "name", "self_closing")

    def __init__(self, is_closing, name, attributes, end, self_closing=False):
        self.is_closing = is_closing
        self.name = name
        self.attributes = attributes
        self.end = end
        self.self_closing = bool(self_closing)

    def __repr__(self):
        kind_str = "end" if self.is_closing else "start"
        closing = " /" if self.self_closing else ""
        return f"<{kind_str}:{self.name}{closing} {self.attributes or {}}>"


class ParseError:
    """A recovered markup problem with location information."""

    __slots__ = ("code", "column", "line", "message")

    def __init__(self, code, line=None, column=None, message=None):
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code

    def __repr__(self):
        if self.line is not None and self.column is not None:
            return f"ParseError({self.code!r}, line={self.line}, column={self.column})"
        return f"ParseError({self.code!r})"

    def __str__(self):
        if self.line is not None and self.column is not None:
            if self.message != self.code:
                return f"({self.line},{self.column}): {self.code} - {self.message}"
            return f"({self.line},{self.column}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code and self.line == other.line and self.column == other.column

    __hash__ = None  # Unhashable since we define __eq__

class TextSpan:
    """A (start, length) view into the source string.

    Text nodes keep spans rather than copied substrings; the substring is only
    built when ``text`` (or ``str()``) is asked for.
    """

    __slots__ = ("_length", "_source", "_start")

    def __init__(self, source, start=0, length=None):
        if length is None:
            length = len(source) - start
        if start < 0 or length < 0 or start + length > len(source):
            msg = f"Span ({start}, {length}) does not fit a source of length {len(source)}"
            raise ValueError(msg)
        self._source = source
        self._start = start
        self._length = length

    @property
    def source(self):
        return self._source

    @property
    def start(self):
        return self._start

    @property
    def length(self):
        return self._length

    @property
    def end(self):
        return self._start + self._length

    @property
    def text(self):
        return self._source[self._start : self._start + self._length]

    def is_empty(self):
        return self._length == 0

    def is_empty_or_whitespace(self):
        """True if the span holds nothing but whitespace. Scans in place."""
        source = self._source
        for index in range(self._start, self._start + self._length):
            if not source[index].isspace():
                return False
        return True

    def substring(self, start, length=None):
        return self.cut(start, length).text

    def cut(self, start, length=None):
        """Return a narrower span; ``start`` is relative to this span."""
        if length is None:
            length = self._length - start
        if start < 0 or length < 0 or start + length > self._length:
            msg = f"Sub-span ({start}, {length}) is outside a span of length {self._length}"
            raise ValueError(msg)
        return TextSpan(self._source, self._start + start, length)

    def __len__(self):
        return self._length

    def __getitem__(self, index):
        if index < 0:
            index += self._length
        if index < 0 or index >= self._length:
            raise IndexError("TextSpan index out of range")
        return self._source[self._start + index]

    def __str__(self):
        return self.text

    def __eq__(self, other):
        if isinstance(other, TextSpan):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self):
        return hash(self.text)

    def __repr__(self):
        preview = self.text[:30]
        return f"TextSpan({self._start}, {self._length}, {preview!r})"

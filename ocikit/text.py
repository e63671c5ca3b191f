"""String slices and owned strings."""

from __future__ import annotations

_SPACE = " \t\n\r"


class Str:
    """A read-only window of ``length`` characters into ``data`` from ``start``."""

    __slots__ = ("_data", "_start", "_length")

    def __init__(self, data, start=0, length=None):
        if not 0 <= start <= len(data):
            raise ValueError(f"start {start} outside of data of length {len(data)}")
        if length is None:
            length = len(data) - start
        if length < 0 or start + length > len(data):
            raise ValueError(f"slice of length {length} at {start} exceeds the data")
        self._data = data
        self._start = start
        self._length = length

    @staticmethod
    def of(text):
        """Return a slice covering the whole of ``text``."""
        return Str(text)

    def __len__(self):
        return self._length

    def __str__(self):
        return self._data[self._start:self._start + self._length]

    def __repr__(self):
        return f"Str({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, Str):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self):
        return hash(str(self))

    def split(self, mid):
        """Return the slices before and from position ``mid``."""
        if not 0 <= mid < self._length:
            raise ValueError(f"split point {mid} outside of slice of length {self._length}")
        head = Str(self._data, self._start, mid)
        tail = Str(self._data, self._start + mid, self._length - mid)
        return head, tail

    def trim_start(self):
        """Return the slice without leading spaces, tabs and line breaks."""
        text = str(self)
        kept = len(text.lstrip(_SPACE))
        return Str(self._data, self._start + len(text) - kept, kept)

    def trim_end(self):
        """Return the slice without trailing spaces, tabs and line breaks."""
        kept = len(str(self).rstrip(_SPACE))
        return Str(self._data, self._start, kept)

    def trim(self):
        """Return the slice without whitespace at either end."""
        return self.trim_end().trim_start()

    def to_string(self):
        """Copy the slice into an owned ``String``."""
        return String(str(self))


class String:
    """An owned, appendable string."""

    def __init__(self, text=""):
        self._text = str(text)

    def __len__(self):
        return len(self._text)

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"String({self._text!r})"

    def as_str(self):
        """Return a slice covering the current contents."""
        return Str(self._text)

    def append(self, other):
        """Add the text of ``other`` to the end."""
        self._text += str(other)


def concat(a, b):
    """Return a new ``String`` holding ``a`` followed by ``b``."""
    return String(str(a) + str(b))
"""Line tokenizer for MatrixMarket text."""

from typing import Tuple

__all__ = ['Tokens', 'split_line', 'strip_newline']


def strip_newline(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` terminator."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def split_line(line: str, sep: str = ' ') -> Tuple[str, ...]:
    """Split ``line`` on ``sep`` keeping empty fields.

    Repeated separators yield empty tokens. A single trailing separator does
    not start a new field, and the empty line has no fields:

        >>> split_line('1 2 3.0')
        ('1', '2', '3.0')
        >>> split_line('1  2')
        ('1', '', '2')
        >>> split_line('1 2 ')
        ('1', '2')
        >>> split_line('')
        ()
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if not line:
        return ()
    fields = line.split(sep)
    if fields[-1] == '':
        fields.pop()
    return tuple(fields)


class Tokens:
    """Ordered tokens of one line with a private read cursor.

    The token tuple never changes; ``pop`` only advances this instance's
    cursor, so each caller owns its own parsing state.

    Example:
        >>> toks = Tokens('3 3 2')
        >>> toks.count()
        3
        >>> toks.pop(), toks.peek()
        ('3', '3')
    """

    __slots__ = ('_items', '_pos')

    def __init__(self, line: str, sep: str = ' '):
        self._items = split_line(line, sep)
        self._pos = 0

    @property
    def items(self) -> Tuple[str, ...]:
        """All tokens of the line, including already popped ones."""
        return self._items

    def count(self) -> int:
        """Number of tokens not yet popped."""
        return len(self._items) - self._pos

    def __len__(self) -> int:
        return self.count()

    def peek(self) -> str:
        if self._pos >= len(self._items):
            raise IndexError("peek from an empty token list")
        return self._items[self._pos]

    def pop(self) -> str:
        if self._pos >= len(self._items):
            raise IndexError("pop from an empty token list")
        token = self._items[self._pos]
        self._pos += 1
        return token

    def remaining(self) -> Tuple[str, ...]:
        return self._items[self._pos:]

    def __repr__(self) -> str:
        return f"Tokens({list(self.remaining())!r})"

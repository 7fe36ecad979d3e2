"""Character cursor used to scan lexemes."""

from .errors import DelimiterNotFound, EndOfInput


class Cursor:
    """Sequential cursor over the code points of a string.

    The position is always in ``[0, len(text)]``; a position equal to the
    length means the cursor is exhausted.
    """

    def __init__(self, text: str) -> None:
        self._chars = tuple(text)
        self._n = len(self._chars)
        self._i = 0

    @property
    def position(self) -> int:
        return self._i

    def has_next(self) -> bool:
        return self._i < self._n

    def peek(self) -> str:
        if not self.has_next():
            raise EndOfInput()
        return self._chars[self._i]

    def next(self) -> str:
        if not self.has_next():
            raise EndOfInput()
        char = self._chars[self._i]
        self._i += 1
        return char

    def jump_to(self, target: str) -> None:
        """Move one past the next occurrence of ``target``.

        The character under the cursor is always stepped over, even if it is
        ``target`` itself.
        """
        if not self.has_next():
            raise EndOfInput()

        self._i += 1
        while self.has_next() and self._chars[self._i] != target:
            self._i += 1

        if self._i == self._n:
            raise DelimiterNotFound(target)

        self._i += 1

    def skip_until(self, target: str) -> None:
        """Move onto the next occurrence of ``target`` without consuming it."""
        self.jump_to(target)
        self._i -= 1

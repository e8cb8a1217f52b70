from bisect import bisect_right
from dataclasses import dataclass, field
from typing import NamedTuple


def is_name_char(c: str) -> bool:
    # "".isalnum() is False, so end of input never counts as a name character
    return c.isalnum()


class QuotedValue(NamedTuple):
    value: str
    terminated: bool


@dataclass
class Scanner:
    """
    A read cursor over an immutable string.

    The cursor only ever moves forward and never past ``len(text)``; every
    primitive below is safe to call at end of input.
    """
    text: str = ""
    pos: int = 0

    # offsets at which each line begins, built on the first location() call
    _line_starts: list[int] | None = field(default=None, init=False, repr=False, compare=False)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        if index >= len(self.text):
            return ""
        return self.text[index]

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def skip_past(self, char: str) -> None:
        index = self.text.find(char, self.pos)
        self.pos = len(self.text) if index == -1 else index + 1

    def read_name(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and is_name_char(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def read_quoted_value(self) -> QuotedValue:
        """
        Read a double-quoted value starting at the cursor.

        If the cursor is not on a quote nothing is consumed. A value missing
        its closing quote runs to the end of input and comes back with
        ``terminated`` set to False.
        """
        if self.peek() != '"':
            return QuotedValue("", False)
        self.pos += 1
        start = self.pos
        end = self.text.find('"', start)
        if end == -1:
            self.pos = len(self.text)
            return QuotedValue(self.text[start:], False)
        self.pos = end + 1
        return QuotedValue(self.text[start:end], True)

    def read_text(self) -> str:
        start = self.pos
        end = self.text.find("<", start)
        self.pos = len(self.text) if end == -1 else end
        return self.text[start:self.pos]

    def location(self, pos: int | None = None) -> tuple[int, int]:
        if pos is None:
            pos = self.pos
        if self._line_starts is None:
            self._line_starts = [0]
            self._line_starts.extend(
                index + 1 for index, c in enumerate(self.text) if c == "\n"
            )
        line = bisect_right(self._line_starts, pos)
        column = pos - self._line_starts[line - 1] + 1
        return (line, column)

from dataclasses import dataclass, field


@dataclass
class ParseError:
    """A recoverable problem found while scanning, with its 1-based location."""

    code: str
    line: int | None = None
    column: int | None = None
    message: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.message is None:
            self.message = self.code

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            if self.message != self.code:
                return f"({self.line},{self.column}): {self.code} - {self.message}"
            return f"({self.line},{self.column}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code


class ParseFailure(Exception):
    """Base class for errors that abort a parse instead of degrading the tree."""

    def __init__(self, error: ParseError):
        super().__init__(str(error))
        self.error = error


class StrictModeError(ParseFailure):
    """Raised on the first parse error when the parser runs in strict mode."""


class NestingTooDeepError(ParseFailure):
    """Raised when the open-element stack grows past the configured limit."""

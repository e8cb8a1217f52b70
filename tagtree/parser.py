import logging
from dataclasses import dataclass, field

from tagtree.constants import DEFAULT_MAX_DEPTH, ROOT_TAG
from tagtree.errors import NestingTooDeepError, ParseError, StrictModeError
from tagtree.node import Element, Text
from tagtree.scanner import Scanner, is_name_char

logger = logging.getLogger(__name__)


@dataclass
class MarkupParser:
    """
    Single-pass parser turning a markup string into an ``Element`` tree.

    Open elements live on ``unfinished`` rather than on the Python call stack,
    so input nesting depth is bounded by ``max_depth`` and never by the
    interpreter's recursion limit. Malformed input yields a degraded tree and
    a list of ``errors``; in ``strict`` mode the first error is raised instead.

    An end tag with no open element is reported and skipped; parsing carries
    on with the rest of the input rather than stopping at it.
    """
    body: str = ""
    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    unfinished: list[Element] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)
    scanner: Scanner = field(init=False)

    def __post_init__(self) -> None:
        self.scanner = Scanner(text=self.body)

    def parse(self) -> Element:
        self.scanner = Scanner(text=self.body)
        self.unfinished = [Element(tag=ROOT_TAG)]
        self.errors = []

        self.parse_node_sequence()

        return self.finish()

    def parse_node_sequence(self) -> None:
        scanner = self.scanner
        while not scanner.at_end():
            self.skip_whitespace()
            if scanner.at_end():
                break

            if scanner.peek() == "<":
                if scanner.peek(1) == "/":
                    self.parse_end_tag()
                elif is_name_char(scanner.peek(1)):
                    self.parse_element()
                else:
                    self.parse_stray_open()
            else:
                text = self.parse_text()
                if text is not None:
                    self.unfinished[-1].children.append(text)

    def parse_element(self) -> Element:
        scanner = self.scanner
        start = scanner.pos
        scanner.advance()  # '<'
        tag = self.parse_tag_name()
        attributes = self.parse_attributes()

        element = Element(tag=tag, attributes=attributes)
        self.unfinished[-1].children.append(element)

        if scanner.peek() == ">":
            scanner.advance()
            self.open_element(element, start)
        else:
            self.report("eof-in-tag", f"end of input inside <{tag}> tag", start)
        return element

    def parse_end_tag(self) -> None:
        scanner = self.scanner
        start = scanner.pos
        scanner.advance(2)  # '</'
        tag = self.parse_tag_name()
        scanner.skip_whitespace()
        if scanner.peek() == ">":
            scanner.advance()
        else:
            self.report("malformed-end-tag", f"</{tag} is not closed by '>'", start)
            scanner.skip_past(">")
        self.close_element(tag, start)

    def parse_stray_open(self) -> None:
        # '<' that starts neither a tag nor an end tag is kept as text
        scanner = self.scanner
        start = scanner.pos
        self.report(
            "invalid-first-character-of-tag-name",
            f"unexpected {scanner.peek(1)!r} after '<'",
            start,
        )
        scanner.advance()
        scanner.read_text()
        content = scanner.text[start:scanner.pos].strip()
        self.unfinished[-1].children.append(Text(text=content))

    def parse_text(self) -> Text | None:
        content = self.scanner.read_text().strip()
        if not content:
            return None
        return Text(text=content)

    def parse_tag_name(self) -> str:
        return self.scanner.read_name()

    def parse_attributes(self) -> dict[str, str]:
        scanner = self.scanner
        attributes: dict[str, str] = {}
        in_stray_run = False

        while not scanner.at_end() and scanner.peek() != ">":
            self.skip_whitespace()
            if scanner.at_end() or scanner.peek() == ">":
                break

            name_start = scanner.pos
            name = self.parse_tag_name()
            if not name:
                # step over the offending character so the loop always advances;
                # a run of them up to the next name is reported once
                if not in_stray_run:
                    self.report(
                        "unexpected-character-in-attributes",
                        f"unexpected {scanner.peek()!r} in attribute list",
                        name_start,
                    )
                    in_stray_run = True
                scanner.advance()
                continue
            in_stray_run = False

            value = ""
            if scanner.peek() == "=":
                scanner.advance()
                value = self.parse_attribute_value()

            if name in attributes:
                self.report("duplicate-attribute", f"attribute {name!r} repeated", name_start)
            attributes[name] = value

        return attributes

    def parse_attribute_value(self) -> str:
        scanner = self.scanner
        start = scanner.pos
        if scanner.peek() != '"':
            self.report("missing-attribute-value-quote", "attribute value must be double-quoted", start)
            return ""

        value, terminated = scanner.read_quoted_value()
        if not terminated:
            self.report("unterminated-attribute-value", "attribute value has no closing quote", start)
        return value

    def skip_whitespace(self) -> None:
        self.scanner.skip_whitespace()

    def open_element(self, element: Element, pos: int) -> None:
        # the root does not count towards the depth
        if len(self.unfinished) > self.max_depth:
            line, column = self.scanner.location(pos)
            raise NestingTooDeepError(
                ParseError(
                    "nesting-too-deep",
                    line=line,
                    column=column,
                    message=f"more than {self.max_depth} nested elements",
                )
            )
        self.unfinished.append(element)

    def close_element(self, tag: str, pos: int) -> None:
        if len(self.unfinished) == 1:
            self.report("unexpected-end-tag", f"</{tag}> with no open element", pos)
            return

        node = self.unfinished.pop()
        if node.tag != tag:
            self.report("end-tag-mismatch", f"</{tag}> closes <{node.tag}>", pos)

    def finish(self) -> Element:
        if len(self.unfinished) > 1:
            open_tags = ", ".join(node.tag for node in self.unfinished[1:])
            self.report("eof-in-element", f"unclosed at end of input: {open_tags}", len(self.body))

        root = self.unfinished[0]
        self.unfinished = []
        logger.debug(
            "parsed %d characters into %d top-level nodes (%d errors)",
            len(self.body),
            len(root.children),
            len(self.errors),
        )
        return root

    def report(self, code: str, message: str, pos: int) -> None:
        line, column = self.scanner.location(pos)
        error = ParseError(code, line=line, column=column, message=message)
        logger.debug("parse error %s", error)
        self.errors.append(error)
        if self.strict:
            raise StrictModeError(error)


def parse(text: str, *, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> Element:
    return MarkupParser(body=text, strict=strict, max_depth=max_depth).parse()

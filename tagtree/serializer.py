import sys
from collections.abc import Iterator
from typing import TextIO

from tagtree.constants import INDENT
from tagtree.node import Element, Node, Text


def _open_tag(element: Element) -> str:
    if not element.attributes:
        return f"<{element.tag}>"
    return f"<{element.tag} {element.attribute_str}>"


def iter_lines(node: Node, depth: int = 0) -> Iterator[str]:
    """
    Yield one indented line per opening tag, closing tag and text node.

    The walk keeps its own stack, so arbitrarily deep trees render without
    touching the recursion limit.
    """
    stack: list[tuple[Node, int, bool]] = [(node, depth, False)]
    while stack:
        current, level, closing = stack.pop()
        indentation = INDENT * level

        if isinstance(current, Text):
            # every line of multi-line text gets the same indentation
            for line in current.text.split("\n"):
                yield f"{indentation}{line}"
            continue

        if not isinstance(current, Element):
            continue
        if closing:
            yield f"{indentation}</{current.tag}>"
            continue

        yield f"{indentation}{_open_tag(current)}"
        stack.append((current, level, True))
        for child in reversed(current.children):
            stack.append((child, level + 1, False))


def render(node: Node, depth: int = 0) -> str:
    """Render ``node`` and its subtree, two spaces of indentation per level.

    Attributes are written in insertion order, which is source order for
    parsed trees. Text spanning several lines is indented line by line, so a
    re-parse keeps its words but not its exact inner whitespace.
    """
    return "".join(f"{line}\n" for line in iter_lines(node, depth))


def print_tree(node: Node, depth: int = 0, file: TextIO | None = None) -> None:
    out = file if file is not None else sys.stdout
    out.write(render(node, depth))

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class NodeKind(Enum):
    ELEMENT = 1
    TEXT = 2


@dataclass
class Node:
    kind: ClassVar[NodeKind]


@dataclass
class Element(Node):
    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    tag: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def __repr__(self) -> str:
        if not self.attributes:
            return f"<{self.tag}>"
        return f"<{self.tag} {self.attribute_str}>"

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes.items():
            attrs.append(f'{key}="{value}"')
        return " ".join(attrs)


@dataclass
class Text(Node):
    kind: ClassVar[NodeKind] = NodeKind.TEXT

    text: str = ""

    def __repr__(self) -> str:
        return repr(self.text)

"""Building blocks of an XML Schema specification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Iterable


class NodeType(IntEnum):
    """Kinds of nodes that make up a specification."""

    SEQUENCE = 0
    ELEMENT = 1
    CHOICE = 2
    REG_EXP = 3
    INTERVAL = 4
    ATTRIBUTE = 5
    ENUMERATION = 6


class XsdNode:
    """Common base of all specification nodes.

    Every node has a name, a fixed node type and an optional comment.
    """

    node_type: ClassVar[NodeType]
    name: str
    comment: str = ""


def _bound_to_text(value: Any) -> str:
    """Render an interval bound the way the specification stores it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        # Numeric bounds are whole numbers; fractional parts are dropped.
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    raise TypeError(f"interval bound must be a number or a string, not {type(value).__name__}")


@dataclass(eq=False)
class XsdEnumeration(XsdNode):
    """A simple type restricted to a fixed list of values."""

    node_type: ClassVar[NodeType] = NodeType.ENUMERATION

    name: str
    type: str
    values: list[str] = field(default_factory=list)

    def add(self, value: str) -> None:
        """Append an allowed value."""
        self.values.append(value)

    def __iter__(self):
        return iter(self.values)


@dataclass(eq=False)
class XsdInterval(XsdNode):
    """A simple type restricted to an inclusive numeric range."""

    node_type: ClassVar[NodeType] = NodeType.INTERVAL

    name: str
    type: str
    minimum: str
    maximum: str

    def __post_init__(self) -> None:
        self.minimum = _bound_to_text(self.minimum)
        self.maximum = _bound_to_text(self.maximum)


@dataclass(eq=False)
class XsdRegularExpression(XsdNode):
    """A simple type restricted by a pattern."""

    node_type: ClassVar[NodeType] = NodeType.REG_EXP

    name: str
    type: str
    reg_exp: str


@dataclass(eq=False)
class XsdSequence(XsdNode):
    """A complex type holding an ordered list of children and attributes.

    ``children`` keeps elements, choices, regular expressions and intervals
    in the order they were added; attributes are kept apart.
    """

    node_type: ClassVar[NodeType] = NodeType.SEQUENCE

    name: str = ""
    elements: list[Any] = field(default_factory=list)
    attributes: list[Any] = field(default_factory=list)
    choices: list[Any] = field(default_factory=list)
    reg_exps: list[XsdRegularExpression] = field(default_factory=list)
    intervals: list[XsdInterval] = field(default_factory=list)
    children: list[Any] = field(default_factory=list)

    def add(self, child: Any) -> None:
        """Add an element, attribute, choice, regular expression or interval."""
        kind = getattr(child, "node_type", None)
        if kind == NodeType.ATTRIBUTE:
            self.add_attribute(child)
            return
        targets = {
            NodeType.ELEMENT: self.elements,
            NodeType.CHOICE: self.choices,
            NodeType.REG_EXP: self.reg_exps,
            NodeType.INTERVAL: self.intervals,
        }
        try:
            target = targets[kind]
        except KeyError:
            raise TypeError(f"a sequence cannot hold a node of kind {kind!r}") from None
        self.children.append(child)
        target.append(child)

    def add_attribute(self, attribute: Any) -> None:
        """Add an attribute of the sequence."""
        self.attributes.append(attribute)

    def add_elements(self, elements: Iterable[Any]) -> None:
        """Add several elements in order."""
        for element in elements:
            self.add(element)
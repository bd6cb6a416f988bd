"""Drawable graph nodes for the kinds of types in a specification."""

from __future__ import annotations

from typing import Any, Protocol

from .graph_node import (
    ATTRIBUTE_BGCOLOR,
    ELEMENT_BGCOLOR,
    ENUM_BGCOLOR,
    INTERVAL_BGCOLOR,
    OPTIONAL_COLOR,
    REGEXP_BGCOLOR,
    REQUIRED_COLOR,
    SPECIFICATION_BGCOLOR,
    XsdGraphNode,
)
from .model import XsdEnumeration, XsdInterval, XsdRegularExpression, XsdSequence

_TABLE_ATTRS = 'border="0" cellborder="1" cellspacing="0" cellpadding="0"'


class _NodeLookup(Protocol):
    def find_node(self, name: str) -> XsdGraphNode | None: ...


def _simple_label(bgcolor: str, label: str, specification: str) -> str:
    return (
        " [label=<"
        f'<table bgcolor="{bgcolor}" {_TABLE_ATTRS}>'
        f"<tr><td> {label}</td></tr>"
        f"{specification}"
        "</table>"
        ">];"
    )


def _spec_row(text: str) -> str:
    return f'<tr> <td bgcolor="{SPECIFICATION_BGCOLOR}"> {text} </td> </tr>'


def _plain_row(text: str) -> str:
    return f"<tr> <td> {text} </td> </tr>"


class XsdEnumerationGraphNode(XsdGraphNode):
    """Graph node listing the values of an enumeration."""

    def __init__(self, spec: XsdEnumeration) -> None:
        super().__init__()
        self._spec = spec
        self._specification = "".join(_spec_row(value) for value in spec.values)

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def spec(self) -> XsdEnumeration:
        return self._spec

    def custom_label(self, label: str) -> str:
        return _simple_label(ENUM_BGCOLOR, label, self._specification)

    def content(self) -> str:
        return "".join(_plain_row(value) for value in self._spec.values)


class XsdIntervalGraphNode(XsdGraphNode):
    """Graph node showing the bounds and base type of an interval."""

    def __init__(self, spec: XsdInterval) -> None:
        super().__init__()
        self._spec = spec
        self._specification = (
            _spec_row(f"min:  {spec.minimum}")
            + _spec_row(f"max:  {spec.maximum}")
            + _spec_row(f"type: {spec.type}")
        )

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def spec(self) -> XsdInterval:
        return self._spec

    def custom_label(self, label: str) -> str:
        return _simple_label(INTERVAL_BGCOLOR, label, self._specification)

    def content(self) -> str:
        return (
            _plain_row(f"min:  {self._spec.minimum}")
            + _plain_row(f"max:  {self._spec.maximum}")
            + _plain_row(f"type: {self._spec.type}")
        )


class XsdRegularExpressionGraphNode(XsdGraphNode):
    """Graph node showing the pattern and base type of a regular expression."""

    def __init__(self, spec: XsdRegularExpression) -> None:
        super().__init__()
        self._spec = spec
        self._specification = _spec_row(spec.reg_exp) + _spec_row(f"type: {spec.type}")

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def spec(self) -> XsdRegularExpression:
        return self._spec

    def custom_label(self, label: str) -> str:
        return _simple_label(REGEXP_BGCOLOR, label, self._specification)

    def content(self) -> str:
        return _plain_row(self._spec.reg_exp) + _plain_row(f"type: {self._spec.type}")


class XsdSequenceGraphNode(XsdGraphNode):
    """Graph node drawing a sequence with its attributes.

    Attributes whose type is a named definition are expanded in place with
    the content of that definition's graph node, looked up in ``graph``.
    """

    def __init__(self, graph: _NodeLookup, spec: XsdSequence) -> None:
        super().__init__()
        self._graph = graph
        self._spec = spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def spec(self) -> XsdSequence:
        return self._spec

    def _type_cell(self, attribute: Any, port: int) -> tuple[str, int]:
        if not self.has_definition(attribute.type):
            cell = (
                f'<td port="{port}" bgcolor="{ATTRIBUTE_BGCOLOR}" valign="top">'
                f"{attribute.type}</td>"
            )
            return cell, port + 1
        node = self._graph.find_node(attribute.type)
        if node is None:
            return "", port
        cell = (
            f'<td bgcolor="{ATTRIBUTE_BGCOLOR}" valign="top">'
            f"<table {_TABLE_ATTRS}>{node.content()}</table>"
            "</td>"
        )
        return cell, port

    def custom_label(self, label: str) -> str:
        attributes = self._spec.attributes
        labels: list[str] = []
        optional: list[str] = []
        types: list[str] = []
        port = 1
        for attribute in attributes:
            labels.append(f'<td bgcolor="{ATTRIBUTE_BGCOLOR}">{attribute.name}</td>')
            if attribute.required:
                colour, word = REQUIRED_COLOR, "required"
            else:
                colour, word = OPTIONAL_COLOR, "optional"
            optional.append(
                f'<td bgcolor="{ATTRIBUTE_BGCOLOR}"> <font color="{colour}"> {word} </font> </td>'
            )
            cell, port = self._type_cell(attribute, port)
            types.append(cell)

        parts = [
            " [label=<",
            f"<table {_TABLE_ATTRS}>",
            "<tr><td>",
            '<table border="0" cellborder="1" cellspacing="0">',
            f'<tr><td port="-1" colspan="{max(len(attributes), 1)}" '
            f'bgcolor="{ELEMENT_BGCOLOR}">{label}</td></tr>',
        ]
        for row in ("".join(labels), "".join(optional), "".join(types)):
            if row:
                parts.append(f"<tr>{row}</tr>")
        parts.extend(["</table>", "</td>", "</tr>", "</table>", ">];"])
        return "".join(parts)

    def content(self) -> str:
        return "sequence"
"""Builds the XML Schema grammar document from a specification."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from lxml import etree

from .model import NodeType

XS_NAMESPACE = "http://www.w3.org/2001/XMLSchema"


def _q(tag: str) -> str:
    return f"{{{XS_NAMESPACE}}}{tag}"


def _occurs(node: Any, which: str) -> str | None:
    """The min/max occurrence of ``node`` as text, or None when not given."""
    if getattr(node, f"{which}_given", True) is False:
        return None
    value = getattr(node, which, None)
    if value is None or value == "":
        return None
    return str(value)


class XsdGenerator:
    """The XML Schema document describing a specification.

    Sequences, enumerations, choices, intervals and regular expressions
    become named types; the root sequence becomes the document element.
    """

    def __init__(self, specification: Any) -> None:
        root = specification.root
        if root is None:
            raise ValueError("the specification has no root sequence")
        self.schema = etree.Element(_q("schema"), nsmap={"xs": XS_NAMESPACE})
        self.schema.set("elementFormDefault", "qualified")
        self.document = etree.ElementTree(self.schema)

        for sequence in specification.sequences:
            self._add_sequence(sequence)
        for enumeration in specification.enumerations:
            self._add_enumeration(enumeration)
        for choice in specification.choices:
            self._add_choice(choice)
        for interval in specification.intervals:
            self._add_interval(interval)
        for reg_exp in specification.reg_exps:
            self._add_regular_expression(reg_exp)
        self._add_root(root)

    def _add_sequence(self, seq: Any) -> None:
        parent = etree.SubElement(self.schema, _q("complexType"))
        parent.set("name", seq.name)
        if seq.children:
            sequence = etree.SubElement(parent, _q("sequence"))
            for child in seq.children:
                if child.node_type == NodeType.ELEMENT:
                    self._create_element(etree.SubElement(sequence, _q("element")), child)
                elif child.node_type == NodeType.CHOICE:
                    self._create_choice(etree.SubElement(sequence, _q("choice")), child)
        for attribute in seq.attributes:
            self._create_attribute(etree.SubElement(parent, _q("attribute")), attribute)

    def _create_choice(self, target: etree._Element, choice: Any) -> None:
        maximum = _occurs(choice, "max_occurs")
        if maximum is not None:
            target.set("maxOccurs", maximum)
        minimum = _occurs(choice, "min_occurs")
        if minimum is not None:
            target.set("minOccurs", minimum)
        for element in getattr(choice, "elements", []):
            self._create_element(etree.SubElement(target, _q("element")), element)
        for sequence in getattr(choice, "sequences", []):
            self._create_sequence(etree.SubElement(target, _q("sequence")), sequence)

    def _create_sequence(self, target: etree._Element, seq: Any) -> None:
        for element in seq.elements:
            self._create_element(etree.SubElement(target, _q("element")), element)

    def _create_element(self, target: etree._Element, element: Any) -> None:
        maximum = _occurs(element, "max_occurs")
        if maximum is not None:
            target.set("maxOccurs", maximum)
        minimum = _occurs(element, "min_occurs")
        if minimum is not None:
            target.set("minOccurs", minimum)
        target.set("name", element.name)
        type_name = getattr(element, "type", "")
        if type_name:
            target.set("type", type_name)
        attributes = getattr(element, "attributes", [])
        if attributes:
            complex_type = etree.SubElement(target, _q("complexType"))
            for attribute in attributes:
                self._create_attribute(etree.SubElement(complex_type, _q("attribute")), attribute)

    @staticmethod
    def _create_attribute(target: etree._Element, attribute: Any) -> None:
        target.set("name", attribute.name)
        target.set("type", attribute.type)
        target.set("use", "required" if attribute.required else "optional")

    def _simple_type(self, name: str, base: str) -> etree._Element:
        parent = etree.SubElement(self.schema, _q("simpleType"))
        parent.set("name", name)
        restriction = etree.SubElement(parent, _q("restriction"))
        restriction.set("base", base)
        return restriction

    def _add_enumeration(self, enumeration: Any) -> None:
        restriction = self._simple_type(enumeration.name, enumeration.type)
        for value in enumeration.values:
            etree.SubElement(restriction, _q("enumeration")).set("value", value)

    def _add_choice(self, choice: Any) -> None:
        parent = etree.SubElement(self.schema, _q("complexType"))
        parent.set("name", choice.name)
        target = etree.SubElement(parent, _q("choice"))
        minimum = _occurs(choice, "min_occurs")
        if minimum is not None:
            target.set("minOccurs", minimum)
        maximum = _occurs(choice, "max_occurs")
        if maximum is not None:
            target.set("maxOccurs", maximum)
        for element in getattr(choice, "elements", []):
            self._create_element(etree.SubElement(target, _q("element")), element)
        for sequence in getattr(choice, "sequences", []):
            self._create_sequence(etree.SubElement(target, _q("sequence")), sequence)
        for attribute in getattr(choice, "attributes", []):
            self._create_attribute(etree.SubElement(parent, _q("attribute")), attribute)

    def _add_interval(self, interval: Any) -> None:
        restriction = self._simple_type(interval.name, interval.type)
        etree.SubElement(restriction, _q("minInclusive")).set("value", interval.minimum)
        etree.SubElement(restriction, _q("maxInclusive")).set("value", interval.maximum)

    def _add_regular_expression(self, reg_exp: Any) -> None:
        restriction = self._simple_type(reg_exp.name, reg_exp.type)
        etree.SubElement(restriction, _q("pattern")).set("value", reg_exp.reg_exp)

    def _add_root(self, seq: Any) -> None:
        parent = etree.SubElement(self.schema, _q("element"))
        parent.set("name", seq.name)
        complex_type = etree.SubElement(parent, _q("complexType"))
        if seq.elements:
            sequence = etree.SubElement(complex_type, _q("sequence"))
            for element in seq.elements:
                self._create_element(etree.SubElement(sequence, _q("element")), element)
        for attribute in seq.attributes:
            self._create_attribute(etree.SubElement(complex_type, _q("attribute")), attribute)

    def to_string(self) -> str:
        """The schema as pretty-printed XML text."""
        return etree.tostring(
            self.document,
            pretty_print=True,
            xml_declaration=True,
            encoding="UTF-8",
            standalone=True,
        ).decode("utf-8")

    def __str__(self) -> str:
        return self.to_string()

    def write(self, path: str | Path = "nmode.xsd") -> Path:
        """Write the schema to ``path`` and return that path."""
        target = Path(path)
        target.write_text(self.to_string() + "\n", encoding="utf-8")
        return target
from dataclasses import dataclass
from typing import ClassVar

import pytest

from nmodexsd.model import (
    NodeType,
    XsdEnumeration,
    XsdInterval,
    XsdRegularExpression,
    XsdSequence,
)


@dataclass(eq=False)
class _Element:
    node_type: ClassVar[NodeType] = NodeType.ELEMENT
    name: str


@dataclass(eq=False)
class _Attribute:
    node_type: ClassVar[NodeType] = NodeType.ATTRIBUTE
    name: str


@dataclass(eq=False)
class _Choice:
    node_type: ClassVar[NodeType] = NodeType.CHOICE
    name: str


def test_node_type_values_match_specification():
    assert XsdSequence("s").node_type == 0
    assert XsdRegularExpression("r", "xs:integer", "[0-9]*").node_type == 3
    assert XsdInterval("i", "xs:decimal", 0, 1).node_type == 4
    assert XsdEnumeration("e", "xs:string").node_type == 6
    assert NodeType(1) is NodeType.ELEMENT
    assert NodeType(2) is NodeType.CHOICE
    assert NodeType(5) is NodeType.ATTRIBUTE


def test_enumeration_keeps_values_in_order():
    enum = XsdEnumeration("radOrDeg_definition", "xs:string")
    enum.add("rad")
    enum.add("deg")
    assert enum.values == ["rad", "deg"]
    assert list(enum) == ["rad", "deg"]
    assert enum.node_type is NodeType.ENUMERATION
    assert enum.type == "xs:string"


def test_interval_int_bounds_become_text():
    interval = XsdInterval("unit_interval_definition", "xs:decimal", 0, 1)
    assert interval.minimum == "0"
    assert interval.maximum == "1"
    assert interval.node_type is NodeType.INTERVAL


def test_interval_float_bounds_are_truncated():
    interval = XsdInterval("unit_interval_definition", "xs:decimal", 0.0, 1.0)
    assert (interval.minimum, interval.maximum) == ("0", "1")


def test_interval_text_bounds_are_kept():
    interval = XsdInterval("i", "xs:decimal", "-1.5", "2.5")
    assert (interval.minimum, interval.maximum) == ("-1.5", "2.5")


def test_interval_rejects_other_bounds():
    with pytest.raises(TypeError):
        XsdInterval("i", "xs:decimal", None, 1)


def test_regular_expression_fields():
    regexp = XsdRegularExpression("positive_integer_definition", "xs:integer", "[0-9]*")
    assert regexp.reg_exp == "[0-9]*"
    assert regexp.name == "positive_integer_definition"
    assert regexp.node_type is NodeType.REG_EXP


def test_comment_defaults_empty_and_can_be_set():
    regexp = XsdRegularExpression("r", "xs:integer", "[0-9]*")
    assert regexp.comment == ""
    regexp.comment = "digits only"
    assert regexp.comment == "digits only"


def test_sequence_dispatches_children():
    seq = XsdSequence("pose_definition")
    element = _Element("e")
    choice = _Choice("c")
    regexp = XsdRegularExpression("r", "xs:integer", "[0-9]*")
    interval = XsdInterval("i", "xs:decimal", 0, 1)
    seq.add(element)
    seq.add(choice)
    seq.add(regexp)
    seq.add(interval)
    assert seq.children == [element, choice, regexp, interval]
    assert seq.elements == [element]
    assert seq.choices == [choice]
    assert seq.reg_exps == [regexp]
    assert seq.intervals == [interval]
    assert seq.attributes == []


def test_sequence_attributes_are_not_children():
    seq = XsdSequence("xy_definition")
    x = _Attribute("x")
    y = _Attribute("y")
    seq.add(x)
    seq.add_attribute(y)
    assert seq.attributes == [x, y]
    assert seq.children == []


def test_sequence_add_elements():
    seq = XsdSequence()
    items = [_Element("a"), _Element("b"), _Element("c")]
    seq.add_elements(items)
    assert seq.elements == items
    assert seq.children == items
    assert seq.name == ""


def test_sequence_rejects_unsupported_nodes():
    seq = XsdSequence("s")
    with pytest.raises(TypeError):
        seq.add(XsdEnumeration("e", "xs:string"))
    with pytest.raises(TypeError):
        seq.add(XsdSequence("inner"))
    assert seq.children == []


def test_sequence_node_type():
    assert XsdSequence("s").node_type is NodeType.SEQUENCE
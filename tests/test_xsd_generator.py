from dataclasses import dataclass, field
from typing import ClassVar

import pytest
from lxml import etree

from nmodexsd.model import NodeType, XsdSequence
from nmodexsd.specification import XsdSpecification
from nmodexsd.xsd_generator import XS_NAMESPACE, XsdGenerator

NS = {"xs": XS_NAMESPACE}


@dataclass(eq=False)
class Element:
    node_type: ClassVar[NodeType] = NodeType.ELEMENT

    name: str
    type: str = ""
    min_occurs: str | None = None
    max_occurs: str | None = None
    attributes: list = field(default_factory=list)


@dataclass(eq=False)
class Attribute:
    node_type: ClassVar[NodeType] = NodeType.ATTRIBUTE

    name: str
    type: str
    required: bool = False


@dataclass(eq=False)
class Choice:
    node_type: ClassVar[NodeType] = NodeType.CHOICE

    name: str
    elements: list = field(default_factory=list)
    sequences: list = field(default_factory=list)
    attributes: list = field(default_factory=list)
    min_occurs: str | None = None
    max_occurs: str | None = None


def make_spec():
    spec = XsdSpecification()
    root = XsdSequence("nmode")
    root.add(Element("position", "xyz_definition", "1", "1"))
    spec.set_root(root)
    return spec


def parse(generator):
    return etree.fromstring(generator.to_string().encode("utf-8"))


def test_requires_root():
    with pytest.raises(ValueError):
        XsdGenerator(XsdSpecification())


def test_schema_root_and_form_default():
    doc = parse(XsdGenerator(make_spec()))
    assert doc.tag == f"{{{XS_NAMESPACE}}}schema"
    assert doc.get("elementFormDefault") == "qualified"


def test_enumeration_values():
    doc = parse(XsdGenerator(make_spec()))
    values = doc.xpath(
        "xs:simpleType[@name='radOrDeg_definition']/xs:restriction/xs:enumeration/@value",
        namespaces=NS,
    )
    assert values == ["rad", "deg"]
    base = doc.xpath(
        "xs:simpleType[@name='radOrDeg_definition']/xs:restriction/@base", namespaces=NS
    )
    assert base == ["xs:string"]


def test_interval_and_pattern():
    doc = parse(XsdGenerator(make_spec()))
    interval = doc.xpath(
        "xs:simpleType[@name='unit_interval_definition']/xs:restriction", namespaces=NS
    )[0]
    assert interval.xpath("xs:minInclusive/@value", namespaces=NS) == ["0"]
    assert interval.xpath("xs:maxInclusive/@value", namespaces=NS) == ["1"]
    pattern = doc.xpath(
        "xs:simpleType[@name='positive_non_zero_integer_definition']"
        "/xs:restriction/xs:pattern/@value",
        namespaces=NS,
    )
    assert pattern == ["[1-9][0-9]*"]


def test_sequence_attributes():
    doc = parse(XsdGenerator(make_spec()))
    attrs = doc.xpath("xs:complexType[@name='xy_definition']/xs:attribute", namespaces=NS)
    assert [(a.get("name"), a.get("type"), a.get("use")) for a in attrs] == [
        ("x", "xs:decimal", "required"),
        ("y", "xs:decimal", "required"),
    ]
    optional = doc.xpath(
        "xs:complexType[@name='pose_definition']/xs:attribute/@use", namespaces=NS
    )
    assert set(optional) == {"optional"}


def test_root_element():
    doc = parse(XsdGenerator(make_spec()))
    elements = doc.xpath(
        "xs:element[@name='nmode']/xs:complexType/xs:sequence/xs:element", namespaces=NS
    )
    assert len(elements) == 1
    assert elements[0].get("name") == "position"
    assert elements[0].get("type") == "xyz_definition"
    assert elements[0].get("minOccurs") == "1"


def test_choice_in_sequence_and_as_type():
    spec = make_spec()
    inner = XsdSequence("inner")
    inner.add(Element("b", "xs:string"))
    choice = Choice("pick", [Element("a", "xs:string")], [inner], [Attribute("id", "xs:string", True)],
                    "0", "unbounded")
    holder = XsdSequence("holder")
    holder.add(choice)
    spec.add(holder)
    spec.add(choice)
    doc = parse(XsdGenerator(spec))
    nested = doc.xpath("xs:complexType[@name='holder']/xs:sequence/xs:choice", namespaces=NS)[0]
    assert nested.get("maxOccurs") == "unbounded"
    assert nested.xpath("xs:element/@name", namespaces=NS) == ["a"]
    assert nested.xpath("xs:sequence/xs:element/@name", namespaces=NS) == ["b"]
    named = doc.xpath("xs:complexType[@name='pick']", namespaces=NS)[0]
    assert named.xpath("xs:choice/@minOccurs", namespaces=NS) == ["0"]
    assert named.xpath("xs:attribute/@use", namespaces=NS) == ["required"]


def test_element_with_attributes_gets_complex_type():
    spec = XsdSpecification()
    root = XsdSequence("nmode")
    root.add(Element("thing", attributes=[Attribute("size", "xs:decimal")]))
    spec.set_root(root)
    doc = parse(XsdGenerator(spec))
    thing = doc.xpath("//xs:element[@name='thing']", namespaces=NS)[0]
    assert thing.get("type") is None
    assert thing.xpath("xs:complexType/xs:attribute/@name", namespaces=NS) == ["size"]


def test_schema_validates_documents():
    schema = etree.XMLSchema(parse(XsdGenerator(make_spec())))
    good = etree.fromstring(b'<nmode><position x="1" y="2" z="3"/></nmode>')
    bad = etree.fromstring(b'<nmode><position x="1" y="2"/></nmode>')
    assert schema.validate(good)
    assert not schema.validate(bad)


def test_write_round_trip(tmp_path):
    gen = XsdGenerator(make_spec())
    path = gen.write(tmp_path / "out.xsd")
    text = path.read_text(encoding="utf-8")
    assert text == gen.to_string() + "\n"
    assert text.startswith("<?xml")
    reparsed = etree.fromstring(text.encode("utf-8"))
    assert etree.tostring(reparsed) == etree.tostring(parse(gen))
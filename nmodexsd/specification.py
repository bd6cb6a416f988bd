"""The built-in XML Schema specification and its registry of named types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .model import (
    NodeType,
    XsdEnumeration,
    XsdInterval,
    XsdRegularExpression,
    XsdSequence,
)

TAG_XSD_DECIMAL = "xs:decimal"
TAG_XSD_INTEGER = "xs:integer"
TAG_XSD_STRING = "xs:string"

TAG_PID_DEFINITION = "pid_definition"
TAG_POSITIVE_NON_ZERO_INTEGER = "positive_non_zero_integer_definition"
TAG_POSITIVE_INTEGER = "positive_integer_definition"
TAG_UNIT_INTERVAL = "unit_interval_definition"
TAG_POSITIVE_NON_ZERO_DECIMAL = "positive_non_zero_decimal_definition"
TAG_POSITIVE_DECIMAL = "positive_decimal_definition"
TAG_PERCENTAGE = "percentage_definition"
TAG_NAME_DEFINITION = "name_definition"
TAG_TRUE_FALSE_DEFINITION = "true_definition"

TAG_POSE_DEFINITION = "pose_definition"
TAG_RAD_DEG_DEFINITION = "radOrDeg_definition"
TAG_XYZ_DEFINITION = "xyz_definition"
TAG_XYZG_DEFINITION = "xyzg_definition"
TAG_XY_DEFINITION = "xy_definition"
TAG_MIN_MAX_DEFINITION = "min_max_definition"
TAG_POSITIVE_MIN_MAX_DEFINITION = "positive_min_max_definition"
TAG_RADIUS_HEIGHT_DEFINITION = "radius_height_definition"
TAG_WIDTH_HEIGHT_DEFINITION = "width_height_definition"
TAG_WIDTH_HEIGHT_DEPTH_DEFINITION = "width_height_depth_definition"

PATTERN_POSITIVE_NON_ZERO_INTEGER = "[1-9][0-9]*"
PATTERN_POSITIVE_INTEGER = "[0-9]*"
PATTERN_POSITIVE_NON_ZERO_DECIMAL = "([0-9]*.?[0-9]*[1-9]+[0-9]*|[1-9][0-9]*.?[0-9]*)"
PATTERN_POSITIVE_DECIMAL = "[0-9]*.?[0-9]*"


@dataclass(eq=False)
class _Attribute:
    """An attribute declared on a complex type."""

    node_type: ClassVar[NodeType] = NodeType.ATTRIBUTE

    name: str
    type: str
    required: bool = False
    comment: str = ""


def _sequence(name: str, *attributes: tuple[str, str, bool]) -> XsdSequence:
    seq = XsdSequence(name)
    for attr_name, attr_type, required in attributes:
        seq.add(_Attribute(attr_name, attr_type, required))
    return seq


class XsdSpecification:
    """Registry of the named types making up the schema grammar.

    Types are kept per kind; adding a type whose name is already present
    replaces the earlier one in its kind's list and moves it to the end.
    ``nodes`` records every addition in order, replacements included.
    """

    def __init__(self) -> None:
        self.root: XsdSequence | None = None
        self.sequences: list[XsdSequence] = []
        self.enumerations: list[XsdEnumeration] = []
        self.choices: list[Any] = []
        self.intervals: list[XsdInterval] = []
        self.reg_exps: list[XsdRegularExpression] = []
        self.nodes: list[Any] = []
        self._add_builtin_types()

    def _add_builtin_types(self) -> None:
        self.add(_sequence(
            TAG_POSE_DEFINITION,
            ("x", TAG_XSD_DECIMAL, False),
            ("y", TAG_XSD_DECIMAL, False),
            ("z", TAG_XSD_DECIMAL, False),
            ("alpha", TAG_XSD_DECIMAL, False),
            ("beta", TAG_XSD_DECIMAL, False),
            ("gamma", TAG_XSD_DECIMAL, False),
            ("type", TAG_RAD_DEG_DEFINITION, False),
        ))
        self.add(_sequence(
            TAG_PID_DEFINITION,
            ("p", TAG_XSD_DECIMAL, False),
            ("i", TAG_XSD_DECIMAL, False),
            ("d", TAG_XSD_DECIMAL, False),
            ("size", TAG_XSD_DECIMAL, False),
        ))
        self.add(XsdEnumeration(TAG_RAD_DEG_DEFINITION, TAG_XSD_STRING, ["rad", "deg"]))
        self.add(_sequence(
            TAG_XY_DEFINITION,
            ("x", TAG_XSD_DECIMAL, True),
            ("y", TAG_XSD_DECIMAL, True),
        ))
        self.add(_sequence(
            TAG_MIN_MAX_DEFINITION,
            ("min", TAG_XSD_DECIMAL, True),
            ("max", TAG_XSD_DECIMAL, True),
        ))
        self.add(_sequence(
            TAG_XYZ_DEFINITION,
            ("x", TAG_XSD_DECIMAL, True),
            ("y", TAG_XSD_DECIMAL, True),
            ("z", TAG_XSD_DECIMAL, True),
        ))
        self.add(_sequence(
            TAG_XYZG_DEFINITION,
            ("x", TAG_XSD_DECIMAL, True),
            ("y", TAG_XSD_DECIMAL, True),
            ("z", TAG_XSD_DECIMAL, True),
            ("global", TAG_TRUE_FALSE_DEFINITION, False),
        ))
        self.add(_sequence(TAG_NAME_DEFINITION, ("name", TAG_XSD_STRING, True)))
        self.add(XsdEnumeration(TAG_TRUE_FALSE_DEFINITION, TAG_XSD_STRING, ["true", "false"]))
        self.add(_sequence(
            TAG_WIDTH_HEIGHT_DEPTH_DEFINITION,
            ("width", TAG_XSD_DECIMAL, True),
            ("height", TAG_XSD_DECIMAL, True),
            ("depth", TAG_XSD_DECIMAL, True),
        ))
        self.add(XsdRegularExpression(
            TAG_POSITIVE_NON_ZERO_INTEGER, TAG_XSD_INTEGER, PATTERN_POSITIVE_NON_ZERO_INTEGER))
        self.add(XsdRegularExpression(
            TAG_POSITIVE_INTEGER, TAG_XSD_INTEGER, PATTERN_POSITIVE_INTEGER))
        self.add(XsdInterval(TAG_UNIT_INTERVAL, TAG_XSD_DECIMAL, 0.0, 1.0))
        self.add(XsdRegularExpression(
            TAG_POSITIVE_NON_ZERO_DECIMAL, TAG_XSD_DECIMAL, PATTERN_POSITIVE_NON_ZERO_DECIMAL))
        self.add(XsdRegularExpression(
            TAG_POSITIVE_DECIMAL, TAG_XSD_DECIMAL, PATTERN_POSITIVE_DECIMAL))
        self.add(_sequence(TAG_NAME_DEFINITION, ("name", TAG_XSD_STRING, True)))

    def add(self, node: Any) -> None:
        """Register a sequence, enumeration, choice, interval or regular expression."""
        targets = {
            NodeType.SEQUENCE: self.sequences,
            NodeType.ENUMERATION: self.enumerations,
            NodeType.CHOICE: self.choices,
            NodeType.INTERVAL: self.intervals,
            NodeType.REG_EXP: self.reg_exps,
        }
        kind = getattr(node, "node_type", None)
        target = targets.get(kind)
        if target is None:
            raise TypeError(f"a specification cannot hold a node of kind {kind!r}")
        for position, existing in enumerate(target):
            if existing.name == node.name:
                del target[position]
                break
        target.append(node)
        self.nodes.append(node)

    def set_root(self, root: XsdSequence) -> None:
        """Set the sequence describing the document's root element."""
        self.root = root
"""The graph of type usages built from a specification."""

from __future__ import annotations

import itertools
from typing import Any, Iterator

from .graph_node import XsdGraphNode
from .graph_nodes import (
    XsdEnumerationGraphNode,
    XsdIntervalGraphNode,
    XsdRegularExpressionGraphNode,
    XsdSequenceGraphNode,
)
from .model import NodeType, XsdSequence


class XsdGraphNodeInstance:
    """One occurrence of a graph node in the tree of usages.

    The instance holds its child instances in order and gets a unique name
    made of its name and a process-wide running number.
    """

    _counter = itertools.count()

    def __init__(
        self,
        name: str,
        title: str,
        node: XsdGraphNode | None,
        restrictions: str,
    ) -> None:
        self.name = name
        self.title = title
        self.node = node
        self.restrictions = restrictions
        self.port = 0
        self.unique_name = f"{name}_{next(XsdGraphNodeInstance._counter)}"
        self.children: list[XsdGraphNodeInstance] = []

    def append(self, child: XsdGraphNodeInstance) -> None:
        """Add a child instance."""
        self.children.append(child)

    def __iter__(self) -> Iterator[XsdGraphNodeInstance]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def label(self) -> str:
        """Graphviz label of this instance, titled with its name."""
        if self.node is None:
            return f' [label="{self.name}"];'
        return self.node.custom_label(self.name)


class XsdGraph:
    """Tree of type usages starting at the specification's root sequence.

    Elements are expected to provide ``name``, ``type``, ``min_occurs`` and
    ``max_occurs``; choices provide ``elements`` and ``sequences``.
    """

    def __init__(self, specification: Any) -> None:
        root = specification.root
        if root is None:
            raise ValueError("the specification has no root sequence")
        self._spec = specification
        self.nodes: list[XsdGraphNode] = []
        self.instances: list[XsdGraphNodeInstance] = []

        for sequence in specification.sequences:
            if sequence.name != root.name:
                self.nodes.append(XsdSequenceGraphNode(self, sequence))
        for enumeration in specification.enumerations:
            self.nodes.append(XsdEnumerationGraphNode(enumeration))
        for interval in specification.intervals:
            self.nodes.append(XsdIntervalGraphNode(interval))
        for reg_exp in specification.reg_exps:
            self.nodes.append(XsdRegularExpressionGraphNode(reg_exp))

        self.root = self._create_graph(root)

    def _create_graph(self, root: XsdSequence) -> XsdGraphNodeInstance:
        node = XsdSequenceGraphNode(self, root)
        instance = XsdGraphNodeInstance(node.name, node.name, node, "")
        self.instances.append(instance)
        for element in root.elements:
            self._add_element(instance, element)
        return instance

    def find_node(self, name: str) -> XsdGraphNode | None:
        """The first graph node with the given name, or None."""
        return next((node for node in self.nodes if node.name == name), None)

    def get(self, parent: str, name: str) -> XsdGraphNodeInstance:
        """The child ``name`` of the first instance ``parent`` having one; else the root."""
        for instance in self.instances:
            if instance.name != parent:
                continue
            for child in instance:
                if child.name == name:
                    return child
        return self.root

    def _add_spec(self, parent: XsdGraphNodeInstance, node: Any) -> None:
        kind = node.node_type
        if kind == NodeType.SEQUENCE:
            self._add_sequence(parent, node)
        elif kind == NodeType.CHOICE:
            self._add_choice(parent, node)
        elif kind == NodeType.ELEMENT:
            self._add_element(parent, node)
        elif kind in (NodeType.REG_EXP, NodeType.INTERVAL, NodeType.ENUMERATION):
            self._add_typed(parent, node)
        elif kind == NodeType.ATTRIBUTE:
            return
        else:
            raise ValueError(f"unknown node type {kind!r}")

    def _add_element(self, parent: XsdGraphNodeInstance, element: Any) -> None:
        node = self.find_node(element.type)
        restrictions = f"{element.min_occurs}:{element.max_occurs}"
        if node is not None:
            instance = XsdGraphNodeInstance(element.name, element.type, node, restrictions)
            self._add_spec(instance, node.spec)
        else:
            instance = XsdGraphNodeInstance(element.name, element.name, None, restrictions)
            for port, child in enumerate(instance):
                child.port = port
        self.instances.append(instance)
        parent.append(instance)

    def _add_sequence(self, parent: XsdGraphNodeInstance, sequence: XsdSequence) -> None:
        for element in sequence.elements:
            self._add_element(parent, element)
        for choice in sequence.choices:
            self._add_choice(parent, choice)
        for reg_exp in sequence.reg_exps:
            self._add_typed(parent, reg_exp)
        for interval in sequence.intervals:
            self._add_typed(parent, interval)

    def _add_choice(self, parent: XsdGraphNodeInstance, choice: Any) -> None:
        for element in choice.elements:
            self._add_element(parent, element)
        groups = []
        for sequence in choice.sequences:
            holder = XsdGraphNodeInstance("", "", None, "")
            self._add_sequence(holder, sequence)
            groups.append(holder)
        for port, holder in enumerate(groups):
            for child in holder:
                parent.append(child)
                child.port = port

    def _add_typed(self, parent: XsdGraphNodeInstance, spec: Any) -> None:
        node = self.find_node(spec.type)
        if node is None:
            return
        instance = XsdGraphNodeInstance(spec.name, spec.type, node, "")
        self._add_spec(instance, node.spec)
        self.instances.append(instance)
        parent.append(instance)
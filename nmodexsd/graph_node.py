"""Base class of the nodes drawn in a schema graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

ATTRIBUTE_BGCOLOR = "#fee1b7"
ELEMENT_BGCOLOR = "#adc9f0"
CHOICE_BGCOLOR = "#adf0ad"
SPECIFICATION_BGCOLOR = "#fefeb7"

REGEXP_BGCOLOR = "#f3afd7"
INTERVAL_BGCOLOR = "#d9adf0"
ENUM_BGCOLOR = "#b8adf0"

OPTIONAL_COLOR = "#00A000"
REQUIRED_COLOR = "#ff0000"


class XsdGraphNode(ABC):
    """A drawable view of one specification node."""

    def __init__(self) -> None:
        self.unique_node_name = ""

    @abstractmethod
    def custom_label(self, label: str) -> str:
        """Graphviz label attribute for this node, titled with ``label``."""

    @abstractmethod
    def content(self) -> str:
        """HTML table rows describing the node's specification."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the specification node shown."""

    @property
    @abstractmethod
    def spec(self) -> Any:
        """The specification node shown."""

    def has_definition(self, type_name: str) -> bool:
        """True when ``type_name`` refers to a named definition type."""
        return "definition" in type_name
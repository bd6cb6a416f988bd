"""Describe an XML grammar, generate its XML Schema, validate documents and draw it with Graphviz."""

__version__ = "0.1.0"

__all__ = [
    "model",
    "helpers",
    "specification",
    "graph_node",
    "graph_nodes",
    "graph",
    "graphviz",
    "xsd_generator",
    "validation",
]
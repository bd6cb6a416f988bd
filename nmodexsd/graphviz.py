"""Graphviz rendering of the schema graph."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from .graph import XsdGraph, XsdGraphNodeInstance
from .graph_node import XsdGraphNode


@dataclass
class XsdGraphLink:
    """A labelled connection between two graph nodes."""

    source: XsdGraphNode | None = None
    destination: XsdGraphNode | None = None
    label: str = ""
    destination_name: str = ""


@dataclass
class DotTarget:
    """One dot file to produce: the subtree ``name`` below ``parent``.

    A depth of -1 draws the whole subtree. Without an explicit filename
    the file is named ``<parent>_<name>``.
    """

    parent: str
    name: str
    left_to_right: bool = True
    depth: int = -1
    filename: str = ""

    def __post_init__(self) -> None:
        if not self.filename:
            self.filename = f"{self.parent}_{self.name}"


DEFAULT_TARGETS = (DotTarget("mutation", "edge"),)


class XsdGraphvizGenerator:
    """Produces dot source for parts of the graph of a specification."""

    def __init__(self, specification: Any) -> None:
        self.graph = XsdGraph(specification)
        self.dot = ""

    def generate(self, parent: str, name: str, left_to_right: bool, depth: int) -> str:
        """Render the subtree ``name`` below ``parent`` and return the dot source."""
        lines = ["digraph structs {\n"]
        lines.append("  rankdir=LR;\n" if left_to_right else "  rankdir=TB;\n")
        lines.append("  node [shape=plaintext];\n")
        self._generate(self.graph.get(parent, name), depth, lines)
        lines.append("}\n")
        self.dot = "".join(lines)
        return self.dot

    def _generate(self, node: XsdGraphNodeInstance, depth: int, lines: list[str]) -> None:
        if depth == 0:
            return
        remaining = depth - 1
        lines.append(f" {node.unique_name} {node.label()}\n")
        if remaining == 0:
            return
        for child in node:
            self._generate(child, remaining, lines)
            lines.append(
                f"{node.unique_name}:{child.port} -> {child.unique_name}"
                f'[ label="{child.restrictions}"];\n'
            )

    def __str__(self) -> str:
        return self.dot + "\n"


def write_dot_files(
    specification: Any,
    filetype: str = "pdf",
    targets: Iterable[DotTarget] | None = None,
    directory: str | Path = ".",
) -> list[Path]:
    """Write one dot file per target and convert them with ``dot`` if it is installed.

    Dot files go to ``<directory>/dot``; converted files go to
    ``<directory>/<filetype>``. Returns the paths of the dot files written.
    """
    base = Path(directory)
    chosen = list(DEFAULT_TARGETS if targets is None else targets)
    print(f"Exporting to ./{filetype}")

    generator = XsdGraphvizGenerator(specification)
    dot_dir = base / "dot"
    export_dir = base / filetype
    dot_dir.mkdir(parents=True, exist_ok=True)
    export_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for target in chosen:
        path = dot_dir / f"{target.filename}.dot"
        generator.generate(target.parent, target.name, target.left_to_right, target.depth)
        path.write_text(f"{generator}\n", encoding="utf-8")
        print(f"writing {path}")
        written.append(path)

    if shutil.which("dot") is not None:
        print(f"Found dot executable. Exporting dot -> {filetype}")
        for target, dot_file in zip(chosen, written):
            output = export_dir / f"{target.filename}.{filetype}"
            command = ["dot", f"-T{filetype}", str(dot_file), "-o", str(output)]
            subprocess.run(command, check=False)
            print(" ".join(command))
    else:
        print("Cannot find dot executable.")

    print("done.")
    return written
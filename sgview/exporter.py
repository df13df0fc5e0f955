"""Writes a scene graph back out as scene command text."""

from __future__ import annotations

import math
from typing import Mapping

from sgview.nodes import (
    GroupNode,
    LeafNode,
    ParentSGNode,
    RotateTransform,
    ScaleTransform,
    SGNode,
    SGNodeVisitor,
    TransformNode,
    TranslateTransform,
)


def _num(value: float) -> str:
    return f"{value:g}"


def _nums(values) -> str:
    return " ".join(_num(v) for v in values)


class ScenegraphExporter(SGNodeVisitor):
    """Visitor emitting the commands that rebuild the visited tree.

    Nodes are named ``node-<level>-<index>`` by their depth and position.
    """

    def __init__(self, mesh_paths: Mapping[str, str]) -> None:
        self._level = 1
        self._number = 0
        self._lines: list[str] = []
        for name, path in sorted(mesh_paths.items()):
            self._append(f"instance {name} {path}")

    @property
    def output(self) -> str:
        """The commands produced so far."""
        return "".join(self._lines)

    def _append(self, text: str) -> None:
        self._lines.append(text + "\n")

    def _varname(self) -> str:
        return f"node-{self._level}-{self._number}"

    def _finish(self, varname: str) -> None:
        if self._level == 1:
            self._append(f"assign-root {varname}")

    def _visit_children(self, node: ParentSGNode, name: str) -> None:
        self._level += 1
        old = self._number
        self._number = 0
        for child in node.children:
            child.accept(self)
            self._append(f"add-child {self._varname()} {name}")
            self._number += 1
        self._level -= 1
        self._number = old

    def visit_group(self, node: GroupNode) -> None:
        varname = self._varname()
        self._append(f"group {varname} {node.name}")
        self._visit_children(node, varname)
        self._finish(varname)

    def visit_leaf(self, node: LeafNode) -> None:
        varname = self._varname()
        mat = node.material
        self._append(f"leaf {varname} {node.name} instanceof {node.instance_of}")
        self._append(f"material mat-{varname}")
        self._append(
            "\n".join([
                f"emission {_nums(mat.emission[:3])}",
                f"ambient {_nums(mat.ambient[:3])}",
                f"diffuse {_nums(mat.diffuse[:3])}",
                f"specular {_nums(mat.specular[:3])}",
                f"shininess {_num(mat.shininess)}",
            ])
        )
        self._append("end-material")
        self._append(f"assign-material {varname} mat-{varname}")
        self._finish(varname)

    def visit_transform(self, node: TransformNode) -> None:
        """A transform of no specific kind has no command and is skipped."""

    def visit_scale(self, node: ScaleTransform) -> None:
        varname = self._varname()
        self._append(f"scale {varname} {node.name} {_nums(node.scale)}")
        self._visit_children(node, varname)
        self._finish(varname)

    def visit_translate(self, node: TranslateTransform) -> None:
        varname = self._varname()
        self._append(f"translate {varname} {node.name}{_nums(node.translation)}")
        self._visit_children(node, varname)
        self._finish(varname)

    def visit_rotate(self, node: RotateTransform) -> None:
        varname = self._varname()
        degrees = _num(math.degrees(node.angle))
        self._append(f"rotate {varname} {node.name}{degrees} {_nums(node.axis)}")
        self._visit_children(node, varname)
        self._finish(varname)


def export_scenegraph(root: SGNode, mesh_paths: Mapping[str, str]) -> str:
    """Command text describing ``root`` and the given mesh files."""
    exporter = ScenegraphExporter(mesh_paths)
    root.accept(exporter)
    return exporter.output
"""Renders a scene graph as an indented outline of node names."""

from __future__ import annotations

from sgview.nodes import GroupNode, LeafNode, SGNode, SGNodeVisitor, TransformNode

_INDENT = "   "


class TextRenderer(SGNodeVisitor):
    """Visitor that writes one ``- name`` line per node, indented by depth."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._level = 0

    @property
    def output(self) -> str:
        """The outline produced so far."""
        return "".join(self._lines)

    def _add_line(self, name: str) -> None:
        self._lines.append(f"{_INDENT * self._level}- {name}\n")

    def visit_group(self, node: GroupNode) -> None:
        self._add_line(node.name)
        self._level += 1
        for child in node.children:
            child.accept(self)
        self._level -= 1

    def visit_leaf(self, node: LeafNode) -> None:
        self._add_line(node.name)

    def visit_transform(self, node: TransformNode) -> None:
        self._add_line(node.name)
        self._level += 1
        children = node.children
        if children:
            children[0].accept(self)
        self._level -= 1

    def visit_scale(self, node: TransformNode) -> None:
        self.visit_transform(node)

    def visit_translate(self, node: TransformNode) -> None:
        self.visit_transform(node)

    def visit_rotate(self, node: TransformNode) -> None:
        self.visit_transform(node)


def render_text(root: SGNode) -> str:
    """The outline of the tree rooted at ``root``."""
    renderer = TextRenderer()
    root.accept(renderer)
    return renderer.output
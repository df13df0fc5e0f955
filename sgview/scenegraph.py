"""The scene graph container: root, named nodes, meshes, images and lights."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from sgview.lighting import Light
from sgview.nodes import GroupNode, LeafNode, SGNode, TransformNode
from sgview.ppm import TextureImage


class Scenegraph:
    """A tree of nodes plus the resources its leaves refer to by name."""

    def __init__(self) -> None:
        self.root: Optional[SGNode] = None
        self.nodes: dict[str, SGNode] = {}
        self.meshes: dict[str, Any] = {}
        self.images: dict[str, TextureImage] = {}
        self.mesh_paths: dict[str, str] = {}
        self.image_paths: dict[str, str] = {}

    def set_root(self, root: Optional[SGNode]) -> None:
        """Make ``root`` the root and register every node of its tree here."""
        self.root = root
        if root is not None:
            root.attach(self)

    def add_node(self, name: str, node: SGNode) -> None:
        """Record a node under its name, replacing any earlier one."""
        self.nodes[name] = node

    def dispose(self) -> None:
        """Drop the tree."""
        self.root = None

    def lights_in_view_space(self, view_matrix: Sequence[Sequence[float]]) -> list[Light]:
        """Every active light of the tree, moved into view coordinates."""
        view = np.asarray(view_matrix, dtype=float)
        lights: list[Light] = []
        self._collect_lights(self.root, np.identity(4), view, lights)
        return lights

    def _collect_lights(
        self,
        node: Optional[SGNode],
        model: np.ndarray,
        view: np.ndarray,
        lights: list[Light],
    ) -> None:
        if node is None:
            return
        if isinstance(node, LeafNode) and node.light.is_active():
            lights.append(node.light.transformed(view @ model))
        if isinstance(node, GroupNode):
            for child in node.children:
                self._collect_lights(child, model, view, lights)
        if isinstance(node, TransformNode):
            children = node.children
            if children:
                self._collect_lights(children[0], model @ node.transform, view, lights)
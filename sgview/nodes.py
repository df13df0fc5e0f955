"""Scene graph nodes, transform matrices and the node visitor interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Optional, Sequence

import numpy as np

from sgview.lighting import Light, Material
from sgview.ppm import TextureImage


def scale_matrix(sx: float, sy: float, sz: float) -> np.ndarray:
    """4x4 matrix scaling along each axis."""
    return np.diag([float(sx), float(sy), float(sz), 1.0])


def translate_matrix(tx: float, ty: float, tz: float) -> np.ndarray:
    """4x4 matrix translating by the given offsets."""
    m = np.identity(4)
    m[:3, 3] = (tx, ty, tz)
    return m


def rotate_matrix(angle: float, ax: float, ay: float, az: float) -> np.ndarray:
    """4x4 matrix rotating by ``angle`` radians about the axis (ax, ay, az)."""
    axis = np.array([ax, ay, az], dtype=float)
    norm = float(np.linalg.norm(axis))
    if norm == 0.0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = axis / norm
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    m = np.identity(4)
    m[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return m


class SGNodeVisitor(ABC):
    """Operation applied to every kind of scene graph node.

    The specific transform visits default to :meth:`visit_transform`.
    """

    @abstractmethod
    def visit_group(self, node: "GroupNode") -> None:
        """Visit a group node."""

    @abstractmethod
    def visit_leaf(self, node: "LeafNode") -> None:
        """Visit a leaf node."""

    @abstractmethod
    def visit_transform(self, node: "TransformNode") -> None:
        """Visit a generic transform node."""

    def visit_scale(self, node: "ScaleTransform") -> None:
        """Visit a scale node."""
        self.visit_transform(node)

    def visit_translate(self, node: "TranslateTransform") -> None:
        """Visit a translate node."""
        self.visit_transform(node)

    def visit_rotate(self, node: "RotateTransform") -> None:
        """Visit a rotate node."""
        self.visit_transform(node)


class SGNode(ABC):
    """A named node in a scene graph tree."""

    def __init__(self, name: str, scenegraph: Any = None) -> None:
        self.name = name
        self.parent: Optional[SGNode] = None
        self.scenegraph = scenegraph

    def find(self, name: str) -> Optional["SGNode"]:
        """The node with this name in the subtree, or None."""
        return self if self.name == name else None

    def attach(self, graph: Any) -> None:
        """Associate this node with a scene graph and register it there."""
        self.scenegraph = graph
        graph.add_node(self.name, self)

    @abstractmethod
    def clone(self) -> "SGNode":
        """Deep copy of the subtree rooted at this node."""

    @abstractmethod
    def accept(self, visitor: SGNodeVisitor) -> None:
        """Dispatch to the visitor method for this node's kind."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ParentSGNode(SGNode):
    """A node that can have children."""

    def __init__(self, name: str, scenegraph: Any = None) -> None:
        super().__init__(name, scenegraph)
        self._children: list[SGNode] = []

    @property
    def children(self) -> tuple[SGNode, ...]:
        """The children in insertion order."""
        return tuple(self._children)

    @abstractmethod
    def add_child(self, child: SGNode) -> None:
        """Add a child to this node."""

    @abstractmethod
    def _copy_node(self) -> "ParentSGNode":
        """A childless copy of this node."""

    def find(self, name: str) -> Optional[SGNode]:
        """Search this node and then its subtree, depth first."""
        if self.name == name:
            return self
        for child in self._children:
            found = child.find(name)
            if found is not None:
                return found
        return None

    def clone(self) -> SGNode:
        copy = self._copy_node()
        for child in self._children:
            copy.add_child(child.clone())
        return copy


class GroupNode(ParentSGNode):
    """A logical grouping of any number of children."""

    def _copy_node(self) -> "GroupNode":
        return GroupNode(self.name, self.scenegraph)

    def add_child(self, child: SGNode) -> None:
        self._children.append(child)
        child.parent = self

    def attach(self, graph: Any) -> None:
        super().attach(graph)
        for child in self._children:
            child.attach(graph)

    def accept(self, visitor: SGNodeVisitor) -> None:
        visitor.visit_group(self)


class TransformNode(ParentSGNode):
    """A node applying a 4x4 transform to its single child."""

    def __init__(
        self,
        name: str,
        scenegraph: Any = None,
        transform: Optional[Sequence[Sequence[float]]] = None,
    ) -> None:
        super().__init__(name, scenegraph)
        self.transform = (
            np.identity(4) if transform is None else np.array(transform, dtype=float)
        )

    def _copy_node(self) -> "TransformNode":
        return TransformNode(self.name, self.scenegraph, self.transform)

    def add_child(self, child: SGNode) -> None:
        """Set the only child; raises ValueError if one is already set."""
        if self._children:
            raise ValueError("Transform node already has a child")
        self._children.append(child)
        child.parent = self

    def attach(self, graph: Any) -> None:
        super().attach(graph)
        if self._children:
            self._children[0].attach(graph)

    def accept(self, visitor: SGNodeVisitor) -> None:
        visitor.visit_transform(self)


class ScaleTransform(TransformNode):
    """A scale along each axis."""

    def __init__(self, sx: float, sy: float, sz: float, name: str, scenegraph: Any = None) -> None:
        super().__init__(name, scenegraph, scale_matrix(sx, sy, sz))
        self.scale = (float(sx), float(sy), float(sz))

    def _copy_node(self) -> "ScaleTransform":
        return ScaleTransform(*self.scale, self.name, self.scenegraph)

    def accept(self, visitor: SGNodeVisitor) -> None:
        visitor.visit_scale(self)


class RotateTransform(TransformNode):
    """A rotation by an angle in radians about an axis."""

    def __init__(
        self, angle: float, ax: float, ay: float, az: float, name: str, scenegraph: Any = None
    ) -> None:
        super().__init__(name, scenegraph, rotate_matrix(angle, ax, ay, az))
        self.angle = float(angle)
        self.axis = (float(ax), float(ay), float(az))

    def _copy_node(self) -> "RotateTransform":
        return RotateTransform(self.angle, *self.axis, self.name, self.scenegraph)

    def accept(self, visitor: SGNodeVisitor) -> None:
        visitor.visit_rotate(self)


class TranslateTransform(TransformNode):
    """A translation by fixed offsets."""

    def __init__(self, tx: float, ty: float, tz: float, name: str, scenegraph: Any = None) -> None:
        super().__init__(name, scenegraph, translate_matrix(tx, ty, tz))
        self.translation = (float(tx), float(ty), float(tz))

    def _copy_node(self) -> "TranslateTransform":
        return TranslateTransform(*self.translation, self.name, self.scenegraph)

    def accept(self, visitor: SGNodeVisitor) -> None:
        visitor.visit_translate(self)


class LeafNode(SGNode):
    """A node holding an instance of a mesh with its material, light and texture."""

    def __init__(
        self,
        instance_of: str,
        name: str,
        scenegraph: Any = None,
        material: Optional[Material] = None,
        light: Optional[Light] = None,
        texture: Optional[TextureImage] = None,
    ) -> None:
        super().__init__(name, scenegraph)
        self.instance_of = instance_of
        self.material = material if material is not None else Material()
        self.light = light if light is not None else Light()
        self.texture = texture if texture is not None else TextureImage()

    def clone(self) -> "LeafNode":
        return LeafNode(
            self.instance_of,
            self.name,
            self.scenegraph,
            replace(self.material),
            replace(self.light),
            replace(self.texture),
        )

    def accept(self, visitor: SGNodeVisitor) -> None:
        visitor.visit_leaf(self)
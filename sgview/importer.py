"""Builds a scene graph from a text file of scene commands."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Callable, Iterator, TextIO, Union

from sgview.lighting import Light, Material
from sgview.nodes import (
    GroupNode,
    LeafNode,
    ParentSGNode,
    RotateTransform,
    ScaleTransform,
    SGNode,
    TranslateTransform,
)
from sgview.ppm import TextureImage, load_ppm
from sgview.scenegraph import Scenegraph


def strip_comments(text: str) -> str:
    """Remove everything from ``#`` to the end of each line."""
    return "".join(line.split("#", 1)[0] + "\n" for line in text.splitlines())


class _Tokens:
    """Whitespace-separated words of the command text."""

    def __init__(self, text: str) -> None:
        self._words: Iterator[str] = iter(text.split())

    def __iter__(self) -> "_Tokens":
        return self

    def __next__(self) -> str:
        return next(self._words)

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of scene input") from None

    def number(self) -> float:
        text = self.word()
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"expected a number, got {text!r}") from None

    def color(self) -> tuple[float, float, float]:
        return (self.number(), self.number(), self.number())


class ScenegraphImporter:
    """Reads scene commands and assembles a :class:`Scenegraph`.

    Named nodes, materials, lights and images persist across calls, so a
    file pulled in with ``import`` shares them with the file importing it.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, SGNode] = {}
        self._materials: dict[str, Material] = {}
        self._lights: dict[str, Light] = {}
        self._meshes: dict[str, object] = {}
        self._images: dict[str, TextureImage] = {}
        self._mesh_paths: dict[str, str] = {}
        self._image_paths: dict[str, str] = {}
        self._root: SGNode | None = None
        self._handlers: dict[str, Callable[[_Tokens], None]] = {
            "instance": self._parse_instance,
            "image": self._parse_image,
            "group": self._parse_group,
            "leaf": self._parse_leaf,
            "material": self._parse_material,
            "light": self._parse_light,
            "scale": self._parse_scale,
            "rotate": self._parse_rotate,
            "translate": self._parse_translate,
            "copy": self._parse_copy,
            "import": self._parse_import,
            "assign-material": self._parse_assign_material,
            "assign-light": self._parse_assign_light,
            "assign-texture": self._parse_assign_texture,
            "add-child": self._parse_add_child,
            "assign-root": self._parse_set_root,
        }

    def parse(self, source: Union[str, TextIO]) -> Scenegraph:
        """Parse command text (a string or a readable text stream)."""
        text = source if isinstance(source, str) else source.read()
        tokens = _Tokens(strip_comments(text))
        for command in tokens:
            print(f"Read {command}")
            handler = self._handlers.get(command)
            if handler is None:
                raise ValueError(f"Unrecognized or out-of-place command: {command}")
            handler(tokens)
        if self._root is None:
            raise ValueError("Parsed scene graph, but nothing set as root")
        scenegraph = Scenegraph()
        scenegraph.set_root(self._root)
        scenegraph.meshes = dict(self._meshes)
        scenegraph.mesh_paths = dict(self._mesh_paths)
        scenegraph.images = dict(self._images)
        scenegraph.image_paths = dict(self._image_paths)
        return scenegraph

    def parse_file(self, path: Union[str, Path]) -> Scenegraph:
        """Parse the command file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            return self.parse(handle)

    def _parse_instance(self, tokens: _Tokens) -> None:
        name, path = tokens.word(), tokens.word()
        print(f"Read {name} {path}")
        self._mesh_paths[name] = path

    def _parse_image(self, tokens: _Tokens) -> None:
        name, path = tokens.word(), tokens.word()
        print(f"Read {name} {path}")
        self._image_paths[name] = path
        self._images[name] = load_ppm(path, name)

    def _parse_group(self, tokens: _Tokens) -> None:
        varname, name = tokens.word(), tokens.word()
        print(f"Read {varname} {name}")
        self._nodes[varname] = GroupNode(name)

    def _parse_leaf(self, tokens: _Tokens) -> None:
        varname, name = tokens.word(), tokens.word()
        print(f"Read {varname} {name}")
        instance_of = tokens.word() if tokens.word() == "instanceof" else ""
        self._nodes[varname] = LeafNode(instance_of, name)

    def _parse_scale(self, tokens: _Tokens) -> None:
        varname, name = tokens.word(), tokens.word()
        self._nodes[varname] = ScaleTransform(*tokens.color(), name)

    def _parse_translate(self, tokens: _Tokens) -> None:
        varname, name = tokens.word(), tokens.word()
        self._nodes[varname] = TranslateTransform(*tokens.color(), name)

    def _parse_rotate(self, tokens: _Tokens) -> None:
        varname, name = tokens.word(), tokens.word()
        degrees = tokens.number()
        axis = tokens.color()
        self._nodes[varname] = RotateTransform(math.radians(degrees), *axis, name)

    def _parse_material(self, tokens: _Tokens) -> None:
        material = Material()
        name = tokens.word()
        command = tokens.word()
        while command != "end-material":
            if command in ("ambient", "diffuse", "specular", "emission"):
                setattr(material, command, tokens.color())
            elif command == "shininess":
                material.shininess = tokens.number()
            command = tokens.word()
        self._materials[name] = material

    def _parse_light(self, tokens: _Tokens) -> None:
        light = Light()
        name = tokens.word()
        command = tokens.word()
        while command != "end-light":
            if command in ("ambient", "diffuse", "specular"):
                setattr(light, command, tokens.color())
            elif command == "position":
                light.set_position(*tokens.color())
            elif command == "spot-direction":
                light.set_spot_direction(*tokens.color())
            elif command == "spot-angle":
                light.spot_angle = tokens.number()
            command = tokens.word()
        self._lights[name] = light

    def _parse_copy(self, tokens: _Tokens) -> None:
        nodename, copy_of = tokens.word(), tokens.word()
        original = self._nodes.get(copy_of)
        if original is not None:
            self._nodes[nodename] = original.clone()

    def _parse_import(self, tokens: _Tokens) -> None:
        nodename, filepath = tokens.word(), tokens.word()
        if Path(filepath).is_file():
            imported = self.parse_file(filepath)
            self._nodes[nodename] = imported.root
            imported.set_root(None)

    def _leaf(self, nodename: str) -> LeafNode | None:
        node = self._nodes.get(nodename)
        return node if isinstance(node, LeafNode) else None

    def _parse_assign_material(self, tokens: _Tokens) -> None:
        nodename, matname = tokens.word(), tokens.word()
        leaf = self._leaf(nodename)
        if leaf is not None and matname in self._materials:
            leaf.material = self._materials[matname]

    def _parse_assign_light(self, tokens: _Tokens) -> None:
        nodename, lightname = tokens.word(), tokens.word()
        leaf = self._leaf(nodename)
        if leaf is not None and lightname in self._lights:
            leaf.light = self._lights[lightname]

    def _parse_assign_texture(self, tokens: _Tokens) -> None:
        nodename, texturename = tokens.word(), tokens.word()
        leaf = self._leaf(nodename)
        if leaf is not None and texturename in self._images:
            leaf.texture = self._images[texturename]

    def _parse_add_child(self, tokens: _Tokens) -> None:
        childname, parentname = tokens.word(), tokens.word()
        parent = self._nodes.get(parentname)
        child = self._nodes.get(childname)
        if isinstance(parent, ParentSGNode) and child is not None:
            parent.add_child(child)

    def _parse_set_root(self, tokens: _Tokens) -> None:
        rootname = tokens.word()
        root = self._nodes.get(rootname)
        if root is None:
            raise ValueError(f"Unknown node for root: {rootname}")
        self._root = root
        print(f"Root's name is {root.name}")
import math

from sgview.exporter import ScenegraphExporter, export_scenegraph
from sgview.lighting import Material
from sgview.nodes import (
    GroupNode,
    LeafNode,
    RotateTransform,
    ScaleTransform,
    TransformNode,
    TranslateTransform,
)


def test_instances_listed_in_name_order():
    exporter = ScenegraphExporter({"sphere": "models/sphere.obj", "box": "models/box.obj"})
    assert exporter.output.splitlines() == [
        "instance box models/box.obj",
        "instance sphere models/sphere.obj",
    ]


def test_root_leaf_commands():
    material = Material(ambient=(0.5, 0.25, 1.0), shininess=10.0)
    leaf = LeafNode("sphere", "ball", material=material)
    lines = export_scenegraph(leaf, {}).splitlines()
    assert lines == [
        "leaf node-1-0 ball instanceof sphere",
        "material mat-node-1-0",
        "emission 0 0 0",
        "ambient 0.5 0.25 1",
        "diffuse 0 0 0",
        "specular 0 0 0",
        "shininess 10",
        "end-material",
        "assign-material node-1-0 mat-node-1-0",
        "assign-root node-1-0",
    ]


def test_group_children_are_numbered_and_added():
    root = GroupNode("world")
    root.add_child(LeafNode("box", "a"))
    root.add_child(LeafNode("box", "b"))
    lines = export_scenegraph(root, {}).splitlines()
    assert lines[0] == "group node-1-0 world"
    assert "add-child node-2-0 node-1-0" in lines
    assert "add-child node-2-1 node-1-0" in lines
    assert lines[-1] == "assign-root node-1-0"
    assert lines.count("assign-root node-1-0") == 1
    assert "leaf node-2-1 b instanceof box" in lines


def test_scale_line():
    node = ScaleTransform(2, 3, 4, "s")
    lines = export_scenegraph(node, {}).splitlines()
    assert lines == ["scale node-1-0 s 2 3 4", "assign-root node-1-0"]


def test_translate_and_rotate_lines():
    translate = TranslateTransform(1, 2, 3, "t")
    assert export_scenegraph(translate, {}).splitlines()[0] == "translate node-1-0 t1 2 3"
    rotate = RotateTransform(math.radians(90), 0, 1, 0, "r")
    assert export_scenegraph(rotate, {}).splitlines()[0] == "rotate node-1-0 r90 0 1 0"


def test_nested_transform_child_levels():
    scale = ScaleTransform(1, 1, 1, "s")
    scale.add_child(LeafNode("box", "inner"))
    lines = export_scenegraph(scale, {}).splitlines()
    assert "leaf node-2-0 inner instanceof box" in lines
    assert "add-child node-2-0 node-1-0" in lines
    assert "assign-root node-2-0" not in lines


def test_plain_transform_emits_nothing():
    assert export_scenegraph(TransformNode("t"), {"box": "b.obj"}) == "instance box b.obj\n"
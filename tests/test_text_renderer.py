from sgview.nodes import (
    GroupNode,
    LeafNode,
    RotateTransform,
    ScaleTransform,
    TransformNode,
    TranslateTransform,
)
from sgview.text_renderer import TextRenderer, render_text


def _tree():
    root = GroupNode("root")
    root.add_child(LeafNode("box", "a"))
    move = TranslateTransform(1, 2, 3, "t")
    move.add_child(LeafNode("box", "b"))
    root.add_child(move)
    return root


def test_outline_format():
    assert render_text(_tree()) == "- root\n   - a\n   - t\n      - b\n"


def test_single_leaf():
    assert render_text(LeafNode("box", "only")) == "- only\n"


def test_one_line_per_node():
    root = GroupNode("root")
    scale = ScaleTransform(2, 2, 2, "s")
    rotate = RotateTransform(1.0, 0, 1, 0, "r")
    rotate.add_child(LeafNode("x", "leaf"))
    scale.add_child(rotate)
    root.add_child(scale)
    root.add_child(GroupNode("empty"))
    lines = render_text(root).splitlines()
    assert [line.strip() for line in lines] == ["- root", "- s", "- r", "- leaf", "- empty"]
    depths = [(len(line) - len(line.lstrip(" "))) // 3 for line in lines]
    assert depths == [0, 1, 2, 3, 1]


def test_plain_transform_without_child():
    assert render_text(TransformNode("lonely")) == "- lonely\n"


def test_renderer_accumulates_output():
    renderer = TextRenderer()
    LeafNode("box", "first").accept(renderer)
    LeafNode("box", "second").accept(renderer)
    assert renderer.output.splitlines() == ["- first", "- second"]
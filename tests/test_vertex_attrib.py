import pytest

from sgview.vertex_attrib import VertexAttrib


def test_defaults():
    v = VertexAttrib()
    assert v.get_data("position") == [0.0, 0.0, 0.0, 1.0]
    assert v.get_data("normal") == [0.0, 0.0, 0.0, 0.0]
    assert v.get_data("texcoord") == [0.0, 0.0, 0.0, 1.0]


def test_all_attributes_order():
    assert VertexAttrib().all_attributes() == ["position", "normal", "texcoord"]


@pytest.mark.parametrize("name", ["position", "normal", "texcoord"])
def test_has_data_known(name):
    assert VertexAttrib().has_data(name) is True


def test_has_data_unknown():
    assert VertexAttrib().has_data("color") is False


def test_partial_set_keeps_defaults():
    v = VertexAttrib()
    v.set_data("position", [5.0, 6.0])
    assert v.get_data("position") == [5.0, 6.0, 0.0, 1.0]


def test_set_resets_previous_values():
    v = VertexAttrib()
    v.set_data("normal", [1.0, 2.0, 3.0, 4.0])
    v.set_data("normal", [7.0])
    assert v.get_data("normal") == [7.0, 0.0, 0.0, 0.0]


def test_full_set_round_trip():
    v = VertexAttrib()
    v.set_data("texcoord", [0.25, 0.5, 0.75, 2.0])
    assert v.get_data("texcoord") == [0.25, 0.5, 0.75, 2.0]


def test_get_returns_copy():
    v = VertexAttrib()
    data = v.get_data("position")
    data[0] = 99.0
    assert v.get_data("position")[0] == 0.0


@pytest.mark.parametrize("data", [[], [1.0, 2.0, 3.0, 4.0, 5.0]])
def test_bad_length_raises(data):
    with pytest.raises(ValueError, match="Too much data for attribute: position"):
        VertexAttrib().set_data("position", data)


def test_get_unknown_raises():
    with pytest.raises(ValueError, match="No attribute: color found!"):
        VertexAttrib().get_data("color")


def test_set_unknown_raises():
    with pytest.raises(ValueError, match="Attribute: color unsupported!"):
        VertexAttrib().set_data("color", [1.0])
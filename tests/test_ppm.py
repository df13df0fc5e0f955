import pytest

from sgview.ppm import TextureImage, load_ppm, parse_ppm


def test_single_row():
    img = parse_ppm("P3\n2 1\n255\n1 2 3 4 5 6\n", "tex")
    assert img == TextureImage(pixels=bytes([1, 2, 3, 4, 5, 6]), width=2, height=1, name="tex")


def test_rows_are_flipped():
    img = parse_ppm("P3\n1 2\n255\n1 2 3\n4 5 6\n", "flip")
    assert img.pixels == bytes([4, 5, 6, 1, 2, 3])
    assert (img.width, img.height) == (1, 2)


def test_comment_lines_ignored():
    text = "P3\n# a comment\n1 1\n# another\n255\n10 20 30\n"
    assert parse_ppm(text, "c").pixels == bytes([10, 20, 30])


def test_pixel_count_matches_dimensions():
    values = " ".join(str(i) for i in range(3 * 3 * 2))
    img = parse_ppm(f"P3\n3 2\n255\n{values}\n", "x")
    assert len(img.pixels) == 3 * img.width * img.height


def test_truncated_data_raises():
    with pytest.raises(ValueError):
        parse_ppm("P3\n2 2\n255\n1 2 3\n", "bad")


def test_missing_header_raises():
    with pytest.raises(ValueError):
        parse_ppm("P3\n2\n", "bad")


def test_load_from_file(tmp_path, capsys):
    path = tmp_path / "img.ppm"
    path.write_text("P3\n1 2\n255\n7 8 9\n1 2 3\n")
    img = load_ppm(path, "file")
    assert img.pixels == bytes([1, 2, 3, 7, 8, 9])
    assert img.name == "file"
    assert "Image file opened" in capsys.readouterr().out


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_ppm(tmp_path / "nope.ppm", "x")
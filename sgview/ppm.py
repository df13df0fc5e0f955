"""Reading images in the ASCII PPM (P3) format."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class TextureImage:
    """An RGB image stored bottom row first, three bytes per pixel."""

    pixels: bytes = b""
    width: int = 0
    height: int = 0
    name: str = ""


def _tokens(text: str) -> list[str]:
    kept = (line for line in text.splitlines() if line and not line.startswith("#"))
    return " ".join(kept).split()


def parse_ppm(text: str, name: str) -> TextureImage:
    """Parse ASCII PPM text into a texture whose rows are flipped vertically."""
    tokens = _tokens(text)
    if len(tokens) < 4:
        raise ValueError("PPM header is incomplete")
    try:
        width, height = int(tokens[1]), int(tokens[2])
        int(tokens[3])
        samples = [int(tok) & 0xFF for tok in tokens[4:]]
    except ValueError as exc:
        raise ValueError(f"malformed PPM data: {exc}") from exc
    if width < 0 or height < 0:
        raise ValueError("PPM dimensions must not be negative")
    row_len = 3 * width
    if len(samples) < row_len * height:
        raise ValueError("PPM pixel data is truncated")
    rows = [samples[r * row_len:(r + 1) * row_len] for r in range(height)]
    pixels = bytes(value for row in reversed(rows) for value in row)
    return TextureImage(pixels=pixels, width=width, height=height, name=name)


def load_ppm(path: Union[str, Path], name: str) -> TextureImage:
    """Read and parse an ASCII PPM file."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError("File not found!")
    text = path.read_text()
    print("Image file opened")
    return parse_ppm(text, name)
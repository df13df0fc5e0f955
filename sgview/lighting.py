"""Surface materials and light sources used by scene graph leaves."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Sequence

import numpy as np

Color = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


def _normalize(vector: np.ndarray) -> tuple[float, float, float]:
    norm = float(np.linalg.norm(vector))
    if norm == 0.0:
        return (0.0, 0.0, 0.0)
    return tuple(float(v) / norm for v in vector)  # type: ignore[return-value]


def _as_matrix(matrix: Sequence[Sequence[float]]) -> np.ndarray:
    m = np.asarray(matrix, dtype=float)
    if m.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {m.shape}")
    return m


@dataclass
class Material:
    """Phong reflection coefficients of a surface."""

    ambient: Color = (0.0, 0.0, 0.0)
    diffuse: Color = (0.0, 0.0, 0.0)
    specular: Color = (0.0, 0.0, 0.0)
    emission: Color = (0.0, 0.0, 0.0)
    shininess: float = 0.0


@dataclass
class Light:
    """A point, directional or spot light.

    A position whose fourth component is zero marks a directional light;
    a positive ``spot_angle`` (in degrees) marks a spot light.
    """

    ambient: Color = (0.0, 0.0, 0.0)
    diffuse: Color = (0.0, 0.0, 0.0)
    specular: Color = (0.0, 0.0, 0.0)
    position: Vec4 = (0.0, 0.0, 0.0, 1.0)
    spot_direction: Vec4 = (0.0, 0.0, 0.0, 0.0)
    spot_angle: float = 0.0

    def set_position(self, x: float, y: float, z: float) -> None:
        """Make this a positional light at the given point."""
        self.position = (float(x), float(y), float(z), 1.0)

    def set_direction(self, x: float, y: float, z: float) -> None:
        """Make this a directional light along the given vector."""
        self.position = (float(x), float(y), float(z), 0.0)

    def set_spot_direction(self, x: float, y: float, z: float) -> None:
        """Set the axis of the spot cone."""
        self.spot_direction = (float(x), float(y), float(z), 0.0)

    def is_active(self) -> bool:
        """Whether any of the light's colour terms is non-zero."""
        return any(math.hypot(*c) > 0.0 for c in (self.ambient, self.diffuse, self.specular))

    def transformed(self, matrix: Sequence[Sequence[float]]) -> "Light":
        """A copy of this light moved into the coordinate system of ``matrix``."""
        m = _as_matrix(matrix)
        linear = m[:3, :3]
        result = replace(self)
        pos = np.array(self.position, dtype=float)
        if pos[3] != 0.0:
            result.position = tuple(float(v) for v in m @ pos)  # type: ignore[assignment]
        else:
            result.set_direction(*_normalize(linear @ pos[:3]))
        if self.spot_angle > 0.0:
            spot = np.array(self.spot_direction[:3], dtype=float)
            result.set_spot_direction(*_normalize(linear @ spot))
        return result
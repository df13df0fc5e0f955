"""Trackball camera state driven by mouse drags."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

_SPEED_MODIFIER = 3.0
_DEFAULT_THETA_Y = math.radians(30.0)


def look_at(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix (applied as ``M @ v``) looking from eye to target."""
    eye = np.asarray(eye, dtype=float)
    target = np.asarray(target, dtype=float)
    up = np.asarray(up, dtype=float)
    f = target - eye
    f = f / np.linalg.norm(f)
    s = np.cross(f, up)
    s = s / np.linalg.norm(s)
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def _crosses_pole(before: float, after: float) -> bool:
    crossed = (
        (before >= 90.0 and after < 90.0)
        or (after >= 90.0 and before < 90.0)
        or (before >= 270.0 and after < 270.0)
        or (after >= 270.0 and before < 270.0)
    )
    wrapped = (before < 90.0 and after >= 270.0) or (after < 90.0 and before >= 270.0)
    return crossed and not wrapped


class TrackballCamera:
    """Orbits the origin; dragging with the left button rotates the view."""

    def __init__(self) -> None:
        self.theta_x = 0.0
        self.theta_y = _DEFAULT_THETA_Y
        self.up = 1
        self.button_down = False
        self.cursor: Optional[tuple[float, float]] = None

    def reset(self) -> None:
        """Return to the initial orientation."""
        self.theta_x = 0.0
        self.theta_y = _DEFAULT_THETA_Y
        self.up = 1

    def adjust_rotation(self, axis: str, delta: float) -> None:
        """Rotate about ``'x'`` or ``'y'``; the up vector flips past the poles."""
        if axis == "x":
            self.theta_x += delta
        elif axis == "y":
            while self.theta_y < 0.0:
                self.theta_y += 2 * math.pi
            before = math.fmod(math.degrees(self.theta_y), 360.0)
            after = math.fmod(math.degrees(self.theta_y + delta), 360.0)
            if _crosses_pole(before, after):
                self.up = -self.up
            self.theta_y += delta

    def eye_position(self, radius: float) -> np.ndarray:
        """Camera position on the sphere of the given radius."""
        return np.array([
            radius * math.cos(self.theta_y) * math.sin(self.theta_x),
            radius * math.sin(self.theta_y),
            radius * math.cos(self.theta_y) * math.cos(self.theta_x),
        ])

    def view_matrix(self, radius: float) -> np.ndarray:
        """View matrix looking from the eye position at the origin."""
        return look_at(self.eye_position(radius), (0.0, 0.0, 0.0), (0.0, float(self.up), 0.0))

    def set_button(self, pressed: bool) -> None:
        """Record whether the left mouse button is held."""
        self.button_down = bool(pressed)

    def move_cursor(self, x: float, y: float) -> None:
        """Update from a new cursor position, rotating while the button is held."""
        if self.button_down and self.cursor is not None:
            last_x, last_y = self.cursor
            delta_x = -(x - last_x)
            delta_y = y - last_y
            self.adjust_rotation("x", math.radians(delta_x) / _SPEED_MODIFIER)
            self.adjust_rotation("y", math.radians(delta_y) / _SPEED_MODIFIER)
        self.cursor = (x, y)
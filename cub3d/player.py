"""Player position, view direction and camera plane."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

MOVEMENT_SPEED = 0.1
DEFAULT_ROTSPEED = 0.06
CAMERA_PLANE = 0.66


@dataclass(frozen=True)
class Vec2:
    """A 2D vector in map units."""

    x: float = 0.0
    y: float = 0.0


class Orientation(Enum):
    """Direction the player faces when spawning."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


_SPAWN_VECTORS = {
    Orientation.NORTH: (Vec2(0.0, -1.0), Vec2(CAMERA_PLANE, 0.0)),
    Orientation.SOUTH: (Vec2(0.0, 1.0), Vec2(-CAMERA_PLANE, 0.0)),
    Orientation.EAST: (Vec2(1.0, 0.0), Vec2(0.0, CAMERA_PLANE)),
    Orientation.WEST: (Vec2(-1.0, 0.0), Vec2(0.0, -CAMERA_PLANE)),
}


def rotate_vector(x: float, y: float, angle: float) -> tuple[float, float]:
    """Rotate ``(x, y)`` by ``angle`` radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return x * cos_a - y * sin_a, y * cos_a + x * sin_a


@dataclass
class Player:
    """The player's state on the map."""

    position: Vec2 = field(default_factory=Vec2)
    view: Vec2 = field(default_factory=Vec2)
    cam_plane: Vec2 = field(default_factory=Vec2)
    rotspeed: float = DEFAULT_ROTSPEED

    @classmethod
    def from_spawn(cls, x: int, y: int, orientation: Orientation | str) -> Player:
        """Place the player in the centre of tile ``(x, y)`` facing ``orientation``.

        Raises ValueError for an unknown orientation.
        """
        view, plane = _SPAWN_VECTORS[Orientation(orientation)]
        return cls(position=Vec2(x + 0.5, y + 0.5), view=view, cam_plane=plane)

    def move(self, direction: str) -> None:
        """Step forward (W), left (A), back (S) or right (D) along the view."""
        vx = self.view.x * MOVEMENT_SPEED
        vy = self.view.y * MOVEMENT_SPEED
        steps = {
            "W": (vx, vy),
            "A": (vy, -vx),
            "S": (-vx, -vy),
            "D": (-vy, vx),
        }
        try:
            dx, dy = steps[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        self.position = Vec2(self.position.x + dx, self.position.y + dy)

    def rotate(self, angle: float) -> None:
        """Rotate the view by ``angle`` and the camera plane by ``-angle``."""
        self.view = Vec2(*rotate_vector(self.view.x, self.view.y, angle))
        self.cam_plane = Vec2(*rotate_vector(self.cam_plane.x, self.cam_plane.y, -angle))
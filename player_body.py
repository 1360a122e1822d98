# player_body.py
from __future__ import annotations

from collision import Rect
from settings import SimulationConfig


class PlayerBody:
    """Vertical physics for the runner. x never changes; y is the top edge, y-down."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.x = float(config.player_x)
        self.width = float(config.player_width)
        self.height = float(config.player_height)
        self.ground_y = float(config.ground_y)

        self.y = self.ground_y
        self.velocity_y = 0.0
        self.airborne = False

    def reset(self):
        self.y = self.ground_y
        self.velocity_y = 0.0
        self.airborne = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def jump(self) -> bool:
        # Edge-triggered: only from the ground, no air jumps
        if self.airborne:
            return False
        self.velocity_y = self.config.jump_impulse
        self.airborne = True
        return True

    def apply_gravity(self, dt: float = 0.0):
        # Fixed per-frame step; dt is accepted so callers can treat every body alike
        self.velocity_y += self.config.gravity
        self.y += self.velocity_y

        # Ground clamp
        if self.y >= self.ground_y:
            self.y = self.ground_y
            self.velocity_y = 0.0
            self.airborne = False

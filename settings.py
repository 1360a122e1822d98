# settings.py
from __future__ import annotations
import math
from dataclasses import dataclass, fields

from errors import TuningError

WIDTH, HEIGHT = 800, 400
TITLE = "Jumper"

# Simulation tunables (screen space, y grows downward; per-frame physics, ms timers)
GROUND_Y = 300              # player top edge when resting
GRAVITY = 0.6               # px/frame^2
JUMP_IMPULSE = -15.0        # px/frame, negative is upward
PLAYER_X = 50
PLAYER_W, PLAYER_H = 50, 50

OBSTACLE_W = 40
GROUND_OBSTACLE_H = 60
AIR_OBSTACLE_H = 40
AIR_OBSTACLE_Y_OFFSET = 120

BASE_SPEED = 6.0            # px/frame
MAX_SPEED = 15.0
SPEED_STEP = 0.5
BASE_SPAWN_INTERVAL = 1500.0    # ms
MIN_SPAWN_INTERVAL = 600.0
SPAWN_INTERVAL_STEP = 100.0
DIFFICULTY_THRESHOLD = 5000.0   # ms between ratchet steps

GROUND_CHANCE = 0.7
CLUSTER_CHANCE = 0.35
CLUSTER_OFFSET = 60.0

MAX_FRAME_DT = 100.0        # ms, longer frames are clamped

# Colors (RGBA)
BG = (22, 22, 28, 255)
GROUND = (90, 90, 110, 255)
PLAYER_COLOR = (120, 220, 255, 255)
OBST = (230, 70, 70, 255)
AIR_OBST = (255, 165, 60, 255)
OVERLAY = (0, 0, 0, 150)
PARA_BACK = (40, 40, 64, 255)
PARA_MID = (58, 58, 86, 255)
WHITE = (220, 220, 220, 255)
PINK = (255, 220, 220, 255)
GRAY = (210, 210, 210, 255)
GOLD = (255, 205, 0, 255)


@dataclass(frozen=True)
class SimulationConfig:
    field_width: float = WIDTH
    ground_y: float = GROUND_Y
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    player_x: float = PLAYER_X
    player_width: float = PLAYER_W
    player_height: float = PLAYER_H

    obstacle_width: float = OBSTACLE_W
    ground_obstacle_height: float = GROUND_OBSTACLE_H
    air_obstacle_height: float = AIR_OBSTACLE_H
    air_obstacle_y_offset: float = AIR_OBSTACLE_Y_OFFSET

    base_speed: float = BASE_SPEED
    max_speed: float = MAX_SPEED
    speed_step: float = SPEED_STEP
    base_spawn_interval: float = BASE_SPAWN_INTERVAL
    min_spawn_interval: float = MIN_SPAWN_INTERVAL
    spawn_interval_step: float = SPAWN_INTERVAL_STEP
    difficulty_threshold: float = DIFFICULTY_THRESHOLD

    ground_chance: float = GROUND_CHANCE
    cluster_chance: float = CLUSTER_CHANCE
    cluster_offset: float = CLUSTER_OFFSET

    max_frame_dt: float = MAX_FRAME_DT

    def validate(self) -> "SimulationConfig":
        for f in fields(self):
            if not math.isfinite(getattr(self, f.name)):
                raise TuningError(f"{f.name} must be a finite number")
        positive = (
            "field_width", "gravity", "player_width", "player_height",
            "obstacle_width", "ground_obstacle_height", "air_obstacle_height",
            "base_speed", "max_speed", "base_spawn_interval", "min_spawn_interval",
            "difficulty_threshold", "max_frame_dt",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise TuningError(f"{name} must be > 0")
        for name in ("speed_step", "spawn_interval_step", "cluster_offset"):
            if getattr(self, name) < 0:
                raise TuningError(f"{name} must be >= 0")
        for name in ("ground_chance", "cluster_chance"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise TuningError(f"{name} must be within [0, 1]")
        if self.jump_impulse >= 0:
            raise TuningError("jump_impulse must be negative (upward)")
        if self.base_speed > self.max_speed:
            raise TuningError("base_speed must not exceed max_speed")
        if self.base_spawn_interval < self.min_spawn_interval:
            raise TuningError("base_spawn_interval must not be below min_spawn_interval")
        return self


def config_field_names() -> tuple[str, ...]:
    return tuple(f.name for f in fields(SimulationConfig))

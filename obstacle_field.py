# obstacle_field.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from collision import Rect
from rng import RandomSource
from settings import SimulationConfig

logger = logging.getLogger(__name__)


class ObstacleCategory(str, Enum):
    GROUND = "ground"
    AIR = "air"


@dataclass
class Obstacle:
    category: ObstacleCategory
    x: float
    y: float
    width: float
    height: float
    speed: float            # frozen at spawn time
    scored: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width


class ObstacleField:
    """Live obstacles in spawn order, plus the spawn timer that feeds them."""

    def __init__(self, config: SimulationConfig, rng: RandomSource):
        self.config = config
        self.rng = rng
        self._obstacles: list[Obstacle] = []
        self.spawn_timer = 0.0

    @property
    def obstacles(self) -> tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    def clear(self):
        self._obstacles.clear()
        self.spawn_timer = 0.0

    # ---------- Spawning ----------
    def _draw_category(self) -> ObstacleCategory:
        if self.rng.random() < self.config.ground_chance:
            return ObstacleCategory.GROUND
        return ObstacleCategory.AIR

    def spawn(self, category: ObstacleCategory, x: float, speed: float) -> Obstacle:
        cfg = self.config
        if category is ObstacleCategory.GROUND:
            # Bottom flush with the player's resting bottom edge
            h = cfg.ground_obstacle_height
            y = cfg.ground_y + cfg.player_height - h
        else:
            h = cfg.air_obstacle_height
            y = cfg.ground_y - cfg.air_obstacle_y_offset
        ob = Obstacle(category=category, x=float(x), y=float(y),
                      width=float(cfg.obstacle_width), height=float(h), speed=float(speed))
        self._obstacles.append(ob)
        logger.debug("spawned %s obstacle at x=%.1f speed=%.1f", category.value, ob.x, ob.speed)
        return ob

    def _spawn_wave(self, speed: float):
        x = self.config.field_width
        category = self._draw_category()
        self.spawn(category, x, speed)
        # Cluster members share the lead obstacle's category
        if self.rng.random() < self.config.cluster_chance:
            self.spawn(category, x + self.config.cluster_offset, speed)

    # ---------- Per-frame ----------
    def tick(self, dt: float, current_speed: float, spawn_interval: float):
        self.spawn_timer += dt
        if self.spawn_timer >= spawn_interval:
            self._spawn_wave(current_speed)
            self.spawn_timer = 0.0

        for ob in self._obstacles:
            ob.x -= ob.speed

        self._cull()

    def _cull(self):
        kept = [ob for ob in self._obstacles if ob.right >= 0]
        culled = len(self._obstacles) - len(kept)
        if culled:
            logger.debug("culled %d obstacle(s)", culled)
            self._obstacles = kept

    def collect_passed(self, player_x: float) -> int:
        """Mark obstacles whose right edge is behind player_x as scored; return how many were new."""
        passed = 0
        for ob in self._obstacles:
            if not ob.scored and ob.right < player_x:
                ob.scored = True
                passed += 1
        return passed

# difficulty.py
from __future__ import annotations
import logging
from dataclasses import dataclass

from settings import SimulationConfig

logger = logging.getLogger(__name__)


@dataclass
class DifficultyState:
    speed: float
    spawn_interval: float
    accumulator: float = 0.0


class DifficultyController:
    """Ratchets obstacle speed up and spawn interval down once per elapsed threshold."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.state = DifficultyState(speed=config.base_speed,
                                     spawn_interval=config.base_spawn_interval)

    @property
    def speed(self) -> float:
        return self.state.speed

    @property
    def spawn_interval(self) -> float:
        return self.state.spawn_interval

    def reset(self):
        self.state = DifficultyState(speed=self.config.base_speed,
                                     spawn_interval=self.config.base_spawn_interval)

    def tick(self, dt: float) -> int:
        cfg = self.config
        st = self.state
        st.accumulator += dt
        steps, st.accumulator = divmod(st.accumulator, cfg.difficulty_threshold)
        steps = int(steps)
        if steps:
            st.speed = min(st.speed + cfg.speed_step * steps, cfg.max_speed)
            st.spawn_interval = max(st.spawn_interval - cfg.spawn_interval_step * steps,
                                    cfg.min_spawn_interval)
            logger.debug("difficulty +%d: speed=%.1f interval=%.0f",
                         steps, st.speed, st.spawn_interval)
        return steps

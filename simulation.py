# simulation.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from clock import sanitize_delta
from collision import first_hit
from difficulty import DifficultyController
from errors import HighScoreSaveError
from high_score_store import HighScoreStore
from obstacle_field import ObstacleCategory, ObstacleField
from player_body import PlayerBody
from rng import RandomSource
from settings import SimulationConfig

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class BodyView:
    x: float
    y: float
    width: float
    height: float
    airborne: bool


@dataclass(frozen=True)
class ObstacleView:
    category: ObstacleCategory
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class RenderSnapshot:
    state: RunState
    score: int
    best_score: int
    speed: float
    spawn_interval: float
    player: BodyView
    obstacles: tuple[ObstacleView, ...]


class SimulationCore:
    """
    Owns one run of the game: player, obstacles, difficulty, score and best score.
    The host calls tick(dt) once per frame; input is queued and applied at the
    start of the following tick.
    """

    def __init__(self, config: SimulationConfig, rng: RandomSource, store: HighScoreStore):
        self.config = config
        self.store = store
        self.player = PlayerBody(config)
        self.field = ObstacleField(config, rng)
        self.difficulty = DifficultyController(config)

        self.state = RunState.PLAYING
        self.score = 0
        self.best_score = store.get()

        self._jump_requested = False
        self._restart_requested = False
        logger.info("run started (best=%d)", self.best_score)

    # ---------- Input ----------
    def request_jump(self):
        if self.state is RunState.PLAYING:
            self._jump_requested = True

    def request_restart(self):
        if self.state is RunState.GAME_OVER:
            self._restart_requested = True

    # ---------- State ----------
    def restart(self):
        self.player.reset()
        self.field.clear()
        self.difficulty.reset()
        self.score = 0
        self.state = RunState.PLAYING
        self._jump_requested = False
        self._restart_requested = False
        logger.info("run restarted (best=%d)", self.best_score)

    def _game_over(self):
        self.state = RunState.GAME_OVER
        self._jump_requested = False
        logger.info("game over: score=%d best=%d", self.score, self.best_score)
        if self.score > self.best_score:
            self.best_score = self.score
            logger.info("new best score %d", self.best_score)
            try:
                self.store.set(self.best_score)
            except HighScoreSaveError as e:
                # Keep the in-memory best; the loop must keep running
                logger.error("%s", e)

    # ---------- Per-frame ----------
    def tick(self, dt: float) -> RenderSnapshot:
        if self._restart_requested:
            self.restart()

        if self.state is RunState.GAME_OVER:
            return self.snapshot()

        dt = sanitize_delta(dt, self.config.max_frame_dt)
        if dt == 0.0:
            return self.snapshot()

        if self._jump_requested:
            self._jump_requested = False
            self.player.jump()

        self.player.apply_gravity(dt)
        self.difficulty.tick(dt)
        self.field.tick(dt, self.difficulty.speed, self.difficulty.spawn_interval)

        if first_hit(self.player.rect, self.field.obstacles) is not None:
            self._game_over()
        else:
            self.score += self.field.collect_passed(self.player.x)

        return self.snapshot()

    def snapshot(self) -> RenderSnapshot:
        p = self.player
        return RenderSnapshot(
            state=self.state,
            score=self.score,
            best_score=self.best_score,
            speed=self.difficulty.speed,
            spawn_interval=self.difficulty.spawn_interval,
            player=BodyView(x=p.x, y=p.y, width=p.width, height=p.height, airborne=p.airborne),
            obstacles=tuple(
                ObstacleView(category=o.category, x=o.x, y=o.y, width=o.width, height=o.height)
                for o in self.field.obstacles
            ),
        )

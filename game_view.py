# game_view.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable
import math
import random
import arcade

from settings import (
    WIDTH, HEIGHT,
    GROUND, PLAYER_COLOR, OBST, AIR_OBST, OVERLAY,
    WHITE, PINK, GRAY, GOLD,
)
from clock import Clock
from obstacle_field import ObstacleCategory
from pause_view import PauseView
from simulation import RenderSnapshot, RunState, SimulationCore

CoreFactory = Callable[[], SimulationCore]


# -------------------------------
# Lightweight particle system
# -------------------------------
@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float         # remaining seconds
    start_life: float   # initial life (for fade)
    radius: float
    color: tuple[int, int, int, int]

    def update(self, dt: float, gravity: float = 0.0):
        self.life -= dt
        self.vy += gravity * dt
        self.x += self.vx * dt
        self.y += self.vy * dt

    @property
    def alive(self) -> bool:
        return self.life > 0

    def draw(self, dx: float = 0.0, dy: float = 0.0):
        # Fade alpha as life decreases
        t = max(0.0, min(1.0, self.life / self.start_life))
        r, g, b, a = self.color
        arcade.draw_circle_filled(self.x + dx, self.y + dy, self.radius, (r, g, b, int(a * t)))


def to_screen_bottom(y: float, height: float) -> float:
    """Core rects are y-down with y at the top edge; arcade wants the bottom edge, y-up."""
    return HEIGHT - (y + height)


class GameView(arcade.View):
    """Host shell: feeds frame time into the core, forwards input, paints snapshots."""

    def __init__(self, core_factory: CoreFactory):
        super().__init__()
        self.core_factory = core_factory
        self.core = core_factory()
        self.clock = Clock(max_dt=self.core.config.max_frame_dt)
        self._elapsed_ms = 0.0
        self.snapshot: RenderSnapshot = self.core.snapshot()

        # --- Text ---
        self.score_text = arcade.Text("", 16, HEIGHT - 32, WHITE, 18)
        self.best_text = arcade.Text("", 16, HEIGHT - 56, GOLD, 14)
        self.speed_text = arcade.Text("", WIDTH - 16, HEIGHT - 32, GRAY, 14, anchor_x="right")
        self.dead_text = arcade.Text("GAME OVER", WIDTH / 2, HEIGHT / 2 + 30, PINK, 32, anchor_x="center")
        self.help_text = arcade.Text("SPACE/Click/R = Restart   M = Menu",
                                     WIDTH / 2, HEIGHT / 2 - 10, GRAY, 16, anchor_x="center")

        # --- Particles & screen shake ---
        self.death_particles: list[Particle] = []
        self.shake_time = 0.0         # remaining shake time
        self.shake_intensity = 0.0    # px amplitude

    # ---------- Effects ----------
    def _emit_death_burst(self, x: float, y: float):
        for _ in range(40):
            ang = random.random() * math.tau
            spd = 150 + random.random() * 250
            vx = math.cos(ang) * spd
            vy = math.sin(ang) * spd
            life = 0.6 + random.random() * 0.4
            r = 2 + random.random() * 3
            col = random.choice([(240, 80, 80, 240), (255, 255, 255, 220)])
            self.death_particles.append(Particle(x, y, vx, vy, life, life, r, col))
        self.shake_time = 0.35
        self.shake_intensity = 6.0

    def _update_effects(self, dt: float):
        # Death burst (mild downward gravity)
        for p in list(self.death_particles):
            p.update(dt, gravity=-300.0)
            if not p.alive:
                self.death_particles.remove(p)
        if self.shake_time > 0:
            self.shake_time = max(0.0, self.shake_time - dt)

    # ---------- Input ----------
    def _primary_action(self):
        if self.snapshot.state is RunState.GAME_OVER:
            self.core.request_restart()
        else:
            self.core.request_jump()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.SPACE, arcade.key.UP):
            self._primary_action()
        elif symbol == arcade.key.R:
            self.core.request_restart()
        elif symbol == arcade.key.ESCAPE:
            self.window.show_view(PauseView(self))
        elif symbol in (arcade.key.M,):
            from menu_view import MenuView
            self.window.show_view(MenuView(self.core_factory))

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self._primary_action()

    # ---------- Update ----------
    def on_update(self, dt: float):
        self._elapsed_ms += dt * 1000.0
        was_playing = self.snapshot.state is RunState.PLAYING

        self.snapshot = self.core.tick(self.clock.tick(self._elapsed_ms))

        if was_playing and self.snapshot.state is RunState.GAME_OVER:
            p = self.snapshot.player
            self._emit_death_burst(p.x + p.width / 2,
                                   to_screen_bottom(p.y, p.height) + p.height / 2)
        elif not was_playing and self.snapshot.state is RunState.PLAYING:
            self.death_particles.clear()
            self.shake_time = 0.0

        self._update_effects(dt)

    # ---------- Draw ----------
    def on_draw(self):
        self.clear()
        snap = self.snapshot

        # Compute shake offset (world only; UI stays stable)
        dx = dy = 0.0
        if self.shake_time > 0.0:
            amp = self.shake_intensity * (self.shake_time / 0.35)
            dx = random.uniform(-amp, amp)
            dy = random.uniform(-amp, amp)

        # Ground: everything below the player's resting bottom edge
        ground_top = to_screen_bottom(self.core.config.ground_y, snap.player.height)
        arcade.draw_lbwh_rectangle_filled(0, dy, WIDTH, ground_top, GROUND)

        p = snap.player
        arcade.draw_lbwh_rectangle_filled(p.x + dx, to_screen_bottom(p.y, p.height) + dy,
                                          p.width, p.height, PLAYER_COLOR)

        for ob in snap.obstacles:
            color = OBST if ob.category is ObstacleCategory.GROUND else AIR_OBST
            arcade.draw_lbwh_rectangle_filled(ob.x + dx, to_screen_bottom(ob.y, ob.height) + dy,
                                              ob.width, ob.height, color)

        for part in self.death_particles:
            part.draw(dx, dy)

        # UI (no shake)
        self.score_text.text = f"Score: {snap.score}"
        self.best_text.text = f"Best: {snap.best_score}"
        self.speed_text.text = f"Speed: {snap.speed:.1f}"
        self.score_text.draw()
        self.best_text.draw()
        self.speed_text.draw()

        if snap.state is RunState.GAME_OVER:
            arcade.draw_lbwh_rectangle_filled(0, 0, WIDTH, HEIGHT, OVERLAY)
            self.dead_text.draw()
            self.help_text.draw()

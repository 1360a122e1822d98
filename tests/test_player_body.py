"""Tests for player_body.py - gravity integration, ground clamp and jump guard."""
import pytest

from player_body import PlayerBody


@pytest.mark.unit
class TestPlayerBodyJump:

    def test_starts_grounded(self, config):
        body = PlayerBody(config)

        assert body.y == config.ground_y
        assert body.velocity_y == 0.0
        assert body.airborne is False

    def test_jump_from_rest_sets_impulse(self, config):
        body = PlayerBody(config)

        assert body.jump() is True
        assert body.velocity_y == config.jump_impulse
        assert body.airborne is True

    def test_second_jump_is_ignored_while_airborne(self, config):
        body = PlayerBody(config)
        body.jump()

        assert body.jump() is False
        assert body.velocity_y == config.jump_impulse
        assert body.airborne is True

    def test_no_air_jump_mid_arc(self, config):
        body = PlayerBody(config)
        body.jump()
        for _ in range(5):
            body.apply_gravity(16.0)
        v = body.velocity_y

        assert body.jump() is False
        assert body.velocity_y == v


@pytest.mark.unit
class TestPlayerBodyGravity:

    def test_grounded_body_stays_on_ground(self, config):
        body = PlayerBody(config)
        body.apply_gravity(16.0)

        assert body.y == config.ground_y
        assert body.velocity_y == 0.0
        assert body.airborne is False

    def test_gravity_is_a_fixed_per_frame_step(self, config):
        a = PlayerBody(config)
        b = PlayerBody(config)
        a.jump()
        b.jump()
        a.apply_gravity(1.0)
        b.apply_gravity(100.0)

        assert a.y == b.y
        assert a.velocity_y == pytest.approx(config.jump_impulse + config.gravity)
        assert a.y == pytest.approx(config.ground_y + config.jump_impulse + config.gravity)

    def test_jump_arc_lands_and_clears_airborne(self, config):
        body = PlayerBody(config)
        body.jump()
        frames = 0
        while body.airborne and frames < 500:
            body.apply_gravity(16.0)
            frames += 1

        assert body.airborne is False
        assert body.y == config.ground_y
        assert body.velocity_y == 0.0
        # -15 impulse at 0.6/frame: roughly 50 frames in the air
        assert 45 <= frames <= 55

    @pytest.mark.parametrize("frames", [0, 1, 10, 25, 49, 50, 51, 200])
    @pytest.mark.parametrize("dt", [0.0, 1.0, 16.7, 100.0])
    def test_never_below_ground(self, config, frames, dt):
        body = PlayerBody(config)
        body.jump()
        for _ in range(frames):
            body.apply_gravity(dt)
            assert body.y <= config.ground_y

    def test_large_downward_velocity_is_clamped(self, config):
        body = PlayerBody(config)
        body.y = config.ground_y - 10
        body.velocity_y = 500.0
        body.airborne = True
        body.apply_gravity(16.0)

        assert body.y == config.ground_y
        assert body.velocity_y == 0.0
        assert body.airborne is False

    def test_reset_returns_to_rest(self, config):
        body = PlayerBody(config)
        body.jump()
        body.apply_gravity(16.0)
        body.reset()

        assert (body.y, body.velocity_y, body.airborne) == (config.ground_y, 0.0, False)

    def test_rect_tracks_position(self, config):
        body = PlayerBody(config)
        r = body.rect

        assert (r.x, r.y, r.width, r.height) == (50, 300, 50, 50)

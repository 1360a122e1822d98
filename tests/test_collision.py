"""Tests for collision.py - strict AABB overlap."""
import pytest

from collision import Rect, first_hit, overlaps


class Box:
    def __init__(self, name, rect):
        self.name = name
        self.rect = rect


@pytest.mark.unit
class TestOverlaps:

    def test_player_vs_obstacle_scenario(self):
        player = Rect(50, 300, 50, 50)
        obstacle = Rect(60, 300, 40, 60)

        assert overlaps(player, obstacle) is True
        assert overlaps(player, Rect(200, 300, 40, 60)) is False

    @pytest.mark.parametrize("a,b", [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
        (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)),
        (Rect(0, 0, 10, 10), Rect(0, 20, 10, 10)),
        (Rect(0, 0, 100, 100), Rect(40, 40, 5, 5)),
        (Rect(-30, 10, 40, 60), Rect(0, 0, 50, 50)),
    ])
    def test_symmetry(self, a, b):
        assert overlaps(a, b) == overlaps(b, a)

    def test_positive_area_rect_overlaps_itself(self):
        r = Rect(12.5, 7.0, 3.0, 4.0)

        assert overlaps(r, r) is True

    def test_zero_area_rect_never_overlaps(self):
        line = Rect(5, 5, 0, 10)

        assert overlaps(line, line) is False
        assert overlaps(line, Rect(0, 0, 10, 20)) is False

    @pytest.mark.parametrize("other", [
        Rect(10, 0, 10, 10),   # touching on the right
        Rect(-10, 0, 10, 10),  # touching on the left
        Rect(0, 10, 10, 10),   # touching below
        Rect(0, -10, 10, 10),  # touching above
    ])
    def test_touching_edges_do_not_overlap(self, other):
        assert overlaps(Rect(0, 0, 10, 10), other) is False

    def test_containment_overlaps(self):
        assert overlaps(Rect(0, 0, 100, 100), Rect(10, 10, 1, 1)) is True


@pytest.mark.unit
class TestFirstHit:

    def test_returns_first_overlapping_in_order(self):
        boxes = [Box("far", Rect(500, 0, 10, 10)),
                 Box("a", Rect(5, 5, 10, 10)),
                 Box("b", Rect(0, 0, 10, 10))]

        assert first_hit(Rect(0, 0, 10, 10), boxes).name == "a"

    def test_none_when_clear(self):
        assert first_hit(Rect(0, 0, 10, 10), [Box("x", Rect(50, 50, 1, 1))]) is None
        assert first_hit(Rect(0, 0, 10, 10), []) is None

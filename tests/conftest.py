"""Root conftest for all tests - shared fixtures and configuration."""
import sys
import pytest
from pathlib import Path

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from settings import SimulationConfig  # noqa: E402


class ScriptedRandom:
    """RandomSource that replays a fixed script, then repeats `default`."""

    def __init__(self, values=(), default=0.99):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture
def config():
    """Default tuning, validated."""
    return SimulationConfig().validate()


@pytest.fixture
def no_cluster_rng():
    """Every spawn is a ground obstacle and never clustered."""
    return ScriptedRandom(default=0.5)


@pytest.fixture
def scripted_random():
    return ScriptedRandom

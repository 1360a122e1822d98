# errors.py
class JumperError(Exception):
    """Base class for errors raised outside the per-frame simulation."""


class TuningError(JumperError):
    """Raised when a tuning file or SimulationConfig holds invalid values."""


class HighScoreSaveError(JumperError):
    """Raised when the best score cannot be written to disk."""

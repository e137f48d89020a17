"""Autosave checkpoint thresholds."""

from dataclasses import dataclass
from datetime import timedelta

DEFAULT_IDLE_THRESHOLD = timedelta(minutes=5)
DEFAULT_FORCE_THRESHOLD = timedelta(minutes=15)


@dataclass(frozen=True)
class CheckpointThresholds:
    """Idle and force windows of the autosave policy."""

    idle: timedelta = DEFAULT_IDLE_THRESHOLD
    force: timedelta = DEFAULT_FORCE_THRESHOLD

    def __post_init__(self) -> None:
        if self.idle <= timedelta(0):
            raise ValueError("Idle threshold must be positive")
        if self.force <= timedelta(0):
            raise ValueError("Force threshold must be positive")

    @classmethod
    def from_minutes(cls, idle: float, force: float) -> "CheckpointThresholds":
        return cls(idle=timedelta(minutes=idle), force=timedelta(minutes=force))

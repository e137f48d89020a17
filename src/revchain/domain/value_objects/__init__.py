"""Domain value objects."""

from revchain.domain.value_objects.checkpoint_thresholds import CheckpointThresholds

__all__ = [
    "CheckpointThresholds",
]

"""Unit tests for the autosave policy and its thresholds."""

from datetime import UTC, datetime, timedelta

import pytest

from revchain.domain.autosave_policy import should_checkpoint
from revchain.domain.value_objects import CheckpointThresholds

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)
IDLE = timedelta(minutes=5)
FORCE = timedelta(minutes=15)


def test_first_save_always_checkpoints() -> None:
    assert should_checkpoint(None, None, NOW, IDLE, FORCE)
    assert should_checkpoint(NOW, None, NOW, IDLE, FORCE)


def test_continuous_editing_does_not_checkpoint() -> None:
    assert not should_checkpoint(
        NOW - timedelta(minutes=1), NOW - timedelta(minutes=3), NOW, IDLE, FORCE
    )


def test_idle_gap_checkpoints_before_force_window() -> None:
    """Idle gap alone fires even though the force window has not elapsed."""
    assert should_checkpoint(
        NOW - timedelta(minutes=6), NOW - timedelta(minutes=7), NOW, IDLE, FORCE
    )


def test_force_window_checkpoints_during_continuous_editing() -> None:
    assert should_checkpoint(
        NOW - timedelta(seconds=30), NOW - timedelta(minutes=16), NOW, IDLE, FORCE
    )


def test_thresholds_are_exclusive() -> None:
    assert not should_checkpoint(NOW - IDLE, NOW - timedelta(minutes=1), NOW, IDLE, FORCE)
    assert not should_checkpoint(NOW - timedelta(minutes=1), NOW - FORCE, NOW, IDLE, FORCE)


def test_missing_last_edit_falls_back_to_force_window() -> None:
    assert not should_checkpoint(None, NOW - timedelta(minutes=10), NOW, IDLE, FORCE)
    assert should_checkpoint(None, NOW - timedelta(minutes=20), NOW, IDLE, FORCE)


def test_default_thresholds_are_five_and_fifteen_minutes() -> None:
    assert not should_checkpoint(
        NOW - timedelta(minutes=4), NOW - timedelta(minutes=14), NOW
    )
    assert should_checkpoint(NOW - timedelta(minutes=5, seconds=1), NOW, NOW)


def test_custom_thresholds() -> None:
    thresholds = CheckpointThresholds.from_minutes(idle=10, force=20)
    last_edit = NOW - timedelta(minutes=8)
    last_checkpoint = NOW - timedelta(minutes=18)
    assert should_checkpoint(last_edit, last_checkpoint, NOW, IDLE, FORCE)
    assert not should_checkpoint(
        last_edit, last_checkpoint, NOW, thresholds.idle, thresholds.force
    )


def test_thresholds_must_be_positive() -> None:
    with pytest.raises(ValueError, match="Idle threshold"):
        CheckpointThresholds(idle=timedelta(0))
    with pytest.raises(ValueError, match="Force threshold"):
        CheckpointThresholds(force=timedelta(minutes=-1))

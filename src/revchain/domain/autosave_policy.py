"""Autosave policy - decides when a save becomes a revision boundary."""

from datetime import datetime, timedelta

from revchain.domain.value_objects.checkpoint_thresholds import (
    DEFAULT_FORCE_THRESHOLD,
    DEFAULT_IDLE_THRESHOLD,
)


def should_checkpoint(
    last_edited_at: datetime | None,
    last_checkpoint_at: datetime | None,
    now: datetime,
    idle_threshold: timedelta = DEFAULT_IDLE_THRESHOLD,
    force_threshold: timedelta = DEFAULT_FORCE_THRESHOLD,
) -> bool:
    """Return True if a save arriving at `now` should commit a revision.

    Fires on the first save ever, after an idle gap longer than
    idle_threshold since the previous edit, or once force_threshold has
    passed since the last checkpoint during continuous editing.
    """
    if last_checkpoint_at is None:
        return True
    if last_edited_at is not None and now - last_edited_at > idle_threshold:
        return True
    return now - last_checkpoint_at > force_threshold

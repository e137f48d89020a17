"""Unit tests for settings."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from revchain.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ledger defaults: 5/15 minute windows, 50 revisions, deterministic exact patching."""
    for name in ("REVISION_IDLE_MINUTES", "REVISION_FORCE_MINUTES", "REVISION_MAX_COUNT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.revision_idle_minutes == 5
    assert settings.revision_force_minutes == 15
    assert settings.revision_max_count == 50
    assert settings.diff_timeout == 0.0
    assert settings.patch_match_threshold == 0.0
    assert settings.checkpoint_thresholds.idle == timedelta(minutes=5)
    assert settings.checkpoint_thresholds.force == timedelta(minutes=15)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVISION_IDLE_MINUTES", "10")
    monkeypatch.setenv("revision_force_minutes", "20")
    monkeypatch.setenv("REVISION_MAX_COUNT", "7")
    settings = Settings(_env_file=None)
    assert settings.checkpoint_thresholds.idle == timedelta(minutes=10)
    assert settings.checkpoint_thresholds.force == timedelta(minutes=20)
    assert settings.revision_max_count == 7


@pytest.mark.parametrize(
    "overrides",
    [
        {"revision_idle_minutes": 0},
        {"revision_force_minutes": -5},
        {"revision_max_count": 0},
        {"patch_match_threshold": 1.5},
        {"db_pool_min_size": 5, "db_pool_max_size": 2},
    ],
)
def test_invalid_values_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)

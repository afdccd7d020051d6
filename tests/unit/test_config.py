"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from decimal import Decimal

from wageproj.core.config import AppSettings, DataConfig, ProjectionPolicy


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.fallback_min_wage == Decimal("30")
    assert settings.fallback_max_wage == Decimal("80")


def test_policy_defaults():
    policy = ProjectionPolicy()
    assert policy.use_new_baseline_for_steps is True
    assert policy.range_increase_reports_own_percentage is True
    assert policy.snap_tolerance == Decimal("0.03")
    assert policy.snap_cumulative is True


def test_policy_env_override(monkeypatch):
    monkeypatch.setenv("WAGEPROJ_POLICY_SNAP_TOLERANCE", "0.05")
    monkeypatch.setenv("WAGEPROJ_POLICY_USE_NEW_BASELINE_FOR_STEPS", "false")
    policy = ProjectionPolicy()
    assert policy.snap_tolerance == Decimal("0.05")
    assert policy.use_new_baseline_for_steps is False


def test_data_config_points_at_bundled_files():
    config = DataConfig()
    assert config.current_path.is_file()
    assert config.caps_path.is_file()
    assert config.baseline_path is not None and config.baseline_path.is_file()
    assert config.schedule_path is None

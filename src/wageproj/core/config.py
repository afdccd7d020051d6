"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_BUNDLED_DATA = Path(__file__).resolve().parent.parent / "data"


class ProjectionPolicy(BaseSettings):
    """Business policy knobs that differ between bargaining-unit deployments."""

    model_config = {"env_prefix": "WAGEPROJ_POLICY_", "frozen": True}

    # Step-based jobs start from the post-adjustment ("new") table, not the current one
    use_new_baseline_for_steps: bool = True
    # First event reports its change vs. the original wage as its step percentage
    range_increase_reports_own_percentage: bool = True
    snap_tolerance: Decimal = Decimal("0.03")
    snap_cumulative: bool = True


class DataConfig(BaseSettings):
    """Locations of the three reference-data documents."""

    model_config = {"env_prefix": "WAGEPROJ_DATA_"}

    current_path: Path = _BUNDLED_DATA / "current_salary.json"
    baseline_path: Path | None = _BUNDLED_DATA / "new_salary.json"  # None: reuse current
    caps_path: Path = _BUNDLED_DATA / "max_salary.json"
    schedule_path: Path | None = None  # None: built-in 2024 agreement schedule


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "WAGEPROJ_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    # Bounds quoted in the advisory when no range-based job is selected
    fallback_min_wage: Decimal = Decimal("30")
    fallback_max_wage: Decimal = Decimal("80")

    policy: ProjectionPolicy = ProjectionPolicy()
    data: DataConfig = DataConfig()

"""Reference data store and its loaders."""

from __future__ import annotations

from wageproj.core.config import AppSettings
from wageproj.reference.loader import load_reference_data
from wageproj.reference.store import ReferenceDataStore


def create_reference_store(settings: AppSettings | None = None) -> ReferenceDataStore:
    """Load the reference tables named in application settings."""
    if settings is None:
        settings = AppSettings()

    return load_reference_data(
        current_path=settings.data.current_path,
        caps_path=settings.data.caps_path,
        baseline_path=settings.data.baseline_path,
    )


__all__ = ["ReferenceDataStore", "create_reference_store", "load_reference_data"]

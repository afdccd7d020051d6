"""Type aliases and sentinels used across the wage projection package."""

from __future__ import annotations

from typing import Any, Final

JsonDict = dict[str, Any]

NOT_AVAILABLE: Final = "N/A"

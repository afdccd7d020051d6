"""The ordered, immutable adjustment schedule."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import ValidationError

from wageproj.core.exceptions import ScheduleConfigError
from wageproj.core.types import JsonDict
from wageproj.models.schedule import AdjustmentEvent, SalaryEvent


class AdjustmentSchedule:
    """Adjustment events applied strictly in declared order.

    Event names are unique; a duplicate is a configuration error raised at
    construction time.
    """

    def __init__(self, events: Iterable[AdjustmentEvent]) -> None:
        self._events: tuple[AdjustmentEvent, ...] = tuple(events)
        self._positions: dict[str, int] = {}
        for position, event in enumerate(self._events):
            if event.name in self._positions:
                raise ScheduleConfigError(f"Duplicate adjustment event {event.name!r}")
            self._positions[event.name] = position

    def index_of(self, event_name: str) -> int | None:
        return self._positions.get(event_name)

    def events_up_to(self, index: int) -> tuple[AdjustmentEvent, ...]:
        """Events from position 0 through ``index`` inclusive."""
        if not 0 <= index < len(self._events):
            raise IndexError(f"schedule position {index} out of range")
        return self._events[: index + 1]

    def names(self) -> list[str]:
        return [event.name for event in self._events]

    def groups(self) -> dict[str, list[AdjustmentEvent]]:
        """Events bucketed by display group, both in schedule order."""
        grouped: dict[str, list[AdjustmentEvent]] = {}
        for event in self._events:
            grouped.setdefault(event.group, []).append(event)
        return grouped

    def __iter__(self) -> Iterator[AdjustmentEvent]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __getitem__(self, index: int) -> AdjustmentEvent:
        return self._events[index]

    @classmethod
    def from_document(cls, rows: list[JsonDict]) -> AdjustmentSchedule:
        try:
            return cls(AdjustmentEvent.model_validate(row) for row in rows)
        except ValidationError as exc:
            raise ScheduleConfigError(f"Invalid adjustment event: {exc}") from exc


def load_schedule(path: Path) -> AdjustmentSchedule:
    """Load a schedule from a JSON array of event objects."""
    try:
        rows = json.loads(Path(path).read_text(encoding="utf-8"), parse_float=Decimal)
    except (OSError, json.JSONDecodeError) as exc:
        raise ScheduleConfigError(f"Cannot read schedule {path}: {exc}") from exc
    if not isinstance(rows, list):
        raise ScheduleConfigError(f"Schedule {path} must be a JSON array")
    return AdjustmentSchedule.from_document(rows)


def _event(name: SalaryEvent, factor: str, cap_column: SalaryEvent, group: str) -> AdjustmentEvent:
    return AdjustmentEvent(
        name=name.value, factor=Decimal(factor), cap_column=cap_column.value, group=group,
    )


# 2024 agreement: anniversary steps are capped by the same year's COLA column
DEFAULT_SCHEDULE = AdjustmentSchedule([
    _event(SalaryEvent.DEC_2024_RANGE_INCREASE, "1.00", SalaryEvent.DEC_2024_RANGE_INCREASE,
           "Immediate Range Increase"),
    _event(SalaryEvent.DEC_2024_9PERCENT_COLA, "1.09", SalaryEvent.DEC_2024_9PERCENT_COLA,
           "Contract Year 1"),
    _event(SalaryEvent.NEXT_ANNIVERSARY_2024, "1.04", SalaryEvent.DEC_2024_9PERCENT_COLA,
           "Contract Year 1"),
    _event(SalaryEvent.DEC_2025_5PERCENT_COLA, "1.05", SalaryEvent.DEC_2025_5PERCENT_COLA,
           "Contract Year 2"),
    _event(SalaryEvent.NEXT_ANNIVERSARY_2025, "1.04", SalaryEvent.DEC_2025_5PERCENT_COLA,
           "Contract Year 2"),
    _event(SalaryEvent.DEC_2026_5PERCENT_COLA, "1.05", SalaryEvent.DEC_2026_5PERCENT_COLA,
           "Contract Year 3"),
    _event(SalaryEvent.NEXT_ANNIVERSARY_2026, "1.04", SalaryEvent.DEC_2026_5PERCENT_COLA,
           "Contract Year 3"),
])

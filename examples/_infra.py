from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class SensorFault(Exception):
    sensor_id: str
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"{self.sensor_id}: {self.message}"


@dataclass(frozen=True, slots=True)
class Reading:
    sensor_id: str
    celsius: float


@dataclass(slots=True)
class FakeSensor:
    """Two-slot event source: readings on slot 0, faults on slot 1."""

    sensor_id: str
    script: list[float | None] = field(default_factory=list)

    def __call__(
        self,
        on_reading: Callable[[Reading], object],
        on_fault: Callable[[SensorFault], object],
    ) -> None:
        for value in self.script:
            if value is None:
                on_fault(SensorFault(self.sensor_id, "no signal"))
            else:
                on_reading(Reading(self.sensor_id, value))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")

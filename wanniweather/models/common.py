"""Common types shared across models."""

from enum import StrEnum


class Unit(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temp_symbol(self) -> str:
        return "°C" if self is Unit.METRIC else "°F"

    @property
    def speed_label(self) -> str:
        return "m/s" if self is Unit.METRIC else "mph"

    def toggled(self) -> "Unit":
        return Unit.IMPERIAL if self is Unit.METRIC else Unit.METRIC

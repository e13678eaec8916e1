"""Hourly tariffs with time-limited percentage discounts."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class TariffPeriod(IntEnum):
    PEAK = 0
    OFF_PEAK = 1
    HOLIDAY = 2


@dataclass(frozen=True)
class _Discount:
    percent: float
    start: float
    end: float

    def covers(self, moment: float) -> bool:
        return self.start <= moment <= self.end


def _now(now: float | None) -> float:
    return time.time() if now is None else now


class Tariff:
    """An hourly rate; the largest active discount applies.

    A tariff applies to every seat type unless *seat_types* limits it.
    """

    def __init__(
        self,
        id: int,
        name: str,
        base_rate: float,
        period: TariffPeriod = TariffPeriod.PEAK,
        seat_types: Iterable[int] | None = None,
    ) -> None:
        if base_rate < 0:
            raise ValueError("Base rate cannot be negative")
        self.id = id
        self.name = name
        self._base_rate = base_rate
        self.period = TariffPeriod(period)
        self._discounts: list[_Discount] = []
        self._seat_types: frozenset[int] | None = (
            None if seat_types is None else frozenset(int(t) for t in seat_types)
        )

    @property
    def base_rate(self) -> float:
        return self._base_rate

    @base_rate.setter
    def base_rate(self, new_rate: float) -> None:
        if new_rate < 0:
            raise ValueError("Base rate cannot be negative")
        self._base_rate = new_rate

    def calculate_cost(self, duration: float, now: float | None = None) -> float:
        """Cost of *duration* seconds at the rate in effect at *now*."""
        return self.current_rate(now) * (duration / 3600.0)

    def cost_between(self, start: float, end: float, now: float | None = None) -> float:
        """Cost of the span from *start* to *end*."""
        if start >= end:
            raise ValueError("Start time must be before end time")
        return self.calculate_cost(end - start, now)

    def add_discount(self, percent: float, start: float, end: float) -> None:
        if percent < 0 or percent > 100:
            raise ValueError("Discount must be between 0 and 100 percent")
        if start >= end:
            raise ValueError("Discount period start must be before end")
        self._discounts.append(_Discount(percent, start, end))

    def is_discount_active(self, now: float | None = None) -> bool:
        moment = _now(now)
        return any(d.covers(moment) for d in self._discounts)

    def is_active(self) -> bool:
        return True

    def is_available_for(self, seat_type: int) -> bool:
        """Whether the tariff applies to seats of *seat_type*."""
        return self._seat_types is None or int(seat_type) in self._seat_types

    def current_rate(self, now: float | None = None) -> float:
        return self._base_rate * (1.0 - self._current_discount(now) / 100.0)

    def _current_discount(self, now: float | None) -> float:
        moment = _now(now)
        return max((d.percent for d in self._discounts if d.covers(moment)), default=0.0)
"""Seat reservation model."""

from __future__ import annotations

from enum import IntEnum


class ReservationStatus(IntEnum):
    PENDING = 0
    ACTIVE = 1
    COMPLETED = 2
    CANCELLED = 3
    ANY = 4  # used only as a search filter


class Reservation:
    """A booking of one seat by one client for a time span."""

    def __init__(
        self,
        id: int,
        client_id: int,
        seat_id: int,
        start_time: int,
        end_time: int,
        status: ReservationStatus,
        total_cost: float = 0.0,
    ) -> None:
        if start_time >= end_time:
            raise ValueError("End time must be after start time")
        if total_cost < 0:
            raise ValueError("Total cost can't be negative")
        self.id = id
        self.client_id = client_id
        self.seat_id = seat_id
        self.start_time = start_time
        self.end_time = end_time
        self.status = ReservationStatus(status)
        self._total_cost = total_cost

    @property
    def total_cost(self) -> float:
        return self._total_cost

    @total_cost.setter
    def total_cost(self, cost: float) -> None:
        # Negative costs are silently ignored.
        if cost >= 0:
            self._total_cost = cost

    def cancel(self) -> None:
        self.status = ReservationStatus.CANCELLED

    def activate(self) -> None:
        self.status = ReservationStatus.ACTIVE

    def complete(self) -> None:
        self.status = ReservationStatus.COMPLETED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return self._key() == other._key()

    def _key(self) -> tuple:
        return (
            self.id,
            self.client_id,
            self.seat_id,
            self.start_time,
            self.end_time,
            self.status,
            self.total_cost,
        )

    def __repr__(self) -> str:
        return (
            f"Reservation(id={self.id!r}, client_id={self.client_id!r}, "
            f"seat_id={self.seat_id!r}, start_time={self.start_time!r}, "
            f"end_time={self.end_time!r}, status={self.status!r}, "
            f"total_cost={self.total_cost!r})"
        )
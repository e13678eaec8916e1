"""Club seat model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class SeatStatus(IntEnum):
    FREE = 0
    RESERVED = 1
    OCCUPIED = 2
    MAINTENANCE = 3


class SeatType(IntEnum):
    STANDARD = 0
    VIP = 1
    GAMING = 2
    CONFERENCE = 3


@dataclass
class Seat:
    """A computer seat with its hardware description and state."""

    id: int
    type: SeatType
    status: SeatStatus = SeatStatus.FREE
    hardware_spec: str = ""

    def __post_init__(self) -> None:
        self.type = SeatType(self.type)
        self.status = SeatStatus(self.status)

    def set_status(self, new_status: SeatStatus) -> bool:
        """Change status; return True only if it actually changed."""
        new_status = SeatStatus(new_status)
        if self.status == new_status:
            return False
        self.status = new_status
        return True

    def update_hardware(self, new_spec: str) -> None:
        """Replace the hardware description; empty strings are ignored."""
        if new_spec:
            self.hardware_spec = new_spec
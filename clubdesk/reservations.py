"""Creating, cancelling and searching seat reservations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Sequence

from clubdesk.database import Database
from clubdesk.reservation import Reservation, ReservationStatus
from clubdesk.seat import Seat, SeatStatus

if TYPE_CHECKING:
    from clubdesk.club import ClubSystem

_MAX_DURATION = 24 * 3600
_PRICE_PER_MINUTE = 2.0
_SELECT_COLUMNS = (
    "SELECT id, client_id, seat_id, start_time, end_time, status, total_cost "
    "FROM reservations"
)


class ReservationError(RuntimeError):
    """Raised when a reservation cannot be made or found."""


@dataclass(frozen=True)
class TimeSlot:
    """A span of time given as UNIX timestamps."""

    start: int
    end: int

    def validate(self) -> None:
        if self.start >= self.end:
            raise ValueError("End time must be after start time")
        if self.end - self.start > _MAX_DURATION:
            raise ValueError("Reservation duration exceeds 24 hours")


def _from_row(row: Sequence[Any]) -> Reservation:
    id_, client_id, seat_id, start, end, status, cost = row
    return Reservation(
        int(id_),
        int(client_id),
        int(seat_id),
        int(start),
        int(end),
        ReservationStatus(int(status)),
        float(cost),
    )


class ReservationManager:
    """Stores reservations in the database and keeps seat states in step."""

    def __init__(self, club: ClubSystem, db: Database) -> None:
        self._club = club
        self._db = db

    def create_reservation(
        self, client_id: int, seat_id: int, start: int, end: int
    ) -> Reservation:
        """Book *seat_id* for *client_id*; the seat becomes reserved."""
        slot = TimeSlot(start, end)
        slot.validate()
        if not self.is_available(seat_id, slot):
            raise ReservationError("Место недоступно для бронирования")

        seat = self._club.get_seat(seat_id)
        price = self.calculate_price(seat, slot)
        self._db.execute(
            "INSERT INTO reservations "
            "(client_id, seat_id, start_time, end_time, status, total_cost) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (client_id, seat_id, start, end, int(ReservationStatus.PENDING), price),
        )
        reservation_id = self.get_last_insert_id()
        self._club.update_seat_status(seat_id, SeatStatus.RESERVED)
        return self._load(reservation_id)

    def cancel_reservation(self, reservation_id: int) -> None:
        """Mark a reservation cancelled and free its seat."""
        reservation = self._load(reservation_id)
        reservation.cancel()
        self._save(reservation)
        self._club.update_seat_status(reservation.seat_id, SeatStatus.FREE)

    def find_reservations(
        self,
        client_id: int | None = None,
        seat_id: int | None = None,
        status: ReservationStatus = ReservationStatus.ANY,
    ) -> list[Reservation]:
        """Return reservations matching every filter that is given."""
        conditions: list[str] = []
        params: list[int] = []
        if client_id is not None:
            conditions.append("client_id = ?")
            params.append(client_id)
        if seat_id is not None:
            conditions.append("seat_id = ?")
            params.append(seat_id)
        if status != ReservationStatus.ANY:
            conditions.append("status = ?")
            params.append(int(status))

        query = _SELECT_COLUMNS
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        return [_from_row(row) for row in self._db.fetch_all(query, params)]

    def is_available(self, seat_id: int, slot: TimeSlot) -> bool:
        """True if no pending or active reservation of the seat touches *slot*."""
        rows = self._db.fetch_all(
            "SELECT COUNT(*) FROM reservations "
            "WHERE seat_id = ? "
            "AND ((start_time BETWEEN ? AND ?) OR (end_time BETWEEN ? AND ?)) "
            "AND status IN (0, 1)",
            (seat_id, slot.start, slot.end, slot.start, slot.end),
        )
        return not rows or int(rows[0][0]) == 0

    def calculate_price(self, seat: Seat, slot: TimeSlot) -> float:
        """Price of *slot*: a flat rate per minute."""
        minutes = (slot.end - slot.start) / 60
        return minutes * _PRICE_PER_MINUTE

    def get_last_insert_id(self) -> int:
        rows = self._db.fetch_all("SELECT last_insert_rowid()")
        return int(rows[0][0])

    def _load(self, reservation_id: int) -> Reservation:
        rows = self._db.fetch_all(_SELECT_COLUMNS + " WHERE id = ?", (reservation_id,))
        if not rows:
            raise ReservationError("Reservation not found")
        return _from_row(rows[0])

    def _save(self, r: Reservation) -> None:
        self._db.execute(
            "UPDATE reservations SET "
            "client_id = ?, seat_id = ?, start_time = ?, end_time = ?, "
            "status = ?, total_cost = ? "
            "WHERE id = ?",
            (
                r.client_id,
                r.seat_id,
                r.start_time,
                r.end_time,
                int(r.status),
                r.total_cost,
                r.id,
            ),
        )
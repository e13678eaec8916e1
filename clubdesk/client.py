"""Club client model and contact validation."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field

_PHONE_RE = re.compile(r"\+7\d{10}", re.ASCII)
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def validate_contact(contact: str) -> None:
    """Raise ValueError unless *contact* is a +7 phone number or an e-mail."""
    if not contact:
        raise ValueError("Контакт не может быть пустым")
    if not (_PHONE_RE.fullmatch(contact) or _EMAIL_RE.fullmatch(contact)):
        raise ValueError(
            "Неверный формат контакта. Используйте:\n"
            "- Телефон: +7XXXXXXXXXX (11 цифр)\n"
            "- Email: name@example.com"
        )


@dataclass
class Client:
    """A registered club client."""

    id: int
    name: str
    contact: str
    registered: int = field(default_factory=lambda: int(time.time()))
    reservations: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_contact(self.contact)

    def update_contact(self, new_contact: str) -> None:
        validate_contact(new_contact)
        self.contact = new_contact

    def add_reservation(self, reservation_id: int) -> None:
        """Record a reservation id, ignoring duplicates."""
        if reservation_id not in self.reservations:
            self.reservations.append(reservation_id)

    def has_active_bookings(self) -> bool:
        return bool(self.reservations)
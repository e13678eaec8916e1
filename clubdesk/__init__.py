"""Computer club front desk: seats, clients, reservations, tariffs and sales on SQLite."""

__version__ = "0.1.0"
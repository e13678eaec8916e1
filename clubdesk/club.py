"""The club system: seats, clients, products and reservations."""

from __future__ import annotations

import os
import sqlite3
import time

from clubdesk.client import Client, validate_contact
from clubdesk.database import Database
from clubdesk.product import Product, ProductCategory
from clubdesk.reservations import ReservationManager
from clubdesk.seat import Seat, SeatStatus, SeatType

DEFAULT_SEAT_COUNT = 60
DEFAULT_HARDWARE = "CPU: Intel i5, RAM: 16GB, GPU: NVIDIA GTX 1660"

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS clients (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        contact TEXT UNIQUE NOT NULL,
        reg_date INTEGER NOT NULL)""",
    """CREATE TABLE IF NOT EXISTS seats (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        type INTEGER NOT NULL,
        status INTEGER NOT NULL,
        hardware_spec TEXT)""",
    """CREATE TABLE IF NOT EXISTS products (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        category INTEGER NOT NULL,
        price REAL NOT NULL,
        stock INTEGER DEFAULT 0)""",
    """CREATE TABLE IF NOT EXISTS reservations (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        client_id INTEGER NOT NULL,
        seat_id INTEGER NOT NULL,
        start_time INTEGER NOT NULL,
        end_time INTEGER NOT NULL,
        status INTEGER NOT NULL,
        total_cost REAL NOT NULL,
        FOREIGN KEY(client_id) REFERENCES clients(id),
        FOREIGN KEY(seat_id) REFERENCES seats(id))""",
)


class ClubSystem:
    """In-memory view of the club backed by an SQLite database."""

    def __init__(self, db: Database | None = None) -> None:
        self.db = db if db is not None else Database()
        self.reservations = ReservationManager(self, self.db)
        self._seats: list[Seat] = []
        self._clients: dict[int, Client] = {}
        self._products: dict[int, Product] = {}

    @property
    def seats(self) -> list[Seat]:
        return self._seats

    @property
    def products(self) -> dict[int, Product]:
        return self._products

    def initialize(self, db_path: str) -> None:
        """Open the database, create tables and default seats, load data."""
        try:
            parent = os.path.dirname(db_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self.db.connect(db_path)
            self._setup_database()
            self._load_data()
        except Exception as exc:
            raise RuntimeError(f"Initialization failed: {exc}") from exc

    def shutdown(self) -> None:
        self._save_data()
        self.db.disconnect()

    def _setup_database(self) -> None:
        for sql in _SCHEMA:
            self.db.execute(sql)
        self.initialize_default_seats()

    def initialize_default_seats(self) -> None:
        """Create the standard seats if the seat table is empty."""
        count = int(self.db.fetch_all("SELECT COUNT(*) FROM seats")[0][0])
        if count > 0:
            return
        with self.db.transaction():
            for _ in range(DEFAULT_SEAT_COUNT):
                self.db.execute(
                    "INSERT INTO seats (type, status, hardware_spec) VALUES (?, ?, ?)",
                    (int(SeatType.STANDARD), int(SeatStatus.FREE), DEFAULT_HARDWARE),
                )
        self._load_seats()

    def add_seat(self, seat: Seat) -> None:
        self.db.execute(
            "INSERT INTO seats (type, status, hardware_spec) VALUES (?, ?, ?)",
            (int(seat.type), int(seat.status), seat.hardware_spec),
        )
        self._load_seats()

    def _load_data(self) -> None:
        try:
            self._load_seats()
            self._load_clients()
            self._load_products()
        except Exception as exc:
            raise RuntimeError(f"Data loading failed: {exc}") from exc

    def _load_seats(self) -> None:
        rows = self.db.fetch_all("SELECT id, type, status, hardware_spec FROM seats")
        seats = []
        for id_, type_, status, spec in rows:
            seat = Seat(int(id_), SeatType(int(type_)), SeatStatus(int(status)))
            seat.update_hardware(spec or "")
            seats.append(seat)
        self._seats = seats

    def _load_clients(self) -> None:
        rows = self.db.fetch_all("SELECT id, name, contact, reg_date FROM clients")
        self._clients = {
            int(id_): Client(int(id_), name, contact, int(reg_date))
            for id_, name, contact, reg_date in rows
        }

    def _load_products(self) -> None:
        rows = self.db.fetch_all(
            "SELECT id, name, category, price, stock FROM products"
        )
        self._products = {
            int(id_): Product(
                int(id_), name, ProductCategory(int(category)), float(price), int(stock)
            )
            for id_, name, category, price, stock in rows
        }

    def _save_data(self) -> None:
        with self.db.transaction():
            for client in self._clients.values():
                self.db.execute(
                    "UPDATE clients SET name = ?, contact = ? WHERE id = ?",
                    (client.name, client.contact, client.id),
                )
            for product in self._products.values():
                self.db.execute(
                    "UPDATE products SET stock = ? WHERE id = ?",
                    (product.stock, product.id),
                )

    def create_client(self, name: str, contact: str) -> Client:
        """Register a new client and return it."""
        validate_contact(contact)
        reg_date = int(time.time())
        self.db.execute(
            "INSERT INTO clients (name, contact, reg_date) VALUES (?, ?, ?)",
            (name, contact, reg_date),
        )
        rows = self.db.fetch_all("SELECT last_insert_rowid()")
        if not rows or not rows[0]:
            raise RuntimeError("Failed to retrieve client ID")
        client_id = int(rows[0][0])
        client = Client(client_id, name, contact, reg_date)
        self._clients[client_id] = client
        return client

    def update_client(self, client_id: int, new_contact: str) -> bool:
        """Change a client's contact; False if unknown, invalid or rejected."""
        client = self._clients.get(client_id)
        if client is None:
            return False
        try:
            validate_contact(new_contact)
            self.db.execute(
                "UPDATE clients SET contact = ? WHERE id = ?", (new_contact, client_id)
            )
        except (ValueError, sqlite3.Error):
            return False
        client.update_contact(new_contact)
        return True

    def add_product(self, product: Product) -> None:
        self.db.execute(
            "INSERT INTO products (name, category, price, stock) VALUES (?, ?, ?, ?)",
            (product.name, int(product.category), product.price, product.stock),
        )
        self._load_products()

    def sell_product(self, product_id: int, quantity: int = 1) -> bool:
        """Sell from stock; False if the product is unknown or short."""
        product = self._products.get(product_id)
        if product is None or not product.sell(quantity):
            return False
        try:
            self.db.execute(
                "UPDATE products SET stock = ? WHERE id = ?", (product.stock, product_id)
            )
        except sqlite3.Error:
            product.restock(quantity)
            return False
        return True

    def get_client(self, client_id: int) -> Client:
        try:
            return self._clients[client_id]
        except KeyError:
            raise LookupError("Client not found") from None

    def get_seat(self, seat_id: int) -> Seat:
        for seat in self._seats:
            if seat.id == seat_id:
                return seat
        raise LookupError("Seat not found")

    def get_products(self) -> list[Product]:
        return list(self._products.values())

    def find_clients(self, query: str) -> list[Client]:
        """Clients whose name or contact contains *query*, ignoring case."""
        needle = query.lower()
        return [
            client
            for client in self._clients.values()
            if needle in client.name.lower() or needle in client.contact.lower()
        ]

    def update_seat_status(self, seat_id: int, new_status: SeatStatus) -> None:
        if not any(seat.id == seat_id for seat in self._seats):
            raise LookupError("Место не найдено")
        self.db.execute(
            "UPDATE seats SET status = ? WHERE id = ?", (int(new_status), seat_id)
        )
        self._load_seats()
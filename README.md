# clubdesk

A terminal front desk for a computer club. It keeps seats, clients,
reservations and a small product shop in an SQLite database and drives
everything through a numbered menu in the terminal (the menu is in Russian).
It needs nothing beyond the Python standard library.

## Install

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Run

```
clubdesk
clubdesk --db path/to/club.db
```

By default the database is `data/club.db`, relative to the current
directory; missing parent directories are created. On first start the seat
table is filled with 60 standard seats. The main menu offers:

1. the seat map, coloured by status (free, reserved, occupied, maintenance);
2. a new one-hour reservation, starting now, for a newly registered client
   on a chosen seat;
3. the list of all reservations;
4. client search (by name or contact, ignoring case), adding and editing;
5. the product list and adding a product;
6. changing a seat's status to occupied, maintenance or free;
7. exit.

The menu also stops when input runs out.

Client contacts must be either a phone number written as `+7` followed by
ten digits, or an e-mail address such as `guest@example.com`; anything else
raises `ValueError`.

## Use as a library

```python
from clubdesk.club import ClubSystem
from clubdesk.product import Product, ProductCategory
from clubdesk.reservation import ReservationStatus

club = ClubSystem()
club.initialize("data/club.db")

client = club.create_client("Anna", "anna@example.com")
reservation = club.reservations.create_reservation(client.id, 1, 1_700_000_000, 1_700_003_600)
print(reservation.total_cost)        # 2.0 per minute: 120.0

club.add_product(Product(0, "Cola", ProductCategory.DRINK, 1.5, 10))
for product in club.get_products():
    club.sell_product(product.id, 2)

pending = club.reservations.find_reservations(status=ReservationStatus.PENDING)
club.reservations.cancel_reservation(reservation.id)
club.shutdown()
```

The main pieces:

- `clubdesk.club.ClubSystem` – loads seats, clients and products from the
  database; `create_client`, `update_client` (returns `False` if the client is
  unknown or the contact is rejected), `add_product`, `sell_product` (returns
  `False` if the product is unknown or stock is short), `get_client` and
  `get_seat` (raise `LookupError`), `find_clients`, `update_seat_status`,
  `add_seat`, and `shutdown`, which writes clients and stock back and closes
  the database.
- `clubdesk.reservations.ReservationManager` (as `club.reservations`) –
  `create_reservation`, `cancel_reservation`, `find_reservations` filtered by
  client, seat and status, and `is_available`. A reservation must end after it
  starts and may not be longer than 24 hours (`ValueError`); a seat is
  unavailable (`ReservationError`) while a pending or active reservation
  starts or ends inside the requested slot. Creating a reservation marks the
  seat reserved; cancelling it frees the seat.
- `clubdesk.database.Database` – the SQLite connection, with a
  `transaction()` context manager that rolls back on error.
- Models: `Client`, `Seat`, `Product`, `Reservation`, and their enums
  `SeatStatus`, `SeatType`, `ProductCategory`, `ReservationStatus`.
- `clubdesk.tariff.Tariff` – an hourly rate with time-limited percentage
  discounts (the largest active one applies), optionally limited to given
  seat types; `calculate_cost`, `cost_between` and `current_rate` take an
  optional `now` timestamp.

## What it does not do

- Reservation prices are a flat 2.0 per minute; tariffs are not used for
  pricing and are not stored in the database.
- The menu has no screen for cancelling a reservation or selling a product;
  both are available only through the library.
- There is no activation or completion of reservations beyond the
  `Reservation.activate` and `Reservation.complete` methods on the model,
  which are not saved by the reservation manager.
import io
import sys
import time

import pytest

from clubdesk.club import ClubSystem
from clubdesk.product import Product, ProductCategory
from clubdesk.reservation import ReservationStatus
from clubdesk.seat import SeatStatus, SeatType
from clubdesk.ui import (
    UI,
    format_time,
    main,
    product_category_to_string,
    seat_type_to_string,
    status_to_string,
)


@pytest.fixture
def club(tmp_path):
    system = ClubSystem()
    system.initialize(str(tmp_path / "club.db"))
    yield system
    system.db.disconnect()


def run(club, text):
    out = io.StringIO()
    UI(club, io.StringIO(text), out).start()
    return out.getvalue()


def test_status_names():
    assert status_to_string(ReservationStatus.PENDING) == "Ожидание"
    assert status_to_string(ReservationStatus.CANCELLED) == "Отменено"
    assert status_to_string(ReservationStatus.ANY) == "Неизвестно"


def test_seat_type_names():
    assert seat_type_to_string(SeatType.VIP) == "VIP"
    assert seat_type_to_string(SeatType.STANDARD) == "Стандарт"


def test_category_names():
    assert product_category_to_string(ProductCategory.DRINK) == "Напиток"
    assert product_category_to_string(ProductCategory.SERVICE) == "Услуга"


def test_format_time_round_trip():
    ts = int(time.mktime((2024, 3, 5, 14, 7, 0, 0, 0, -1)))
    text = format_time(ts)
    assert text == "05.03.2024 14:07"
    assert int(time.mktime(time.strptime(text, "%d.%m.%Y %H:%M"))) == ts


def test_format_time_shape():
    ts = int(time.mktime((2023, 11, 20, 9, 5, 0, 0, 0, -1)))
    text = format_time(ts)
    assert len(text) == 16
    assert text == "20.11.2023 09:05"


def test_exit_immediately(club):
    output = run(club, "7\n")
    assert "Главное меню" in output
    assert "7. Выход" in output


def test_end_of_input_stops(club):
    output = run(club, "")
    assert "Главное меню" in output


def test_out_of_range_choice(club):
    output = run(club, "9\n7\n")
    assert "Допустимые значения: от 1 до 7" in output


def test_non_numeric_choice(club):
    output = run(club, "abc\n7\n")
    assert "Некорректный ввод" in output


def test_add_client_via_menu(club):
    run(club, "4\n2\nAlice\nalice@example.com\n\n7\n")
    found = club.find_clients("alice")
    assert [c.contact for c in found] == ["alice@example.com"]


def test_add_client_retries_bad_contact(club):
    output = run(club, "4\n2\nBob\nbad\nbob@example.com\n\n7\n")
    assert "Неверный формат контакта" in output
    assert [c.name for c in club.find_clients("bob@example.com")] == ["Bob"]


def test_client_lookup_lists_matches(club):
    club.create_client("Dana", "dana@example.com")
    output = run(club, "4\n1\ndana\n\n7\n")
    assert "Имя: Dana" in output
    assert "Контакт: dana@example.com" in output


def test_client_lookup_no_match(club):
    output = run(club, "4\n1\nnobody\n\n7\n")
    assert "Клиенты не найдены" in output


def test_new_reservation_reserves_seat(club):
    output = run(club, "2\n3\nCarol\ncarol@example.com\n\n7\n")
    assert "создано!" in output
    reservations = club.reservations.find_reservations(seat_id=3)
    assert len(reservations) == 1
    assert reservations[0].end_time - reservations[0].start_time == 3600
    assert club.get_seat(3).status == SeatStatus.RESERVED


def test_new_reservation_bad_contact_reports_error(club):
    output = run(club, "2\n3\nEve\nbad\n\n7\n")
    assert "Ошибка:" in output
    assert club.reservations.find_reservations() == []


def test_show_reservations_lists_client(club):
    client = club.create_client("Frank", "frank@example.com")
    now = int(time.time())
    club.reservations.create_reservation(client.id, 2, now, now + 600)
    output = run(club, "3\n\n7\n")
    assert "Frank" in output
    assert "Ожидание" in output


def test_change_seat_status(club):
    output = run(club, "6\n1\n5\n2\n\n7\n")
    assert "Статус успешно изменен!" in output
    assert club.get_seat(5).status == SeatStatus.MAINTENANCE


def test_change_status_of_missing_seat(club):
    output = run(club, "6\n1\n100\n1\n\n7\n")
    assert "Место не найдено" in output


def test_add_product_via_menu(club):
    output = run(club, "5\n2\nCola\n-1\n50\n10\n1\n\n7\n")
    assert "Неверная цена" in output
    products = club.get_products()
    assert [(p.name, p.category, p.price, p.stock) for p in products] == [
        ("Cola", ProductCategory.DRINK, 50.0, 10)
    ]


def test_show_products(club):
    club.add_product(Product(0, "Chips", ProductCategory.FOOD, 30.0, 4))
    output = run(club, "5\n1\n\n7\n")
    assert "Chips" in output
    assert "Еда" in output


def test_show_products_empty(club):
    output = run(club, "5\n1\n\n7\n")
    assert "Нет доступных продуктов" in output


def test_edit_client(club):
    client = club.create_client("Gina", "gina@example.com")
    output = run(club, f"4\n3\n{client.id}\nnew@example.com\n\n7\n")
    assert "Данные обновлены!" in output
    assert club.get_client(client.id).contact == "new@example.com"


def test_edit_unknown_client(club):
    output = run(club, "4\n3\n99\n\n7\n")
    assert "Клиент не найден!" in output


def test_show_seats(club):
    output = run(club, "1\n\n7\n")
    assert "PC 1 " in output
    assert "Свободно" in output
    assert "Легенда:" in output


def test_main_creates_database(tmp_path, monkeypatch, capsys):
    db_path = tmp_path / "data" / "club.db"
    monkeypatch.setattr(sys, "stdin", io.StringIO("7\n"))
    assert main(["--db", str(db_path)]) == 0
    assert db_path.exists()
    assert "Главное меню" in capsys.readouterr().out
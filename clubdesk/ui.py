"""Interactive text menu for the club front desk."""

from __future__ import annotations

import argparse
import sys
import time
from typing import TextIO

from clubdesk.client import Client
from clubdesk.club import ClubSystem
from clubdesk.product import Product, ProductCategory
from clubdesk.reservation import Reservation, ReservationStatus
from clubdesk.seat import SeatStatus, SeatType

DEFAULT_DB_PATH = "data/club.db"

_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_BLUE = "\033[34m"
_RESET = "\033[0m"
_HEADER = "\033[1;36m"

_STATUS_NAMES = {
    ReservationStatus.PENDING: "Ожидание",
    ReservationStatus.ACTIVE: "Активно",
    ReservationStatus.COMPLETED: "Завершено",
    ReservationStatus.CANCELLED: "Отменено",
}

_SEAT_TYPE_NAMES = {
    SeatType.STANDARD: "Стандарт",
    SeatType.VIP: "VIP",
    SeatType.GAMING: "Игровое",
    SeatType.CONFERENCE: "Конференция",
}

_CATEGORY_NAMES = {
    ProductCategory.FOOD: "Еда",
    ProductCategory.DRINK: "Напиток",
    ProductCategory.ACCESSORY: "Аксессуар",
    ProductCategory.SERVICE: "Услуга",
}

_SEAT_LOOK = {
    SeatStatus.FREE: (_GREEN, "Свободно"),
    SeatStatus.RESERVED: (_YELLOW, "Забронировано"),
    SeatStatus.OCCUPIED: (_RED, "Занято"),
    SeatStatus.MAINTENANCE: (_BLUE, "Обслуживание"),
}

_UNKNOWN = "Неизвестно"
_MAX_INT = 2**31 - 1


def format_time(timestamp: float) -> str:
    """Local time as DD.MM.YYYY HH:MM."""
    return time.strftime("%d.%m.%Y %H:%M", time.localtime(timestamp))


def status_to_string(status: ReservationStatus) -> str:
    return _STATUS_NAMES.get(status, _UNKNOWN)


def seat_type_to_string(seat_type: SeatType) -> str:
    return _SEAT_TYPE_NAMES.get(seat_type, _UNKNOWN)


def product_category_to_string(category: ProductCategory) -> str:
    return _CATEGORY_NAMES.get(category, _UNKNOWN)


def _num(value: float) -> str:
    return f"{value:g}"


class UI:
    """Menu-driven console front end; stops on the exit item or end of input."""

    def __init__(
        self,
        club: ClubSystem,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._club = club
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._running = True

    def start(self) -> None:
        """Run the main menu until the user exits or input runs out."""
        try:
            while self._running:
                self._main_menu()
        except EOFError:
            self._running = False

    # -- input / output helpers ---------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _get_choice(self, low: int, high: int) -> int:
        while True:
            self._write("> ")
            try:
                choice = int(self._read_line().strip())
            except ValueError:
                self._write("Некорректный ввод. Попробуйте снова: ")
                continue
            if low <= choice <= high:
                return choice
            self._write(f"Допустимые значения: от {low} до {high}: ")

    def _read_number(self, convert, accept, error: str):
        while True:
            try:
                value = convert(self._read_line().strip())
            except ValueError:
                value = None
            if value is not None and accept(value):
                return value
            self._write(error)

    def _wait_for_continue(self) -> None:
        self._write("\nНажмите Enter для продолжения...")
        self._read_line()

    def _clear_screen(self) -> None:
        self._write("\033[2J\033[1;1H")

    def _print_header(self, title: str) -> None:
        self._write(f"{_HEADER}===== {title} ====={_RESET}\n\n")

    def _ok(self, text: str) -> None:
        self._write(f"{_GREEN}{text}{_RESET}\n")

    def _error(self, text: str) -> None:
        self._write(f"{_RED}{text}{_RESET}\n")

    # -- menus ---------------------------------------------------------------

    def _main_menu(self) -> None:
        self._clear_screen()
        self._print_header("Главное меню")
        self._write(
            "1. Просмотр мест\n"
            "2. Новое бронирование\n"
            "3. Текущие бронирования\n"
            "4. Управление клиентами\n"
            "5. Управление продажами\n"
            "6. Управление местами\n"
            "7. Выход\n"
        )
        actions = {
            1: self._show_seats,
            2: self._handle_new_reservation,
            3: self._show_reservations,
            4: self._client_management_menu,
            5: self._sales_menu,
            6: self._seat_management_menu,
        }
        choice = self._get_choice(1, 7)
        if choice == 7:
            self._running = False
        else:
            actions[choice]()

    def _show_seats(self) -> None:
        self._clear_screen()
        self._print_header("Карта мест компьютерного клуба")
        seats = self._club.seats
        if not seats:
            self._write("Нет доступных мест!\n")
            self._wait_for_continue()
            return

        for position, seat in enumerate(seats, start=1):
            color, status = _SEAT_LOOK[seat.status]
            self._write(
                f"{color}╔════════════╗\n"
                f"║ PC {seat.id:<4}    ║\n"
                f"║ {status:<10}   ║\n"
                f"╚════════════╝{_RESET}  "
            )
            if position % 5 == 0:
                self._write("\n\n")

        self._write(
            "\n\nЛегенда:\n"
            f"{_GREEN}Свободно{_RESET}  {_YELLOW}Забронировано{_RESET}  "
            f"{_RED}Занято{_RESET}  {_BLUE}На обслуживании{_RESET}\n"
        )
        self._wait_for_continue()

    def _reservation_menu(self) -> None:
        self._clear_screen()
        self._print_header("Управление бронированиями")
        self._write("1. Отменить бронирование\n2. Детали бронирования\n3. Назад\n")
        choice = self._get_choice(1, 3)
        if choice == 1:
            self._write("Введите ID бронирования: ")
            reservation_id = self._get_choice(1, _MAX_INT)
            try:
                self._club.reservations.cancel_reservation(reservation_id)
                self._ok("Бронирование отменено!")
            except Exception as exc:
                self._error(f"Ошибка: {exc}")
            self._wait_for_continue()
        elif choice == 2:
            self._write("Введите ID бронирования: ")
            reservation_id = self._get_choice(1, _MAX_INT)
            found = [
                r
                for r in self._club.reservations.find_reservations()
                if r.id == reservation_id
            ]
            if found:
                self._print_reservation_details(found[0])
            else:
                self._error("Бронирование не найдено!")
            self._wait_for_continue()

    def _print_reservation_details(self, res: Reservation) -> None:
        self._clear_screen()
        self._print_header(f"Детали бронирования #{res.id}")
        try:
            client = self._club.get_client(res.client_id)
            seat = self._club.get_seat(res.seat_id)
        except LookupError as exc:
            self._write(f"Ошибка загрузки данных: {exc}\n")
            return
        self._write(
            f"Клиент: {client.name}\n"
            f"Место: {seat.id} ({seat_type_to_string(seat.type)})\n"
            f"Время: {format_time(res.start_time)} - {format_time(res.end_time)}\n"
            f"Статус: {status_to_string(res.status)}\n"
            f"Стоимость: {_num(res.total_cost)} руб.\n"
        )

    def _client_management_menu(self) -> None:
        self._clear_screen()
        self._print_header("Управление клиентами")
        self._write(
            "1. Поиск клиента\n"
            "2. Добавить клиента\n"
            "3. Редактировать клиента\n"
            "4. Назад\n"
        )
        actions = {1: self._client_lookup, 2: self._add_new_client, 3: self._edit_client}
        action = actions.get(self._get_choice(1, 4))
        if action is not None:
            action()

    def _sales_menu(self) -> None:
        self._clear_screen()
        self._print_header("Управление продажами")
        self._write("1. Список продуктов\n2. Добавить новый продукт\n3. Назад\n")
        actions = {1: self._show_products, 2: self._add_new_product}
        action = actions.get(self._get_choice(1, 3))
        if action is not None:
            action()

    def _show_products(self) -> None:
        self._clear_screen()
        self._print_header("Доступные продукты")
        products = self._club.get_products()
        if not products:
            self._write("Нет доступных продуктов\n")
        else:
            self._write(
                f"{' ID ':<5}{' Название ':<20}{' Категория ':<15}"
                f"{' Цена ':<10}{' Остаток':<10}\n"
            )
            for product in products:
                self._write(
                    f"{product.id:<5}{product.name:<20}"
                    f"{product_category_to_string(product.category):<15}"
                    f"{_num(product.price):<10}{product.stock:<10}\n"
                )
        self._wait_for_continue()

    def _add_new_product(self) -> None:
        self._clear_screen()
        self._print_header("Добавление нового продукта")

        self._write("Название продукта: ")
        name = self._read_line()

        self._write("Цена: ")
        price = self._read_number(
            float, lambda v: v > 0, "Неверная цена. Введите снова: "
        )

        self._write("Количество: ")
        stock = self._read_number(
            int, lambda v: v >= 0, "Неверное количество. Введите снова: "
        )

        self._write("Категории:\n")
        for category in ProductCategory:
            self._write(f"{int(category)}. {product_category_to_string(category)}\n")
        self._write("Выберите категорию: ")
        last = int(max(ProductCategory))
        category = self._read_number(
            int, lambda v: 0 <= v <= last, "Неверная категория. Введите снова: "
        )

        try:
            self._club.add_product(
                Product(0, name, ProductCategory(category), price, stock)
            )
            self._ok("Продукт успешно добавлен!")
        except Exception as exc:
            self._error(f"Ошибка: {exc}")
        self._wait_for_continue()

    def _handle_new_reservation(self) -> None:
        self._clear_screen()
        self._print_header("Новое бронирование")
        try:
            seat_count = len(self._club.seats)
            self._write(f"Выберите место (1-{seat_count}): ")
            seat_id = self._get_choice(1, seat_count)

            self._write("Имя клиента: ")
            name = self._read_line()
            self._write("Контакт: ")
            contact = self._read_line()

            client = self._club.create_client(name, contact)
            now = int(time.time())
            reservation = self._club.reservations.create_reservation(
                client.id, seat_id, now, now + 3600
            )
            self._write(
                f"\n{_GREEN}Бронирование #{reservation.id} создано!{_RESET}\n"
            )
        except EOFError:
            raise
        except Exception as exc:
            self._error(f"Ошибка: {exc}")
        self._wait_for_continue()

    def _show_reservations(self) -> None:
        self._clear_screen()
        self._print_header("Текущие бронирования")
        reservations = self._club.reservations.find_reservations()
        self._write(
            f"{' ID ':<10}{' Клиент ':<15}{' Место ':<10}{' Начало':<20}"
            f"{' Окончание ':<20}{' Статус':<15}\n"
        )
        for res in reservations:
            try:
                client = self._club.get_client(res.client_id)
            except LookupError:
                continue
            self._write(
                f"{res.id:<10}{client.name[:14]:<15}{res.seat_id:<10}"
                f"{format_time(res.start_time):<20}{format_time(res.end_time):<20}"
                f"{status_to_string(res.status):<15}\n"
            )
        self._wait_for_continue()

    def _add_new_client(self) -> None:
        self._clear_screen()
        self._print_header("Новый клиент")
        self._write("Имя: ")
        name = self._read_line()

        while True:
            self._write("Контакт (формат: +7XXXXXXXXXX или email@example.com): ")
            contact = self._read_line()
            try:
                Client(0, name, contact)
                break
            except ValueError as exc:
                self._error(f"Ошибка: {exc}")

        try:
            client = self._club.create_client(name, contact)
            self._write(f"\n{_GREEN}Клиент #{client.id} создан!{_RESET}\n")
        except Exception as exc:
            self._error(f"Ошибка: {exc}")
        self._wait_for_continue()

    def _edit_client(self) -> None:
        self._clear_screen()
        self._print_header("Редактирование клиента")
        self._write("Введите ID клиента: ")
        client_id = self._get_choice(1, _MAX_INT)

        try:
            client = self._club.get_client(client_id)
        except LookupError:
            self._error("Клиент не найден!")
        else:
            self._write(f"Текущий контакт: {client.contact}\n")
            self._write("Новый контакт: ")
            new_contact = self._read_line()
            if self._club.update_client(client_id, new_contact):
                self._ok("Данные обновлены!")
            else:
                self._error("Ошибка обновления")
        self._wait_for_continue()

    def _client_lookup(self) -> None:
        self._clear_screen()
        self._print_header("Поиск клиента")
        self._write("Введите имя или контакт: ")
        query = self._read_line()
        clients = self._club.find_clients(query)
        if not clients:
            self._write("Клиенты не найдены\n")
        for client in clients:
            self._write(
                f"ID: {client.id} | Имя: {client.name} | Контакт: {client.contact}\n"
            )
        self._wait_for_continue()

    def _seat_management_menu(self) -> None:
        self._clear_screen()
        self._print_header("Управление местами")
        self._write("1. Изменить статус места\n2. Вернуться в главное меню\n")
        if self._get_choice(1, 2) == 1:
            self._change_seat_status()

    def _change_seat_status(self) -> None:
        self._clear_screen()
        self._print_header("Изменение статуса места")
        self._write("Введите ID места (1-120): ")
        seat_id = self._get_choice(1, 120)
        self._write(
            "Выберите новый статус:\n"
            "1. Занято\n"
            "2. На обслуживание\n"
            "3. Свободно\n"
        )
        new_status = {
            1: SeatStatus.OCCUPIED,
            2: SeatStatus.MAINTENANCE,
            3: SeatStatus.FREE,
        }[self._get_choice(1, 3)]
        try:
            self._club.update_seat_status(seat_id, new_status)
            self._ok("Статус успешно изменен!")
        except Exception as exc:
            self._error(f"Ошибка: {exc}")
        self._wait_for_continue()


def main(argv: list[str] | None = None) -> int:
    """Open the club database and run the interactive menu."""
    parser = argparse.ArgumentParser(prog="clubdesk")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="database file")
    args = parser.parse_args(argv)

    club = ClubSystem()
    club.initialize(args.db)
    try:
        UI(club).start()
    finally:
        club.db.disconnect()
    return 0


if __name__ == "__main__":
    sys.exit(main())
import pytest

from clubdesk.seat import Seat, SeatStatus, SeatType


@pytest.mark.parametrize(
    "code,seat_type,status",
    [
        (0, SeatType.STANDARD, SeatStatus.FREE),
        (1, SeatType.VIP, SeatStatus.RESERVED),
        (2, SeatType.GAMING, SeatStatus.OCCUPIED),
        (3, SeatType.CONFERENCE, SeatStatus.MAINTENANCE),
    ],
)
def test_enum_codes_fixed(code, seat_type, status):
    seat = Seat(1, code, code)
    assert seat.type is seat_type
    assert seat.status is status


def test_defaults():
    seat = Seat(1, SeatType.VIP)
    assert seat.status is SeatStatus.FREE
    assert seat.hardware_spec == ""


def test_int_coercion():
    seat = Seat(1, 2, 3)
    assert seat.type is SeatType.GAMING
    assert seat.status is SeatStatus.MAINTENANCE


def test_set_status_reports_change():
    seat = Seat(1, SeatType.STANDARD)
    assert seat.set_status(SeatStatus.OCCUPIED) is True
    assert seat.status is SeatStatus.OCCUPIED
    assert seat.set_status(SeatStatus.OCCUPIED) is False
    assert seat.status is SeatStatus.OCCUPIED


def test_update_hardware_ignores_empty():
    seat = Seat(1, SeatType.STANDARD)
    seat.update_hardware("CPU: Intel i5, RAM: 16GB, GPU: NVIDIA GTX 1660")
    seat.update_hardware("")
    assert seat.hardware_spec == "CPU: Intel i5, RAM: 16GB, GPU: NVIDIA GTX 1660"
import pytest

from clubdesk.tariff import Tariff, TariffPeriod


def test_period_default_and_values():
    assert Tariff(1, "Day", 100.0).period is TariffPeriod.PEAK
    assert [p.value for p in TariffPeriod] == [0, 1, 2]


def test_negative_base_rate_rejected():
    with pytest.raises(ValueError, match="negative"):
        Tariff(1, "Bad", -1.0)


def test_base_rate_setter_rejects_negative():
    tariff = Tariff(1, "Day", 100.0)
    with pytest.raises(ValueError):
        tariff.base_rate = -5.0
    assert tariff.base_rate == 100.0


def test_one_hour_costs_base_rate():
    tariff = Tariff(1, "Day", 100.0)
    assert tariff.calculate_cost(3600, now=0) == pytest.approx(100.0)
    assert tariff.calculate_cost(0, now=0) == 0.0


def test_cost_between_matches_duration():
    tariff = Tariff(1, "Day", 80.0)
    assert tariff.cost_between(1000, 8200, now=0) == pytest.approx(
        tariff.calculate_cost(7200, now=0)
    )


@pytest.mark.parametrize("start,end", [(10, 10), (20, 10)])
def test_cost_between_rejects_bad_span(start, end):
    with pytest.raises(ValueError):
        Tariff(1, "Day", 80.0).cost_between(start, end)


@pytest.mark.parametrize("percent", [-1, 101])
def test_add_discount_rejects_bad_percent(percent):
    with pytest.raises(ValueError):
        Tariff(1, "Day", 80.0).add_discount(percent, 0, 10)


def test_add_discount_rejects_bad_period():
    with pytest.raises(ValueError):
        Tariff(1, "Day", 80.0).add_discount(10, 10, 10)


def test_discount_active_only_in_window():
    tariff = Tariff(1, "Day", 100.0)
    tariff.add_discount(50, 1000, 2000)
    assert tariff.is_discount_active(now=1000) is True
    assert tariff.is_discount_active(now=2000) is True
    assert tariff.is_discount_active(now=999) is False
    assert tariff.current_rate(now=500) == pytest.approx(100.0)
    assert tariff.current_rate(now=1500) < 100.0


def test_full_discount_makes_it_free():
    tariff = Tariff(1, "Day", 100.0)
    tariff.add_discount(100, 0, 10)
    assert tariff.current_rate(now=5) == 0.0


def test_largest_discount_wins():
    combined = Tariff(1, "Day", 100.0)
    combined.add_discount(10, 0, 100)
    combined.add_discount(40, 0, 100)
    single = Tariff(2, "Day", 100.0)
    single.add_discount(40, 0, 100)
    assert combined.current_rate(now=50) == pytest.approx(single.current_rate(now=50))


def test_always_active_and_available():
    tariff = Tariff(1, "Day", 100.0)
    assert tariff.is_active() is True
    assert tariff.is_available_for(3) is True
import pytest

from hems_engine.battery_storage import BatteryStorage
from hems_engine.types import BatteryMode


def make_battery(**kwargs):
    params = dict(capacity_wh=5000, max_charge_rate_w=2000, max_discharge_rate_w=1500)
    params.update(kwargs)
    return BatteryStorage("Home battery", **params)


def test_zero_capacity_is_rejected():
    with pytest.raises(ValueError):
        make_battery(capacity_wh=0)


def test_activation_maps_to_modes():
    batt = make_battery()
    assert batt.mode == BatteryMode.IDLE
    assert batt.active is False
    assert batt.calculate_power() == 0.0

    batt.activate()
    assert batt.mode == BatteryMode.DISCHARGING
    assert batt.calculate_power() == pytest.approx(-1500)

    batt.deactivate()
    assert batt.mode == BatteryMode.IDLE

    batt.set_mode(BatteryMode.CHARGING)
    assert batt.active is True
    assert batt.calculate_power() == pytest.approx(2000)


def test_charging_never_exceeds_capacity():
    """3 x 2000 Wh laden in een batterij van 5000 Wh → vol, niet meer."""
    batt = make_battery(mode=BatteryMode.CHARGING)

    for _ in range(10):
        batt.update_hour()
        assert batt.current_charge_wh <= batt.capacity_wh

    assert batt.current_charge_wh == pytest.approx(5000)
    assert batt.charge_percent == pytest.approx(100.0)


def test_discharging_never_below_zero():
    batt = make_battery(current_charge_wh=2000)
    batt.activate()

    batt.update_hour()
    assert batt.current_charge_wh == pytest.approx(500)
    batt.update_hour()
    assert batt.current_charge_wh == 0.0
    batt.update_hour()
    assert batt.current_charge_wh == 0.0


def test_net_energy_equals_power():
    batt = make_battery()
    for mode in BatteryMode:
        batt.set_mode(mode)
        assert batt.net_energy_contribution() == batt.calculate_power()


def test_deactivate_keeps_charge():
    batt = make_battery(current_charge_wh=3000)
    batt.activate()
    batt.deactivate()
    batt.update_hour()
    assert batt.current_charge_wh == pytest.approx(3000)


def test_initial_charge_is_clamped():
    assert make_battery(current_charge_wh=9999).current_charge_wh == 5000
    assert make_battery(current_charge_wh=-10).current_charge_wh == 0.0


@pytest.mark.parametrize("capacity", [float("nan"), float("inf"), -100])
def test_non_finite_capacity_is_rejected(capacity):
    """NaN/inf capaciteit zou een 'nan%' laadstatus geven → weigeren bij constructie."""
    with pytest.raises(ValueError):
        make_battery(capacity_wh=capacity)


@pytest.mark.parametrize("raw", ["Charging", " charging ", "CHARGING", BatteryMode.CHARGING])
def test_mode_text_is_normalised(raw):
    batt = make_battery(mode=raw)
    assert batt.mode == BatteryMode.CHARGING

    batt.set_mode("Discharging ")
    assert batt.mode == BatteryMode.DISCHARGING


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        make_battery(mode="turbo")

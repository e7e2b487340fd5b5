# hems_engine/device_factory.py

from __future__ import annotations
from typing import Any, Callable, Dict, Optional

from .battery_storage import BatteryStorage
from .device import Device
from .devices import Appliance, Light, SmartOutlet, SolarPanel, Thermostat
from .types import BatteryMode, DeviceRecord, DeviceType


DEFAULT_BATTERY_CAPACITY_WH = 10000.0


def _light(name, power, opts):
    return Light(name, power, brightness=opts.get("brightness", 100.0))


def _thermostat(name, power, opts):
    return Thermostat(
        name,
        power,
        current_temp=opts.get("current_temp", 20.0),
        target_temp=opts.get("target_temp", 24.0),
    )


def _appliance(name, power, opts):
    return Appliance(name, power)


def _outlet(name, power, opts):
    return SmartOutlet(name, power)


def _solar(name, power, opts):
    return SolarPanel(
        name,
        power,
        efficiency=opts.get("efficiency", 20.0),
        sun_level=opts.get("sun_level", 99.0),
    )


def _battery(name, power, opts):
    return BatteryStorage(
        name,
        capacity_wh=opts.get("capacity_wh", DEFAULT_BATTERY_CAPACITY_WH),
        max_charge_rate_w=power,
        max_discharge_rate_w=opts.get("max_discharge_rate_w"),
        current_charge_wh=opts.get("initial_charge_wh", 0.0),
        mode=opts.get("mode", BatteryMode.IDLE),
    )


_BUILDERS: Dict[str, Callable[[str, float, Dict[str, Any]], Device]] = {
    "light": _light,
    "thermostat": _thermostat,
    "termostat": _thermostat,
    "appliance": _appliance,
    "solar": _solar,
    "outlet": _outlet,
    "smart_outlet": _outlet,
    "battery": _battery,
}


def create_device(
    device_type: DeviceType,
    name: str,
    rated_power: float,
    active: bool = False,
    **options: Any,
) -> Optional[Device]:
    """
    Bouwt een apparaat op basis van een type-string.
    Onbekend type → None (de aanroeper slaat het over, geen fout).
    """
    builder = _BUILDERS.get((device_type or "").strip().lower())
    if builder is None:
        return None

    device = builder(name, rated_power, options)
    # batterij met expliciete laadmodus blijft laden
    if active and not device.active:
        device.activate()
    return device


def create_from_record(record: DeviceRecord) -> Optional[Device]:
    return create_device(
        record.device_type,
        record.name,
        record.rated_power,
        record.active,
        **record.options,
    )

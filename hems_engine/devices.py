# hems_engine/devices.py

from __future__ import annotations

from .device import Device, clamp_percent
from .energy_meter import EnergyMeter


# Graden per gesimuleerd uur
THERMOSTAT_STEP_DEG = 2.0


def _fmt(value: float) -> str:
    return f"{value:g}"


# ============================================================
# LIGHT
# ============================================================

class Light(Device):
    kind = "light"

    def __init__(self, name: str, rated_power: float, brightness: float = 100.0, active: bool = False):
        super().__init__(name, rated_power, active)
        self.brightness = brightness

    @property
    def brightness(self) -> float:
        return self._brightness

    @brightness.setter
    def brightness(self, level: float) -> None:
        self._brightness = clamp_percent(level)

    def set_brightness(self, level: float) -> None:
        self.brightness = level

    def calculate_power(self) -> float:
        if not self.active:
            return 0.0
        return self.rated_power * self.brightness / 100.0

    def display_status(self) -> str:
        return (
            f"Light: {self.name}: {'ON' if self.active else 'OFF'}, "
            f"Brightness: {_fmt(self.brightness)}%, "
            f"power: {_fmt(self.calculate_power())}W"
        )


# ============================================================
# THERMOSTAT
# ============================================================

class Thermostat(Device):
    """
    Vast vermogen zolang actief. Per uur schuift de kamertemperatuur
    maximaal THERMOSTAT_STEP_DEG richting het doel, zonder doorschieten.
    """

    kind = "thermostat"

    def __init__(
        self,
        name: str,
        rated_power: float,
        current_temp: float = 20.0,
        target_temp: float = 24.0,
        active: bool = False,
    ):
        super().__init__(name, rated_power, active)
        self.current_temp = float(current_temp)
        self.target_temp = float(target_temp)

    def set_target(self, temp: float) -> None:
        self.target_temp = float(temp)

    def calculate_power(self) -> float:
        return self.rated_power if self.active else 0.0

    def update_hour(self) -> None:
        if not self.active:
            return

        gap = self.target_temp - self.current_temp
        if gap > 0:
            self.current_temp += min(gap, THERMOSTAT_STEP_DEG)
        elif gap < 0:
            self.current_temp -= min(-gap, THERMOSTAT_STEP_DEG)

    def display_status(self) -> str:
        return (
            f"Thermostat: {self.name}: {'Heating' if self.active else 'idle'}, "
            f"Current Temp: {_fmt(self.current_temp)}°C, "
            f"Target Temp: {_fmt(self.target_temp)}°C, "
            f"power: {_fmt(self.calculate_power())}W"
        )


# ============================================================
# APPLIANCE
# ============================================================

class Appliance(Device):
    kind = "appliance"

    def calculate_power(self) -> float:
        return self.rated_power if self.active else 0.0

    def display_status(self) -> str:
        return (
            f"Appliance: {self.name}: {'Running' if self.active else 'Off'}, "
            f"Power: {_fmt(self.calculate_power())}W"
        )


# ============================================================
# SMART OUTLET — appliance + energiemeter
# ============================================================

class SmartOutlet(Appliance):
    kind = "outlet"

    def __init__(self, name: str, rated_power: float, active: bool = False):
        super().__init__(name, rated_power, active)
        self.meter = EnergyMeter()

    @property
    def total_accumulated_energy(self) -> float:
        return self.meter.total_wh

    def update_hour(self) -> None:
        # uurstap: W == Wh
        self.meter.add(self.calculate_power())

    def reset_total_power(self) -> None:
        self.meter.reset()

    def display_status(self) -> str:
        return (
            f"Smart Outlet: {self.name}: {'Running' if self.active else 'Off'}, "
            f"Power: {_fmt(self.calculate_power())}W, "
            f"Total: {_fmt(self.total_accumulated_energy)}Wh"
        )


# ============================================================
# SOLAR PANEL — producent, netto bijdrage negatief
# ============================================================

class SolarPanel(Device):
    kind = "solar"

    def __init__(
        self,
        name: str,
        rated_power: float,
        efficiency: float = 20.0,
        sun_level: float = 99.0,
        active: bool = False,
    ):
        super().__init__(name, rated_power, active)
        self._efficiency = clamp_percent(efficiency)
        self.sun_level = sun_level

    @property
    def efficiency(self) -> float:
        return self._efficiency

    @property
    def sun_level(self) -> float:
        return self._sun_level

    @sun_level.setter
    def sun_level(self, level: float) -> None:
        self._sun_level = clamp_percent(level)

    def set_sun_level(self, level: float) -> None:
        self.sun_level = level

    def calculate_power(self) -> float:
        if not self.active:
            return 0.0
        return self.rated_power * self._efficiency / 100.0 * self.sun_level / 100.0

    def net_energy_contribution(self) -> float:
        return -self.calculate_power()

    def display_status(self) -> str:
        return (
            f"Solar {self.name}: {'Generating' if self.active else 'Idle'}, "
            f"Output: {_fmt(self.calculate_power())}W"
        )

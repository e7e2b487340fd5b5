# hems_engine/battery_storage.py

from __future__ import annotations
import math
from typing import Optional, Union

from .device import Device
from .types import BatteryMode


def to_mode(mode: Union[BatteryMode, str]) -> BatteryMode:
    """Modus uit tekst of enum; hoofdletters en spaties tellen niet mee."""
    if isinstance(mode, BatteryMode):
        return mode
    return BatteryMode(str(mode).strip().lower())


class BatteryStorage(Device):
    """
    Thuisbatterij met drie standen: IDLE, CHARGING, DISCHARGING.

    - activate()   → DISCHARGING
    - deactivate() → IDLE
    - CHARGING alleen via set_mode()

    Laden is belasting (+W), ontladen is levering (−W). De netto bijdrage is
    gelijk aan het vermogen; er is geen tekenomkering zoals bij zonnepanelen.
    """

    kind = "battery"

    def __init__(
        self,
        name: str,
        capacity_wh: float,
        max_charge_rate_w: float,
        max_discharge_rate_w: Optional[float] = None,
        current_charge_wh: float = 0.0,
        mode: BatteryMode = BatteryMode.IDLE,
    ):
        # NaN en inf zijn geen geldige capaciteit
        if not math.isfinite(capacity_wh) or capacity_wh <= 0:
            raise ValueError(f"Battery '{name}': capacity_wh must be > 0, got {capacity_wh}")

        # -----------------------------
        # Bounds & correcties
        # -----------------------------
        self.capacity_wh = float(capacity_wh)
        self.max_charge_rate_w = max(0.0, float(max_charge_rate_w))
        if max_discharge_rate_w is None:
            max_discharge_rate_w = self.max_charge_rate_w
        self.max_discharge_rate_w = max(0.0, float(max_discharge_rate_w))
        self.current_charge_wh = min(max(float(current_charge_wh), 0.0), self.capacity_wh)

        self.mode = to_mode(mode)
        super().__init__(name, self.max_charge_rate_w, active=self.mode != BatteryMode.IDLE)

    # -------------------------------------------------
    # MODUS — 'active' is afgeleid van de modus
    # -------------------------------------------------
    @property
    def active(self) -> bool:
        return self.mode != BatteryMode.IDLE

    @active.setter
    def active(self, value: bool) -> None:
        if not value:
            self.mode = BatteryMode.IDLE
        elif self.mode == BatteryMode.IDLE:
            self.mode = BatteryMode.DISCHARGING

    def activate(self) -> None:
        self.mode = BatteryMode.DISCHARGING

    def deactivate(self) -> None:
        self.mode = BatteryMode.IDLE

    def set_mode(self, mode: Union[BatteryMode, str]) -> None:
        # geen transitievalidatie: laden bij vol is toegestaan
        self.mode = to_mode(mode)

    # -------------------------------------------------
    # VERMOGEN
    # -------------------------------------------------
    def calculate_power(self) -> float:
        if self.mode == BatteryMode.CHARGING:
            return self.max_charge_rate_w
        if self.mode == BatteryMode.DISCHARGING:
            return -self.max_discharge_rate_w
        return 0.0

    def update_hour(self) -> None:
        if self.mode == BatteryMode.CHARGING:
            self.current_charge_wh = min(self.capacity_wh, self.current_charge_wh + self.max_charge_rate_w)
        elif self.mode == BatteryMode.DISCHARGING:
            self.current_charge_wh = max(0.0, self.current_charge_wh - self.max_discharge_rate_w)

    @property
    def charge_percent(self) -> float:
        return self.current_charge_wh / self.capacity_wh * 100.0

    def display_status(self) -> str:
        return (
            f"Battery: {self.name}: {self.mode.value.capitalize()}, "
            f"Charge: {self.current_charge_wh:g}/{self.capacity_wh:g}Wh "
            f"({self.charge_percent:.1f}%), "
            f"power: {self.calculate_power():g}W"
        )

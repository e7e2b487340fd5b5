# hems_engine/types.py

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


# ============================================================
# BatteryMode — drie toestanden van de thuisbatterij
# ============================================================

class BatteryMode(str, Enum):
    IDLE = "idle"
    CHARGING = "charging"
    DISCHARGING = "discharging"


# ============================================================
# DeviceRecord — één apparaat zoals de loader het aanlevert
# ============================================================

@dataclass
class DeviceRecord:
    device_type: str           # "light" / "thermostat" / "appliance" / "solar" / ...
    name: str
    rated_power: float         # W
    active: bool = False

    # Optionele instellingen per apparaattype
    options: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self):
        return {
            "device_type": self.device_type,
            "name": self.name,
            "rated_power": self.rated_power,
            "active": self.active,
            **self.options,
        }


# ============================================================
# Rates — koop- en verkoopprijs (door aanroeper bepaald)
# ============================================================

@dataclass
class Rates:
    buy_rate: float            # €/kWh bij netto afname
    sell_rate: float           # €/kWh bij netto teruglevering


# ============================================================
# CostResult — uitkomst van de kostenberekening
# ============================================================

@dataclass
class CostResult:
    net_energy_wh: float
    net_kwh: float
    cost: float                # positief = betalen, negatief = verdiend

    @property
    def is_export(self) -> bool:
        return self.net_energy_wh < 0

    @property
    def label(self) -> str:
        return "Earned" if self.is_export else "Cost"

    @property
    def amount(self) -> float:
        return abs(self.cost)

    def to_dict(self):
        return {
            "net_energy_wh": self.net_energy_wh,
            "net_kwh": self.net_kwh,
            "cost": self.cost,
            "is_export": self.is_export,
            "label": self.label,
            "amount": self.amount,
        }


# ============================================================
# HouseSnapshot — totalen op één moment
# ============================================================

@dataclass
class HouseSnapshot:
    total_power_w: float
    net_energy_wh: float
    cost: Optional[CostResult] = None

    def to_dict(self):
        out = {
            "total_power_w": self.total_power_w,
            "net_energy_wh": self.net_energy_wh,
        }
        if self.cost is not None:
            out["cost"] = self.cost.to_dict()
        return out


# ============================================================
# SimulationInput — volledig inputmodel voor de engine
# ============================================================

@dataclass
class SimulationInput:
    records: List[DeviceRecord]
    rates: Rates


# ============================================================
# Aliases voor duidelijkheid
# ============================================================

DeviceType = str

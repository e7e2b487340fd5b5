# hems_engine/energy_meter.py

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class EnergyMeter:
    """Lopende som van afgenomen energie (Wh), alleen stijgend tot een reset."""

    total_wh: float = 0.0

    def add(self, energy_wh: float) -> None:
        self.total_wh += max(0.0, energy_wh)

    def reset(self) -> None:
        self.total_wh = 0.0

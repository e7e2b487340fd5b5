# hems_engine/report.py

from __future__ import annotations
from typing import List

from .house import House


def render_report(house: House, buy_rate: float, sell_rate: float) -> List[str]:
    lines = [device.display_status() for device in house]

    result = house.cost_breakdown(buy_rate, sell_rate)

    lines.append(f"Total power: {house.calculate_total_power():.2f}W")
    lines.append(f"Net energy: {result.net_energy_wh:.2f}Wh")
    lines.append(f"{result.label}: {result.amount:.4f}")
    return lines

# hems_engine/engine.py

from __future__ import annotations
from typing import Any, Dict

from .house import House
from .report import render_report
from .types import SimulationInput


class HomeEnergyEngine:
    """
    Publieke interface van de engine.
    Wordt aangeroepen door FastAPI in main.py (endpoint /simulate).
    """

    @staticmethod
    def build_house(input_data: SimulationInput):
        house = House()
        skipped = []
        for record in input_data.records:
            if house.add_record(record) is None:
                skipped.append(record.to_dict())
        return house, skipped

    @staticmethod
    def compute(input_data: SimulationInput) -> Dict[str, Any]:
        """
        Laden → momentopname → één uur simuleren → momentopname + kosten.
        """

        # ------------------------------------------------------
        # 1) BASIC VALIDATION
        # ------------------------------------------------------
        if not input_data.records:
            return {"error": "NO_DEVICES"}

        # ------------------------------------------------------
        # 2) HUIS OPBOUWEN
        # ------------------------------------------------------
        try:
            house, skipped = HomeEnergyEngine.build_house(input_data)
        except ValueError as e:
            return {"error": "INVALID_DEVICE", "detail": str(e)}

        rates = input_data.rates

        before = house.snapshot()

        # ------------------------------------------------------
        # 3) ÉÉN UUR SIMULEREN
        # ------------------------------------------------------
        house.simulate_hour()

        after = house.snapshot(rates)

        devices = [
            {
                "name": d.name,
                "type": d.kind,
                "active": d.active,
                "power_w": d.calculate_power(),
                "net_energy_wh": d.net_energy_contribution(),
                "status": d.display_status(),
            }
            for d in house
        ]

        return {
            "devices": devices,
            "skipped": skipped,
            "before": before.to_dict(),
            "after": after.to_dict(),
            "report": render_report(house, rates.buy_rate, rates.sell_rate),
        }

# hems_engine/cost_engine.py

from __future__ import annotations

from .types import CostResult, Rates


# Eén simulatiestap is precies één uur: W en Wh zijn hier numeriek gelijk.
WH_PER_KWH = 1000.0


class CostEngine:
    def __init__(self, rates: Rates):
        self.rates = rates

    def compute_cost(self, net_energy_wh: float) -> CostResult:
        """
        Netto energie (getekend) → kosten.

        - net >= 0 (afname):      kosten   = net_kwh * buy_rate
        - net <  0 (teruglevering): opbrengst = net_kwh * sell_rate (negatief)
        """
        net_kwh = net_energy_wh / WH_PER_KWH

        if net_kwh >= 0:
            cost = net_kwh * self.rates.buy_rate
        else:
            cost = net_kwh * self.rates.sell_rate

        return CostResult(
            net_energy_wh=net_energy_wh,
            net_kwh=net_kwh,
            cost=cost,
        )

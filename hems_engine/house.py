# hems_engine/house.py

from __future__ import annotations
import logging
from typing import Iterator, List, Optional

from .cost_engine import CostEngine
from .device import Device
from .device_factory import create_from_record
from .types import CostResult, DeviceRecord, HouseSnapshot, Rates

logger = logging.getLogger(__name__)


class House:
    """
    Huis met een geordende lijst apparaten.

    Volgorde = invoegvolgorde (weergave en simulatie). Dubbele namen zijn
    toegestaan; apparaten worden nooit verwijderd.
    """

    def __init__(self):
        self._devices: List[Device] = []

    # -------------------------------------------------
    # APPARATEN
    # -------------------------------------------------
    def add_device(self, device: Device) -> None:
        self._devices.append(device)
        logger.debug("Added %s '%s'", device.kind, device.name)

    def add_record(self, record: DeviceRecord) -> Optional[Device]:
        device = create_from_record(record)
        if device is None:
            logger.warning("Unknown device type '%s' for '%s', skipped", record.device_type, record.name)
            return None
        self.add_device(device)
        return device

    @property
    def devices(self) -> List[Device]:
        return list(self._devices)

    def __len__(self):
        return len(self._devices)

    def __iter__(self) -> Iterator[Device]:
        return iter(self._devices)

    # -------------------------------------------------
    # AGGREGATIE
    # -------------------------------------------------
    def calculate_total_power(self) -> float:
        return sum(d.calculate_power() for d in self._devices)

    def calculate_net_energy(self) -> float:
        """Getekende netto energie over één uur (Wh): productie telt negatief."""
        return sum(d.net_energy_contribution() for d in self._devices)

    # -------------------------------------------------
    # SIMULATIE — één uur
    # -------------------------------------------------
    def simulate_hour(self) -> None:
        for device in self._devices:
            device.update_hour()
        logger.debug("Simulated one hour for %d devices", len(self._devices))

    # -------------------------------------------------
    # KOSTEN
    # -------------------------------------------------
    def cost_breakdown(self, buy_rate: float, sell_rate: float) -> CostResult:
        engine = CostEngine(Rates(buy_rate=buy_rate, sell_rate=sell_rate))
        return engine.compute_cost(self.calculate_net_energy())

    def calculate_cost(self, buy_rate: float, sell_rate: float) -> float:
        return self.cost_breakdown(buy_rate, sell_rate).cost

    def snapshot(self, rates: Optional[Rates] = None) -> HouseSnapshot:
        cost = None
        if rates is not None:
            cost = self.cost_breakdown(rates.buy_rate, rates.sell_rate)
        return HouseSnapshot(
            total_power_w=self.calculate_total_power(),
            net_energy_wh=self.calculate_net_energy(),
            cost=cost,
        )

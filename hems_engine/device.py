# hems_engine/device.py

from __future__ import annotations
from abc import ABC, abstractmethod


def clamp_percent(value: float) -> float:
    """Percentages worden stil begrensd op 0..100, nooit geweigerd."""
    return min(max(float(value), 0.0), 100.0)


class Device(ABC):
    """
    Abstract apparaat in het huis.

    Elk apparaat heeft een naam, een nominaal vermogen (W) en een aan/uit-status.
    Subklassen leveren hun eigen vermogensformule en eventueel een
    toestandsupdate per gesimuleerd uur.
    """

    kind = "device"

    def __init__(self, name: str, rated_power: float, active: bool = False):
        self._name = name
        self._rated_power = max(0.0, float(rated_power))
        self.active = active

    @property
    def name(self) -> str:
        return self._name

    @property
    def rated_power(self) -> float:
        return self._rated_power

    # -------------------------------------------------
    # AAN / UIT
    # -------------------------------------------------
    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    # -------------------------------------------------
    # VERMOGEN & ENERGIE
    # -------------------------------------------------
    @abstractmethod
    def calculate_power(self) -> float:
        """Momentaan vermogen in W; 0 als het apparaat niets levert of afneemt."""

    def net_energy_contribution(self) -> float:
        """
        Bijdrage aan de netto energie over één uur (Wh).
        Verbruikers: gelijk aan het vermogen. Producenten overschrijven dit.
        """
        return self.calculate_power()

    def update_hour(self) -> None:
        """Eén gesimuleerd uur verder. Standaard: geen interne toestand."""
        return None

    # -------------------------------------------------
    # WEERGAVE
    # -------------------------------------------------
    @abstractmethod
    def display_status(self) -> str:
        ...

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, rated_power={self.rated_power}, active={self.active})"

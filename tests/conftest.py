import pytest

from hems_engine.house import House
from hems_engine.devices import Appliance, Light, SolarPanel


@pytest.fixture
def simple_house():
    house = House()
    house.add_device(Light("Kitchen", 60, brightness=50, active=True))
    house.add_device(Appliance("Fridge", 150, active=True))
    house.add_device(SolarPanel("Roof", 5000, efficiency=20, sun_level=50, active=True))
    return house


@pytest.fixture
def device_file_text():
    return "\n".join([
        "@Type: light",
        "@Name: Kitchen",
        "@Power: 60",
        "@State: active",
        "@Type: termostat",
        "@Name: Living room",
        "@Power: 1500",
        "@State: inactive",
        "@Type: solar",
        "@Name: Roof",
        "@Power: 4000",
        "@State: active",
    ])

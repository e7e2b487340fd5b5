
# ============================================================
# HEMS Engine — Backend API
# COMPLETE MAIN.PY (parse_devices + simulate)
# ============================================================

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Engine imports
from hems_engine.device_file import parse_device_file
from hems_engine.engine import HomeEnergyEngine
from hems_engine.types import DeviceRecord, Rates, SimulationInput

logger = logging.getLogger(__name__)


# ============================================================
# FASTAPI INIT
# ============================================================

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)


# ============================================================
# APPARATENLIJST PARSER
# ============================================================

class ParseDevicesRequest(BaseModel):
    device_file: str


@app.post("/parse_devices")
def parse_devices(req: ParseDevicesRequest):
    records = parse_device_file(req.device_file)

    if not records:
        return {"devices": [], "error": "NO_DEVICES_FOUND"}

    return {"devices": [r.to_dict() for r in records]}


# ============================================================
# SIMULATE ENDPOINT
# ============================================================

class DeviceModel(BaseModel):
    device_type: str
    name: str
    rated_power: float
    active: bool = False

    # LIGHT
    brightness: float | None = None

    # THERMOSTAT
    current_temp: float | None = None
    target_temp: float | None = None

    # SOLAR
    efficiency: float | None = None
    sun_level: float | None = None

    # BATTERY
    capacity_wh: float | None = None
    initial_charge_wh: float | None = None
    max_discharge_rate_w: float | None = None
    mode: str | None = None


class SimulateRequest(BaseModel):
    devices: list[DeviceModel]

    # TARIEVEN (€/kWh)
    buy_rate: float = 0.15
    sell_rate: float = 0.05


_BASE_FIELDS = {"device_type", "name", "rated_power", "active"}


def to_record(dev: DeviceModel) -> DeviceRecord:
    options = {
        k: v
        for k, v in dev.model_dump().items()
        if k not in _BASE_FIELDS and v is not None
    }
    return DeviceRecord(
        device_type=dev.device_type,
        name=dev.name,
        rated_power=dev.rated_power,
        active=dev.active,
        options=options,
    )


@app.post("/simulate")
def simulate(req: SimulateRequest):

    # 1) Validatie
    if not req.devices:
        return {"error": "NO_DEVICES"}

    # 2) Engine input
    engine_input = SimulationInput(
        records=[to_record(d) for d in req.devices],
        rates=Rates(buy_rate=req.buy_rate, sell_rate=req.sell_rate),
    )

    result = HomeEnergyEngine.compute(engine_input)
    if "error" in result:
        logger.warning("Simulation rejected: %s", result["error"])
    return result

# hems_engine/device_file.py

from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Union

from .types import DeviceRecord

logger = logging.getLogger(__name__)


# ============================================================
# APPARATENLIJST PARSER
# ============================================================
#
# Formaat (één blok per apparaat, @State sluit het blok af):
#
#   @Type: light
#   @Name: Kitchen
#   @Power: 60
#   @State: active
#

def _value(line: str, tag: str) -> str:
    return line[len(tag):].strip()


def _build_record(device_type: str, name: str, power_raw: str, state: str) -> Optional[DeviceRecord]:
    if not device_type:
        logger.warning("Skipping '%s': missing @Type", name)
        return None

    if not power_raw:
        logger.warning("Skipping '%s': missing @Power", name)
        return None

    try:
        power = float(power_raw.replace(",", "."))
    except ValueError:
        logger.warning("Skipping '%s': invalid power '%s'", name, power_raw)
        return None

    return DeviceRecord(
        device_type=device_type,
        name=name,
        rated_power=power,
        active=state.lower() == "active",
    )


def parse_device_file(raw: Optional[str]) -> List[DeviceRecord]:
    if raw is None:
        return []

    records: List[DeviceRecord] = []

    device_type = ""
    name = ""
    power_raw = ""

    for ln in str(raw).splitlines():
        line = ln.strip()

        if line.startswith("@Type:"):
            device_type = _value(line, "@Type:")

        elif line.startswith("@Name:"):
            name = _value(line, "@Name:")

        elif line.startswith("@Power:"):
            power_raw = _value(line, "@Power:")

        elif line.startswith("@State:"):
            state = _value(line, "@State:")
            record = _build_record(device_type, name, power_raw, state)
            if record is not None:
                records.append(record)

            # volgend blok begint leeg, niets erven van het vorige apparaat
            device_type = ""
            name = ""
            power_raw = ""

    return records


def load_device_file(path: Union[str, Path]) -> List[DeviceRecord]:
    text = Path(path).read_text(encoding="utf-8")
    return parse_device_file(text)

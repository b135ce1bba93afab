import logging
from typing import Optional

import psutil

from host_status.models.status import TemperatureReadings
from host_status.services import parsers
from host_status.services.commands import run_command

LOGGER = logging.getLogger(__name__)


def _read_sensors_output(timeout_seconds: float) -> str:
    """Run lm-sensors' `sensors`; an unusable tool yields empty output."""
    return run_command(["sensors"], timeout_seconds) or ""


def _read_psutil_cpu_temperature() -> Optional[float]:
    """
    Return the first sensor reading whose label mentions the CPU.

    psutil only exposes sensors_temperatures() on some platforms, so a
    missing attribute counts as "no reading". Any error while reading
    sysfs only costs the CPU fallback, not the readings already parsed.
    """
    sensors_temperatures = getattr(psutil, "sensors_temperatures", None)
    if sensors_temperatures is None:
        return None

    try:
        chips = sensors_temperatures()
    except Exception as exc:
        LOGGER.debug("psutil.sensors_temperatures() failed: %s", exc, exc_info=True)
        return None

    for chip, entries in chips.items():
        for entry in entries:
            label = f"{chip} {entry.label}".lower()
            if "cpu" in label:
                return entry.current
    return None


def get_temperatures(timeout_seconds: float = 5.0) -> TemperatureReadings:
    """
    Collect motherboard, CPU and GPU temperatures.

    Readings are parsed from `sensors` chip sections first. If no CPU
    reading turns up there, the structured psutil sensor API is asked,
    and finally the Intel 'Package id 0' line of the same `sensors` output.
    """
    output = _read_sensors_output(timeout_seconds)
    readings = parsers.parse_sensors_output(output)

    if readings.cpu_temp is not None:
        return readings

    cpu_temp = _read_psutil_cpu_temperature()
    if cpu_temp is None:
        cpu_temp = parsers.parse_package_temperature(output)
    if cpu_temp is None:
        return readings

    return readings.model_copy(update={"cpu_temp": cpu_temp})

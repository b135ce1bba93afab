import logging
import platform
import socket
import time
from typing import Optional

import psutil

from host_status.models.probes import SystemSnapshot

LOGGER = logging.getLogger(__name__)

_CPUINFO_PATH = "/proc/cpuinfo"

# ARM boards carry the brand in "Hardware" or "Model"; x86 "model" is numeric
_CPUINFO_BRAND_KEYS = ("model name", "hardware", "model")


def _read_cpu_model() -> str:
    """Brand string of the first logical CPU, empty if the host reports none."""
    fields = {}
    try:
        with open(_CPUINFO_PATH, "r", encoding="utf-8", errors="replace") as handle:
            for line in handle:
                key, sep, value = line.partition(":")
                key = key.strip().lower()
                if sep and key in _CPUINFO_BRAND_KEYS and key not in fields:
                    fields[key] = value.strip()
    except OSError as exc:
        LOGGER.debug("reading %s failed: %s", _CPUINFO_PATH, exc)
        return ""

    for key in _CPUINFO_BRAND_KEYS:
        if fields.get(key) and not fields[key].isdigit():
            return fields[key]
    return ""


def _read_os_name() -> Optional[str]:
    try:
        name = platform.freedesktop_os_release().get("NAME")
    except (OSError, AttributeError):
        name = None
    return name or platform.system() or None


def _read_hostname() -> Optional[str]:
    try:
        return socket.gethostname() or None
    except OSError as exc:
        LOGGER.debug("hostname lookup failed: %s", exc)
        return None


def get_system_snapshot() -> SystemSnapshot:
    """
    Collect CPU, memory, uptime and identity of the host.

    This function encapsulates all direct calls to psutil/socket/platform so
    that the aggregator only deals with a SystemSnapshot. Every sub-field
    degrades on its own: a failed lookup leaves that field empty.
    """
    values = {
        "cpu_model": _read_cpu_model(),
        "hostname": _read_hostname(),
        "os_name": _read_os_name(),
    }

    try:
        values["cpu_percent"] = psutil.cpu_percent(interval=0.1)
    except (OSError, psutil.Error) as exc:
        LOGGER.debug("cpu_percent failed: %s", exc)

    try:
        memory = psutil.virtual_memory()
        values["memory_total_bytes"] = memory.total
        values["memory_used_bytes"] = memory.used
    except (OSError, psutil.Error) as exc:
        LOGGER.debug("virtual_memory failed: %s", exc)

    try:
        values["uptime_seconds"] = max(0, int(time.time() - psutil.boot_time()))
    except (OSError, psutil.Error) as exc:
        LOGGER.debug("boot_time failed: %s", exc)

    return SystemSnapshot(**values)

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Optional

from host_status.config import Settings
from host_status.models.probes import SpeedTestResult, SystemSnapshot
from host_status.models.status import (
    NetworkData,
    ServerData,
    StatusResponse,
    TemperatureReadings,
    UsageData,
)
from host_status.services import host_monitor, network_monitor, thermal_monitor

LOGGER = logging.getLogger(__name__)

_BYTES_PER_GIB = 1024 ** 3


def format_uptime(seconds: int) -> str:
    """Format seconds as '<h>h <m>m <s>s', e.g. 3725 -> '1h 2m 5s'."""
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m {seconds % 60}s"


def memory_percentage(used_bytes: int, total_bytes: int) -> Optional[float]:
    """Used memory in percent of total; None if the total is unknown (0)."""
    if total_bytes <= 0:
        return None
    return used_bytes / total_bytes * 100.0


def _result_or(future: Future, default: Any, probe: str) -> Any:
    # probes degrade on their own; this only catches what slipped through
    try:
        return future.result()
    except Exception:
        LOGGER.warning("%s probe failed unexpectedly", probe, exc_info=True)
        return default


def get_status(settings: Settings) -> StatusResponse:
    """
    Run all probes for one request and merge them into a StatusResponse.

    The probes are independent and read-only, so they run concurrently on a
    pool that lives only for this call. The speed test saturates link and
    CPU, so it only starts once the system and latency probes are joined.
    All probes are joined before the response is built; nothing is shared
    with other requests.
    """
    with ThreadPoolExecutor(max_workers=5, thread_name_prefix="probe") as pool:
        system_future = pool.submit(host_monitor.get_system_snapshot)
        temps_future = pool.submit(
            thermal_monitor.get_temperatures,
            settings.sensors_timeout_seconds,
        )
        interfaces_future = pool.submit(network_monitor.get_interfaces)
        public_ip_future = pool.submit(
            network_monitor.get_public_ip,
            settings.public_ip_url,
            settings.public_ip_timeout_seconds,
        )
        ping_future = pool.submit(
            network_monitor.get_ping_ms,
            settings.ping_host,
            settings.ping_timeout_seconds,
        )

        system: SystemSnapshot = _result_or(system_future, SystemSnapshot(), "system")
        ping_ms: Optional[float] = _result_or(ping_future, None, "ping")

        speed_future = pool.submit(
            network_monitor.get_speedtest,
            settings.speedtest_timeout_seconds,
        )

        temps: TemperatureReadings = _result_or(
            temps_future, TemperatureReadings(), "thermal"
        )
        interfaces = _result_or(interfaces_future, [], "interfaces")
        public_ip: str = _result_or(
            public_ip_future, network_monitor.PUBLIC_IP_UNAVAILABLE, "public ip"
        )
        speed: Optional[SpeedTestResult] = _result_or(speed_future, None, "speedtest")

    return StatusResponse(
        server_status="online",
        server_uptime=format_uptime(system.uptime_seconds),
        server_data=ServerData(
            server_name=system.hostname,
            server_cpu=system.cpu_model,
            server_os=system.os_name,
        ),
        data=UsageData(
            cpu_percentage=system.cpu_percent,
            memory=system.memory_used_bytes / _BYTES_PER_GIB,
            total_memory=system.memory_total_bytes / _BYTES_PER_GIB,
            memory_percentage=memory_percentage(
                system.memory_used_bytes, system.memory_total_bytes
            ),
            temps=temps,
        ),
        network=NetworkData(
            public_ip=public_ip,
            ping_ms=ping_ms,
            speed_download_mbps=speed.download_mbps if speed else None,
            speed_upload_mbps=speed.upload_mbps if speed else None,
            interfaces=interfaces,
        ),
    )

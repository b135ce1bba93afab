import logging
import socket
from typing import List, Optional

import httpx
import psutil

from host_status.models.probes import SpeedTestResult
from host_status.models.status import NetworkInterface
from host_status.services import parsers
from host_status.services.commands import run_command

LOGGER = logging.getLogger(__name__)

PUBLIC_IP_UNAVAILABLE = "Unavailable"

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def get_interfaces() -> List[NetworkInterface]:
    """
    List every IPv4/IPv6 address of every local interface.

    Order follows the OS enumeration; loopback and down interfaces are
    kept. Addresses are passed through exactly as psutil reports them.
    """
    try:
        addresses = psutil.net_if_addrs()
    except (OSError, psutil.Error) as exc:
        LOGGER.debug("net_if_addrs failed: %s", exc)
        return []

    interfaces: List[NetworkInterface] = []
    for name, entries in addresses.items():
        for entry in entries:
            if entry.family in _IP_FAMILIES:
                interfaces.append(NetworkInterface(name=name, ip=entry.address))
    return interfaces


def get_public_ip(url: str, timeout_seconds: float = 5.0) -> str:
    """
    Ask an IP-echo service for the public address of this host.

    The field is a mandatory string, so failure is reported with the
    literal "Unavailable" instead of None.
    """
    try:
        response = httpx.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        LOGGER.debug("public IP lookup via %s failed: %s", url, exc)
        return PUBLIC_IP_UNAVAILABLE

    public_ip = response.text.strip()
    return public_ip or PUBLIC_IP_UNAVAILABLE


def get_ping_ms(host: str, timeout_seconds: float = 5.0) -> Optional[float]:
    """
    Ping a host once and return the roundtrip time in milliseconds.

    Assumes a Linux-like 'ping' (-c count, -W reply timeout in seconds).
    """
    reply_timeout = max(1, int(timeout_seconds))
    output = run_command(
        ["ping", "-c", "1", "-W", str(reply_timeout), host],
        # leave room for name resolution on top of the reply timeout
        timeout_seconds + 1,
    )
    if output is None:
        return None
    return parsers.parse_ping_output(output)


def get_speedtest(timeout_seconds: float = 60.0) -> Optional[SpeedTestResult]:
    output = run_command(["speedtest-cli", "--simple"], timeout_seconds)
    if output is None:
        return None

    rates = parsers.parse_speedtest_output(output)
    if rates is None:
        return None

    download, upload = rates
    return SpeedTestResult(download_mbps=download, upload_mbps=upload)

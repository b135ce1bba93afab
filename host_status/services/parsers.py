"""
Line-oriented parsers for the free-text output of ping, sensors and
speedtest-cli.

The parsers never raise on odd input; anything they cannot make sense of
comes back as None so the calling probe can report the field as absent.
"""

from typing import Optional, Tuple

from host_status.models.status import TemperatureReadings

_MOTHERBOARD_CHIP_MARKERS = ("asus", "acpitz")
_CPU_CHIP_MARKERS = ("k10temp",)
_GPU_CHIP_MARKERS = ("amdgpu",)

_CELSIUS_MARKER = "°C"


def _is_chip_header(line: str) -> bool:
    # e.g. "k10temp-pci-00c3"; sensor lines always carry a colon
    return bool(line) and not line[0].isspace() and ":" not in line


def parse_temperature_token(line: str) -> Optional[float]:
    """
    Extract the first Celsius value from a sensors line.

    Example: "temp1:        +45.0°C  (crit = +105.0°C)" -> 45.0
    """
    for token in line.split():
        if _CELSIUS_MARKER in token:
            try:
                return float(token.strip("+°C"))
            except ValueError:
                return None
    return None


def parse_sensors_output(output: str) -> TemperatureReadings:
    """
    Parse `sensors` output into motherboard, CPU and GPU readings.

    Output is grouped in chip sections; a reading is only taken from a
    line that belongs to a chip with the matching vendor marker.
    """
    current_chip: Optional[str] = None
    motherboard_temp: Optional[float] = None
    cpu_temp: Optional[float] = None
    gpu_temp: Optional[float] = None

    for line in output.splitlines():
        if _is_chip_header(line):
            current_chip = line.lower()

        if current_chip is None:
            continue

        label = line.strip().lower()
        if any(m in current_chip for m in _MOTHERBOARD_CHIP_MARKERS) and "temp1:" in label:
            motherboard_temp = parse_temperature_token(line)
        elif any(m in current_chip for m in _CPU_CHIP_MARKERS) and "temp1:" in label:
            cpu_temp = parse_temperature_token(line)
        elif any(m in current_chip for m in _GPU_CHIP_MARKERS) and "edge:" in label:
            gpu_temp = parse_temperature_token(line)

    return TemperatureReadings(
        motherboard_temp=motherboard_temp,
        cpu_temp=cpu_temp,
        gpu_temp=gpu_temp,
    )


def parse_package_temperature(output: str) -> Optional[float]:
    """Intel coretemp fallback: read the 'Package id 0' line."""
    for line in output.splitlines():
        if "package id 0" in line.lower():
            return parse_temperature_token(line)
    return None


def parse_ping_output(output: str) -> Optional[float]:
    """
    Return the roundtrip time of the first reply in milliseconds.

    Example line: "64 bytes from 8.8.8.8: icmp_seq=1 ttl=55 time=13.4 ms"
    """
    for line in output.splitlines():
        if "time=" in line:
            value_str = line.split("time=", 1)[1].split(" ", 1)[0]
            try:
                value = float(value_str)
            except ValueError:
                return None
            return value if value >= 0 else None
    return None


def _parse_rate(line: str) -> Optional[float]:
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        value = float(parts[1])
    except ValueError:
        return None
    return value if value >= 0 else None


def parse_speedtest_output(output: str) -> Optional[Tuple[float, float]]:
    """
    Parse `speedtest-cli --simple` output into (download, upload) in Mbit/s.

    Both rates come from the same run, so a result with only one of them
    is discarded entirely.
    """
    download: Optional[float] = None
    upload: Optional[float] = None

    for line in output.splitlines():
        if line.startswith("Download:"):
            download = _parse_rate(line)
        elif line.startswith("Upload:"):
            upload = _parse_rate(line)

    if download is None or upload is None:
        return None
    return download, upload

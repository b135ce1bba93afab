from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TemperatureReadings(BaseModel):
    """Named temperature readings; any sensor may be missing on a given host."""

    model_config = ConfigDict(frozen=True)

    motherboard_temp: Optional[float] = Field(
        None,
        description="Motherboard/ACPI temperature in degrees Celsius",
    )
    cpu_temp: Optional[float] = Field(
        None,
        description="CPU temperature in degrees Celsius",
    )
    gpu_temp: Optional[float] = Field(
        None,
        description="GPU edge temperature in degrees Celsius",
    )


class ServerData(BaseModel):
    model_config = ConfigDict(frozen=True)

    server_name: Optional[str] = Field(
        None,
        description="System hostname, null if the lookup failed",
    )
    server_cpu: str = Field(
        "",
        description="CPU model name of the first logical CPU, empty if unknown",
    )
    server_os: Optional[str] = Field(
        None,
        description="Operating system display name, e.g. Ubuntu",
    )


class UsageData(BaseModel):
    model_config = ConfigDict(frozen=True)

    cpu_percentage: float = Field(
        ...,
        ge=0,
        le=100,
        description="Global CPU utilisation in percent",
    )
    memory: float = Field(..., ge=0, description="Used RAM in GiB")
    total_memory: float = Field(..., ge=0, description="Total RAM in GiB")
    memory_percentage: Optional[float] = Field(
        None,
        ge=0,
        le=100,
        description="Used RAM in percent of total, null if total is unknown",
    )
    temps: TemperatureReadings = Field(default_factory=TemperatureReadings)


class NetworkInterface(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name as reported by the OS")
    ip: str = Field(..., description="IPv4 or IPv6 address as reported by the OS")


class NetworkData(BaseModel):
    model_config = ConfigDict(frozen=True)

    public_ip: str = Field(
        ...,
        description="Public IP address, or the literal 'Unavailable' if the lookup failed",
    )
    ping_ms: Optional[float] = Field(
        None,
        ge=0.0,
        description="Roundtrip time of a single ping in milliseconds",
    )
    speed_download_mbps: Optional[float] = Field(
        None,
        ge=0.0,
        description="Download rate in Mbit/s; present only together with upload",
    )
    speed_upload_mbps: Optional[float] = Field(
        None,
        ge=0.0,
        description="Upload rate in Mbit/s; present only together with download",
    )
    interfaces: List[NetworkInterface] = Field(default_factory=list)


class StatusResponse(BaseModel):
    """Point-in-time snapshot of the host, built fresh for every request."""

    model_config = ConfigDict(frozen=True)

    server_status: str = Field("online", description="Always 'online'")
    server_uptime: str = Field(
        ...,
        description="Time since boot, formatted as '<h>h <m>m <s>s'",
    )
    server_data: ServerData
    data: UsageData
    network: NetworkData

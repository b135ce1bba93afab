from typing import Optional

from pydantic import BaseModel, Field


class SystemSnapshot(BaseModel):
    """Raw host counters as read by the system snapshot probe."""

    cpu_model: str = Field("", description="Brand string of the first logical CPU")
    cpu_percent: float = Field(0.0, ge=0, le=100)
    memory_used_bytes: int = Field(0, ge=0)
    memory_total_bytes: int = Field(0, ge=0)
    uptime_seconds: int = Field(0, ge=0)
    hostname: Optional[str] = None
    os_name: Optional[str] = None


class SpeedTestResult(BaseModel):
    """Download and upload rate from one speed test run; always both or none."""

    download_mbps: float = Field(..., ge=0.0)
    upload_mbps: float = Field(..., ge=0.0)

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LOGGER = logging.getLogger(__name__)

DEFAULT_BEARER_TOKEN = "default-token"


class Settings(BaseModel):
    # HTTP server
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="TCP port the status endpoint binds to",
    )
    bearer_token: str = Field(
        default=DEFAULT_BEARER_TOKEN,
        description="Shared secret expected in 'Authorization: Bearer <token>'",
    )
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Log level for the service, e.g. DEBUG or INFO",
    )

    # Probe targets
    ping_host: str = Field(
        default="8.8.8.8",
        description="Host pinged once per request for the latency probe",
    )
    public_ip_url: str = Field(
        default="https://api.ipify.org",
        description="IP-echo service returning the public IP as plain text",
    )

    # Per-call timeouts
    public_ip_timeout_seconds: float = Field(default=5.0, gt=0)
    ping_timeout_seconds: float = Field(default=5.0, gt=0)
    sensors_timeout_seconds: float = Field(default=5.0, gt=0)
    speedtest_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="A speed test can take tens of seconds",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        bearer_token = os.getenv("BEARER_TOKEN")
        if not bearer_token:
            LOGGER.warning(
                "BEARER_TOKEN is not set; falling back to the placeholder token. "
                "Do not run like this in production."
            )
            bearer_token = DEFAULT_BEARER_TOKEN

        # Unset variables fall back to the field defaults
        overrides = {
            "port": os.getenv("PORT"),
            "log_level": os.getenv("LOG_LEVEL"),
            "ping_host": os.getenv("PING_HOST"),
            "public_ip_url": os.getenv("PUBLIC_IP_URL"),
            "public_ip_timeout_seconds": os.getenv("PUBLIC_IP_TIMEOUT"),
            "ping_timeout_seconds": os.getenv("PING_TIMEOUT"),
            "sensors_timeout_seconds": os.getenv("SENSORS_TIMEOUT"),
            "speedtest_timeout_seconds": os.getenv("SPEEDTEST_TIMEOUT"),
        }

        return cls(
            bearer_token=bearer_token,
            **{key: value for key, value in overrides.items() if value},
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

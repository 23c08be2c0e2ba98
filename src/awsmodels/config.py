"""Client configuration."""

import os
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "AWSMODELS_"


class ClientConfig(BaseModel):
    """Settings shared by every service client."""

    region_name: Optional[str] = Field(None, description="AWS region for endpoints and signing")
    profile_name: Optional[str] = Field(None, description="Shared credentials profile")
    endpoint_url: Optional[str] = Field(None, description="Override for the service endpoint")
    connect_timeout: int = Field(5, description="Connect timeout in seconds")
    read_timeout: int = Field(10, description="Read timeout in seconds")
    max_attempts: int = Field(3, description="Total attempts for retryable failures")
    retry_base_delay: float = Field(0.1, description="Initial backoff delay in seconds")
    retry_max_delay: float = Field(5.0, description="Upper bound for a single backoff delay")
    verify: bool = Field(True, description="Verify TLS certificates")
    max_pool_connections: int = Field(10, description="HTTP connection pool size")
    log_level: str = Field("WARNING", description="Level for the awsmodels logger")

    @field_validator("max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        """At least one attempt is always made."""
        if v < 1:
            raise ValueError("max_attempts must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names only."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Priority for the region:
        1. AWSMODELS_REGION
        2. AWS_REGION
        3. AWS_DEFAULT_REGION

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            A validated configuration
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}

        if region := env.get(f"{ENV_PREFIX}REGION") or env.get("AWS_REGION") or env.get(
            "AWS_DEFAULT_REGION"
        ):
            values["region_name"] = region
        if profile := env.get(f"{ENV_PREFIX}PROFILE") or env.get("AWS_PROFILE"):
            values["profile_name"] = profile

        for field_name, env_name in (
            ("endpoint_url", "ENDPOINT_URL"),
            ("connect_timeout", "CONNECT_TIMEOUT"),
            ("read_timeout", "READ_TIMEOUT"),
            ("max_attempts", "MAX_ATTEMPTS"),
            ("verify", "VERIFY_SSL"),
            ("max_pool_connections", "MAX_POOL_CONNECTIONS"),
            ("log_level", "LOG_LEVEL"),
        ):
            if (value := env.get(ENV_PREFIX + env_name)) is not None:
                values[field_name] = value

        return cls(**values)

"""Configuration management for the host metrics exporter"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Configuration class with Pydantic validation and environment-based settings"""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Service identification
    service_name: str = Field(default="host-metrics-exporter", description="Service name, sent as the Server header")
    service_version: str = Field(default="1.0.0", description="Service version")

    # Server settings; no port means a single scrape to stdout
    metrics_host: str = Field(default="0.0.0.0", description="Metrics server bind address")
    metrics_port: Optional[int] = Field(default=None, ge=1, le=65535, description="Metrics server port")
    read_timeout: float = Field(default=60.0, gt=0, description="Seconds to wait for a request line")
    listen_backlog: int = Field(default=5, ge=1, description="Pending connection queue length")
    server_backend: Literal["socket", "fastapi"] = Field(default="socket", description="Request dispatcher implementation")

    # Collection settings
    proc_root: Path = Field(default=Path("/proc"), description="Mount point of the proc filesystem")
    scrape_timing_enabled: bool = Field(default=True, description="Report per-collector scrape durations")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case"""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_file")
    @classmethod
    def ensure_parent_directories(cls, v):
        """Ensure parent directories exist for file paths"""
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    def is_server_mode(self) -> bool:
        """Check if a listen port was configured"""
        return self.metrics_port is not None

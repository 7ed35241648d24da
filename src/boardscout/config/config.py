"""
Configuration management for BoardScout using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)

KNOWN_STRATEGIES = ("DeepLink", "JSON-LD", "PWS_DATA", "ReactFiber", "Regex", "RegexBroad")
KNOWN_BACKENDS = ("direct", "allorigins", "codetabs", "corsproxy", "thingproxy")


class ExtractionSettings(BaseModel):
    """Configuration for the board-ID strategy chain."""

    model_config = ConfigDict(validate_assignment=True)

    strategy_order: List[str] = Field(
        default_factory=lambda: list(KNOWN_STRATEGIES),
        description="Order in which strategies are tried; the first valid ID wins.",
    )
    min_id_length: int = Field(default=6, ge=1, description="Minimum digit count of an accepted board ID.")
    hydration_keys: List[str] = Field(
        default_factory=lambda: ["board_id", "entity_id"],
        description="Keys searched in the hydration payload, in order.",
    )
    default_board_name: str = Field(default="Pinterest Board", description="Name used when the page has no title.")
    domain_marker: str = Field(default="pinterest.com", description="Substring every accepted URL must contain.")

    @field_validator("strategy_order")
    @classmethod
    def validate_strategy_order(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("strategy_order must contain at least one strategy")
        unknown = [name for name in v if name not in KNOWN_STRATEGIES]
        if unknown:
            raise ValueError(f"Unknown strategies {unknown}. Available strategies: {list(KNOWN_STRATEGIES)}")
        return v


class TransportConfig(BaseModel):
    """Relay transport configuration."""

    backends: List[str] = Field(
        default_factory=lambda: ["allorigins", "codetabs", "corsproxy", "thingproxy"],
        description="Relays tried in order.",
    )
    timeout: float = Field(default=8.0, gt=0, description="Per-attempt timeout in seconds.")
    accept_length: int = Field(default=500, description="Payloads longer than this end the relay loop.")
    min_content_length: int = Field(
        default=200, description="Shortest payload accepted once every relay has been tried."
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; BoardScout/0.1; +https://github.com/boardscout/boardscout)",
        description="User-Agent string for HTTP requests.",
    )

    @field_validator("backends")
    @classmethod
    def validate_backends(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("backends must contain at least one relay")
        unknown = [name for name in v if name not in KNOWN_BACKENDS]
        if unknown:
            raise ValueError(f"Unknown backends {unknown}. Available backends: {list(KNOWN_BACKENDS)}")
        return v


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


class WebConfig(BaseModel):
    """Configuration for the JSON API server."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "BoardScout"
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    transport: TransportConfig = Field(default_factory=TransportConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    model_config = SettingsConfigDict(env_prefix="BOARDSCOUT_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for path in (current_dir / "boardscout.yaml", current_dir / "boardscout.yml"):
        if path.exists():
            return path
    return None


def load_config(path: Path | None = None) -> Config:
    """Load ``path``, else the config file in the working directory, else defaults and environment."""
    path = path or find_config_file()
    if path is None:
        log.debug("No config file found, using defaults")
        return Config()
    return Config.from_yaml(path)

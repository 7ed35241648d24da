from .config import (
    Config,
    ExtractionSettings,
    MonitoringConfig,
    TransportConfig,
    WebConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "Config",
    "ExtractionSettings",
    "MonitoringConfig",
    "TransportConfig",
    "WebConfig",
    "find_config_file",
    "load_config",
]

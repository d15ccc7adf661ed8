"""Core module - configuration, logging, exceptions."""

from trustnet.core.config import Settings, get_settings
from trustnet.core.exceptions import (
    TrustNetError,
    GraphError,
    CentralityError,
    IngestError,
    ConfigurationError,
)
from trustnet.core.logging import LogContext, setup_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "TrustNetError",
    "GraphError",
    "CentralityError",
    "IngestError",
    "ConfigurationError",
    "LogContext",
    "setup_logging",
    "get_logger",
]

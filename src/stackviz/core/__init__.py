"""Core utilities: configuration, logging."""

from .config import (
    EditorConfig,
    DatasetConfig,
    ChartConfig,
    ExportConfig,
    ServerConfig,
    get_default_config,
)
from .logging import get_logger, setup_logging

__all__ = [
    "EditorConfig",
    "DatasetConfig",
    "ChartConfig",
    "ExportConfig",
    "ServerConfig",
    "get_default_config",
    "get_logger",
    "setup_logging",
]

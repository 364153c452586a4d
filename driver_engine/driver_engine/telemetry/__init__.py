"""Logging setup for the driver engine."""

from driver_engine.telemetry.json_formatter import JSONFormatter, configure_logging

__all__ = [
    "JSONFormatter",
    "configure_logging",
]

"""Observability – structlog configuration and loggers."""
from cdn_keys.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

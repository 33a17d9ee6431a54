"""Observability – structured logging helpers."""
from cdn_keys.observability.logging.factory import JsonLoggerFactory
from cdn_keys.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

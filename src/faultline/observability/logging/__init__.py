"""Observability – structured logging of faults."""
from faultline.observability.logging.factory import JsonLoggerFactory
from faultline.observability.logging.processors import FaultProcessor, get_logger

__all__ = ["FaultProcessor", "JsonLoggerFactory", "get_logger"]

"""Observability – logging helpers for faults."""

"""Observability – structlog fault processor and get_logger helper.

FaultProcessor  — expands a fault passed to a log call into flat text fields.
get_logger(name) — returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog

from faultline.errors.formatting import safe_str
from faultline.errors.system import SystemFault
from faultline.errors.user import UserFault


class FaultProcessor:
    """structlog processor that renders a fault attached to a log event.

    The fault is taken from ``event_dict[key]`` and replaced by:

    * ``fault_kind`` – ``"system"``, ``"user"`` or ``"foreign"``
    * ``fault`` – the nested message (:meth:`SystemFault.error`,
      :meth:`UserFault.error` or ``str()`` of a foreign error)
    * ``stack_trace`` – system faults only, when *include_stack* is set
    * ``fault_codes`` – user faults only
    * ``fault_type`` – foreign errors only, the class name

    Usage::

        log = get_logger(__name__)
        try:
            repo.save(order)
        except Exception as exc:
            log.error("order_save_failed", fault=system_wrap(exc, "saving order"))
    """

    def __init__(self, key: str = "fault", include_stack: bool = True) -> None:
        self._key = key
        self._include_stack = include_stack

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        if self._key not in event_dict:
            return event_dict
        fault = event_dict.pop(self._key)
        if isinstance(fault, SystemFault):
            event_dict["fault_kind"] = "system"
            event_dict["fault"] = fault.error()
            if self._include_stack:
                event_dict["stack_trace"] = fault.stack_trace()
        elif isinstance(fault, UserFault):
            event_dict["fault_kind"] = "user"
            event_dict["fault"] = fault.error()
            event_dict["fault_codes"] = fault.codes()
        elif isinstance(fault, BaseException):
            event_dict["fault_kind"] = "foreign"
            event_dict["fault"] = safe_str(fault)
            event_dict["fault_type"] = type(fault).__name__
        else:
            event_dict[self._key] = fault
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["FaultProcessor", "get_logger"]

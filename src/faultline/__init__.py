"""
faultline – user and system faults with layered cause chains.

Import path convention::

    from faultline import system_wrap, user, capability_find
    from faultline.config import FaultSettings, configure
    from faultline.observability.logging import JsonLoggerFactory, get_logger
"""

from faultline.errors import (
    SystemFault,
    UserFault,
    capability_find,
    find_instance,
    is_cause,
    iter_chain,
    system,
    system_wrap,
    system_wrapf,
    systemf,
    unwrap,
    user,
    userf,
)

__version__ = "0.1.0"
__all__ = [
    "SystemFault",
    "UserFault",
    "__version__",
    "capability_find",
    "find_instance",
    "is_cause",
    "iter_chain",
    "system",
    "system_wrap",
    "system_wrapf",
    "systemf",
    "unwrap",
    "user",
    "userf",
]

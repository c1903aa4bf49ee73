"""Fault taxonomy — public re-export surface.

Hierarchy::

    Exception
    ├── UserFault      (user.py)    coded, end-user facing, accumulates
    └── SystemFault    (system.py)  internal, layered cause chain + stack trace
        └── ConfigError            (faultline.config.errors)

Cause chains are walked with the helpers in ``chain.py``.
"""

from faultline.errors.chain import capability_find, find_instance, is_cause, iter_chain, unwrap
from faultline.errors.formatting import safe_str, sprintf
from faultline.errors.system import (
    PADDING,
    SystemFault,
    system,
    system_wrap,
    system_wrapf,
    systemf,
)
from faultline.errors.user import UserFault, user, userf

__all__ = [
    "PADDING",
    "SystemFault",
    "UserFault",
    "capability_find",
    "find_instance",
    "is_cause",
    "iter_chain",
    "safe_str",
    "sprintf",
    "system",
    "system_wrap",
    "system_wrapf",
    "systemf",
    "unwrap",
    "user",
    "userf",
]

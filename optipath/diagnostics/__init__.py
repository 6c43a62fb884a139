"""Diagnostics and debugging utilities for optipath."""

from .core import (
    assert_dioid_laws,
    assert_identities,
    check_dioid_laws,
    is_selective,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_selective",
    "assert_identities",
    "check_dioid_laws",
    "assert_dioid_laws",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

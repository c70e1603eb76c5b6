"""Custom exceptions for the hookchain library.

Failures raised by entries, before/after chains or final actions are never
wrapped; they reach the caller unchanged. The exceptions below are the ones
hookchain raises itself.
"""

from hookchain._internal.exceptions import (
    BaseHookchainError,
    ChainTimeoutError,
    HookNotDefinedError,
)

__all__ = (
    "BaseHookchainError",
    "ChainTimeoutError",
    "HookNotDefinedError",
)

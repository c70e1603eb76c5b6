"""Class-based middleware for around chains.

A middleware receives a ``call_next`` continuation followed by the call
arguments. It can:

- Execute code before the wrapped call
- Pass control to the rest of the chain by calling ``call_next()``
- Execute code after the wrapped call returned
- Retry the rest of the chain by calling ``call_next()`` again
- Short-circuit the chain by never calling ``call_next()``
"""

from hookchain._internal.common.types import CallNext
from hookchain._internal.middleware.base import BaseMiddleware
from hookchain._internal.middleware.chain import (
    MiddlewareChain,
    wrap_middleware,
)
from hookchain._internal.middleware.exceptions import ExceptionMiddleware
from hookchain._internal.middleware.instrumentation import (
    InstrumentationMiddleware,
)
from hookchain._internal.middleware.retry import RetryMiddleware
from hookchain._internal.middleware.timeout import TimeoutMiddleware

__all__ = (
    "BaseMiddleware",
    "CallNext",
    "ExceptionMiddleware",
    "InstrumentationMiddleware",
    "MiddlewareChain",
    "RetryMiddleware",
    "TimeoutMiddleware",
    "wrap_middleware",
)

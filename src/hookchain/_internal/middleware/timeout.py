from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from hookchain._internal.exceptions import ChainTimeoutError
from hookchain._internal.middleware.base import BaseMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from hookchain._internal.common.types import CallNext


class TimeoutMiddleware(BaseMiddleware):
    """Fail a wrapped call that finished later than ``timeout`` seconds.

    Chains run synchronously and cannot be interrupted, so the deadline is
    checked once the rest of the chain returns.
    """

    def __init__(
        self,
        timeout: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if timeout <= 0:
            msg = "timeout must be > 0."
            raise ValueError(msg)
        self.timeout: float = timeout
        self.clock: Callable[[], float] = clock

    @override
    def __call__(self, call_next: CallNext, *args: Any) -> Any:
        started = self.clock()
        result = call_next()
        elapsed = self.clock() - started
        if elapsed > self.timeout:
            raise ChainTimeoutError(timeout=self.timeout, elapsed=elapsed)
        return result

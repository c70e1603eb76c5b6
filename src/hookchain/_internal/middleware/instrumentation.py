from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from hookchain._internal.middleware.base import BaseMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from hookchain._internal.common.types import CallNext

logger = logging.getLogger("hookchain.middleware")


class InstrumentationMiddleware(BaseMiddleware):
    def __init__(
        self,
        name: str = "call",
        *,
        level: int = logging.DEBUG,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.name: str = name
        self.level: int = level
        self.clock: Callable[[], float] = clock

    @override
    def __call__(self, call_next: CallNext, *args: Any) -> Any:
        logger.log(self.level, "%s started", self.name)
        started = self.clock()
        try:
            result = call_next()
        except Exception:
            elapsed = self.clock() - started
            logger.exception("%s failed after %.3fs", self.name, elapsed)
            raise
        elapsed = self.clock() - started
        logger.log(self.level, "%s finished in %.3fs", self.name, elapsed)
        return result

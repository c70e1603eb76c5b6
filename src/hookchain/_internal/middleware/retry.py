from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from hookchain._internal.common.constants import MAX_BACKOFF_SECONDS
from hookchain._internal.middleware.base import BaseMiddleware

if TYPE_CHECKING:
    from hookchain._internal.common.types import CallNext

logger = logging.getLogger("hookchain.middleware")


class RetryMiddleware(BaseMiddleware):
    """Re-run the rest of the chain when it raises.

    Waits ``2 ** (failures - 1)`` seconds between attempts, capped at one
    minute, and re-raises once ``max_retries`` retries are used up.
    """

    def __init__(self, max_retries: int) -> None:
        if max_retries < 0:
            msg = "max_retries must be >= 0."
            raise ValueError(msg)
        self.max_retries: int = max_retries

    @override
    def __call__(self, call_next: CallNext, *args: Any) -> Any:
        failures = 0
        while True:
            try:
                return call_next()
            except Exception as exc:  # noqa: PERF203
                failures += 1
                if failures > self.max_retries:
                    msg = (
                        f"Call failed after exhausting all {self.max_retries}"
                        " retries. Propagating error."
                    )
                    logger.warning(msg)
                    raise

                seconds_wait = min(2 ** (failures - 1), MAX_BACKOFF_SECONDS)
                logger.warning(
                    "Attempt %s/%s failed. Retrying in %ss. Error: %s",
                    failures,
                    self.max_retries,
                    seconds_wait,
                    exc,
                )
                time.sleep(seconds_wait)  # Exponential backoff

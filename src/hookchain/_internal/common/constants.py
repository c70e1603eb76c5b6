from enum import Enum, unique
from typing import Any

from hookchain._internal.common.datastructures import EmptyPlaceholder

EMPTY: Any = EmptyPlaceholder()
MAX_BACKOFF_SECONDS = 60


@unique
class Outcome(str, Enum):
    CONTINUE = "continue"
    HALT = "halt"


def is_halt(result: object) -> bool:
    """Tell whether an entry result asks the chain to stop.

    Only the literal ``False`` and ``Outcome.HALT`` count, so falsy values
    such as ``0``, ``None`` or ``""`` never halt a chain.
    """
    return result is False or result is Outcome.HALT

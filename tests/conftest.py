from collections.abc import Callable
from typing import Any

import pytest

from hookchain import AroundChain, Chain
from hookchain.middleware import CallNext


@pytest.fixture
def log() -> list[str]:
    return []


def wrapping(log: list[str], name: str) -> Callable[..., Any]:
    def entry(call_next: CallNext, *_args: Any) -> Any:
        log.append(f"{name}-before")
        result = call_next()
        log.append(f"{name}-after")
        return result

    return entry


def recording(
    log: list[str],
    name: str,
    result: Any = None,
) -> Callable[..., Any]:
    def entry(*_args: Any) -> Any:
        log.append(name)
        return result

    return entry


def create_around_chain(
    log: list[str],
    *,
    before_result: Any = None,
    halt_on_false: bool = True,
) -> AroundChain:
    before = Chain()
    after = Chain()
    _ = before.add(recording(log, "before", before_result), "before")
    _ = after.add(recording(log, "after"), "after")
    return AroundChain(halt_on_false=halt_on_false, before=before, after=after)

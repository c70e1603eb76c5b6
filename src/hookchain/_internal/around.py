from __future__ import annotations

import dataclasses
import functools
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import Self, override

from hookchain._internal.chain import Chain
from hookchain._internal.common.constants import EMPTY
from hookchain._internal.configuration import ChainOptions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hookchain._internal.common.types import (
        ArgsList,
        BulkFinalAction,
        CallNext,
        FinalAction,
    )
    from hookchain._internal.entry import Entry

logger = logging.getLogger("hookchain.chain")

ReturnT = TypeVar("ReturnT")


def build_call_next(
    entries: Sequence[Entry],
    args: tuple[Any, ...],
    /,
    target: CallNext,
) -> CallNext:
    call_next = target
    for entry in reversed(entries):
        call_next = functools.partial(entry, *args, call_next=call_next)
    return call_next


def _check_sub_chain(name: str, value: object) -> None:
    if value is not None and not isinstance(value, Chain):
        msg = f"{name!r} must be a Chain or None, got {type(value).__name__}."
        raise TypeError(msg)


class AroundChain(Chain):
    """Chain whose entries wrap a final action.

    Each entry is called as ``entry(call_next, *args)`` and decides whether,
    and how many times, the rest of the chain runs by calling ``call_next``.
    Optional ``before`` and ``after`` chains run around the whole traversal
    with the same arguments.
    """

    __slots__: tuple[str, ...] = ()

    def __init__(
        self,
        *,
        halt_on_false: bool = True,
        before: Chain | None = None,
        after: Chain | None = None,
    ) -> None:
        _check_sub_chain("before", before)
        _check_sub_chain("after", after)
        super().__init__(halt_on_false=halt_on_false)
        self.options = ChainOptions(
            halt_on_false=halt_on_false,
            before=before,
            after=after,
        )

    @override
    def copy(
        self,
        *,
        before: Chain | None = EMPTY,
        after: Chain | None = EMPTY,
    ) -> Self:
        """Return an independent copy, optionally rewiring before/after."""
        changes: dict[str, Chain | None] = {}
        if before is not EMPTY:
            _check_sub_chain("before", before)
            changes["before"] = before
        if after is not EMPTY:
            _check_sub_chain("after", after)
            changes["after"] = after
        return self._clone(dataclasses.replace(self.options, **changes))

    @override
    def invoke(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        *args: Any,  # noqa: ANN401
        final_action: FinalAction[ReturnT] | None = None,
    ) -> ReturnT | Any:  # noqa: ANN401
        """Run ``args`` through the wrapping entries, then ``final_action``.

        Returns:
            The value returned by ``final_action``, or ``EMPTY`` when the
            ``before`` chain halted or no entry ever called ``call_next``.

        """
        if not self._run_before(args):
            return EMPTY

        value: Any = EMPTY

        def target() -> Any:  # noqa: ANN401
            nonlocal value
            value = final_action() if final_action is not None else None
            return value

        _ = build_call_next(self.entries, args, target)()

        if (after := self.options.after) is not None:
            _ = after.invoke(*args)
        return value

    def invoke_bulk(
        self,
        args_list: ArgsList,
        final_action: BulkFinalAction[ReturnT],
    ) -> ReturnT:
        """Run every argument tuple through its own traversal of the entries.

        Items halted by ``before`` or never forwarded by an entry are
        dropped. ``final_action`` is called once with the surviving argument
        tuples in their original order, then ``after`` runs for each of them.

        An exception raised while processing an item propagates at once and
        the remaining items are never attempted.
        """
        items = [tuple(args) for args in args_list]
        success = [False] * len(items)
        entries = self.entries

        for i, args in enumerate(items):
            if not self._run_before(args):
                continue

            def target(i: int = i) -> None:
                success[i] = True

            _ = build_call_next(entries, args, target)()
            if not success[i]:
                logger.debug("Bulk item %d was not forwarded, skipping", i)

        accepted = [args for args, ok in zip(items, success, strict=True) if ok]
        value = final_action(accepted)

        if (after := self.options.after) is not None:
            for args in accepted:
                _ = after.invoke(*args)
        return value

    def _run_before(self, args: tuple[Any, ...]) -> bool:
        before = self.options.before
        if before is None or before.invoke(*args):
            return True
        if self.options.halt_on_false:
            logger.debug("Before chain halted invocation with %r", args)
            return False
        return True

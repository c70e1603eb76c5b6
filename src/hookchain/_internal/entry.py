from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hookchain._internal.common.types import Action, CallNext, EntryId


def is_named(hid: object) -> bool:
    return hid is not None and hid != ""


@dataclass(slots=True, frozen=True)
class Entry:
    """One unit of behaviour in a chain.

    Entries compare equal only by ``id``; the wrapped ``action`` is ignored.
    The same entry can be used by a linear ``Chain`` (called with the
    arguments only) or by an ``AroundChain`` (called with the continuation
    first, then the arguments).
    """

    action: Action = field(compare=False)
    id: EntryId | None = None

    @property
    def named(self) -> bool:
        return is_named(self.id)

    def __call__(self, *args: Any, call_next: CallNext | None = None) -> Any:  # noqa: ANN401
        if call_next is None:
            return self.action(*args)
        return self.action(call_next, *args)

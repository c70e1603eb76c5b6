from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from typing_extensions import Self

from hookchain._internal.common.constants import is_halt
from hookchain._internal.configuration import ChainOptions
from hookchain._internal.entry import Entry, is_named

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hookchain._internal.common.types import Action, EntryId

logger = logging.getLogger("hookchain.chain")


class Chain:
    """Ordered, mutable list of entries run one after another.

    Mutating methods are meant for the configuration phase. Once a chain is
    being invoked, it must not be changed concurrently.
    """

    __slots__: tuple[str, ...] = ("_entries", "options")

    def __init__(self, *, halt_on_false: bool = True) -> None:
        self._entries: list[Entry] = []
        self.options: ChainOptions = ChainOptions(halt_on_false=halt_on_false)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __contains__(self, hid: object) -> bool:
        return self.exists(hid)

    def __repr__(self) -> str:
        ids = [entry.id for entry in self._entries]
        return f"<{type(self).__name__} entries={ids!r}>"

    def add(self, action: Action, hid: EntryId | None = None) -> bool:
        """Append an entry, unless an entry with the same id exists.

        Returns:
            ``True`` when the entry was appended, ``False`` when ``hid`` was
            already taken and the call was a no-op.

        """
        if is_named(hid) and self.exists(hid):
            logger.debug("Entry %r already exists in %r, skipping", hid, self)
            return False
        self._entries.append(Entry(action, hid))
        return True

    def remove(self, hid: EntryId) -> None:
        if (i := self._find_index(hid)) is not None:
            del self._entries[i]

    def insert_before(
        self,
        anchor: EntryId | None,
        action: Action,
        hid: EntryId | None = None,
    ) -> None:
        """Insert an entry right before ``anchor``, or at the front.

        An existing entry with ``hid`` is moved rather than replaced.
        """
        entry = self._pop(hid) or Entry(action, hid)
        i = self._find_index(anchor)
        self._entries.insert(0 if i is None else i, entry)

    def insert_after(
        self,
        anchor: EntryId | None,
        action: Action,
        hid: EntryId | None = None,
    ) -> None:
        """Insert an entry right after ``anchor``.

        Without a matching anchor the entry lands just before the current
        last entry, so a closing entry keeps its place at the end.
        An existing entry with ``hid`` is moved rather than replaced.
        """
        entry = self._pop(hid) or Entry(action, hid)
        i = self._find_index(anchor)
        pos = max(len(self._entries) - 1, 0) if i is None else i + 1
        self._entries.insert(pos, entry)

    def exists(self, hid: object) -> bool:
        return self._find_index(hid) is not None

    def clear(self) -> None:
        self._entries.clear()

    def copy(self) -> Self:
        """Return an independent chain with the same options and entries."""
        return self._clone(self.options)

    def invoke(self, *args: Any) -> bool:  # noqa: ANN401
        """Call every entry with ``args`` in order.

        Returns:
            ``False`` if an entry halted the chain, ``True`` otherwise.

        """
        for entry in self._entries:
            if is_halt(entry(*args)) and self.options.halt_on_false:
                logger.debug("Chain halted by entry %r", entry.id)
                return False
        return True

    def _clone(self, options: ChainOptions) -> Self:
        new = self.__class__.__new__(self.__class__)
        new._entries = list(self._entries)  # noqa: SLF001
        new.options = options
        return new

    def _find_index(self, hid: object) -> int | None:
        if not is_named(hid):
            return None
        for i, entry in enumerate(self._entries):
            if entry.named and entry.id == hid:
                return i
        return None

    def _pop(self, hid: EntryId | None) -> Entry | None:
        if (i := self._find_index(hid)) is None:
            return None
        return self._entries.pop(i)

# pyright: reportExplicitAny=false
from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeAlias, TypeVar

ReturnT = TypeVar("ReturnT")

EntryId: TypeAlias = Hashable
CallNext: TypeAlias = Callable[[], Any]
Action: TypeAlias = Callable[..., Any]
FinalAction: TypeAlias = Callable[[], ReturnT]
BulkFinalAction: TypeAlias = Callable[[list[tuple[Any, ...]]], ReturnT]
ArgsList: TypeAlias = Sequence[Sequence[Any]]

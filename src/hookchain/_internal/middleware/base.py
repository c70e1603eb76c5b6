from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hookchain._internal.common.types import CallNext


@runtime_checkable
class BaseMiddleware(Protocol, metaclass=ABCMeta):
    @abstractmethod
    def __call__(self, call_next: CallNext, *args: Any) -> Any:  # noqa: ANN401
        pass

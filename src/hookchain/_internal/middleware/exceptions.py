from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias, final

from typing_extensions import override

from hookchain._internal.middleware.base import BaseMiddleware

if TYPE_CHECKING:
    from hookchain._internal.common.types import CallNext


ExceptionHandler: TypeAlias = Callable[..., None]
ExceptionHandlers: TypeAlias = dict[type[Exception], ExceptionHandler]
MappingExceptionHandlers: TypeAlias = Mapping[
    type[Exception], ExceptionHandler
]


@final
class ExceptionMiddleware(BaseMiddleware):
    """Report failures to a handler registered for the exception type.

    The handler is called as ``handler(exc, *args)`` and the exception is
    always re-raised afterwards.
    """

    __slots__: tuple[str, ...] = ("exc_handlers",)

    def __init__(self, exc_handlers: MappingExceptionHandlers) -> None:
        self.exc_handlers: ExceptionHandlers = dict(exc_handlers)

    @override
    def __call__(self, call_next: CallNext, *args: Any) -> Any:
        try:
            return call_next()
        except Exception as exc:
            if handler := self._lookup_exc_handler(exc):
                handler(exc, *args)
            raise

    def _lookup_exc_handler(self, exc: Exception) -> ExceptionHandler | None:
        for cls_exc in type(exc).__mro__:
            if handler := self.exc_handlers.get(cls_exc):
                return handler
        return None

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, final

from hookchain._internal.around import AroundChain

if TYPE_CHECKING:
    from hookchain._internal.common.types import (
        Action,
        ArgsList,
        BulkFinalAction,
        CallNext,
        FinalAction,
    )
    from hookchain._internal.middleware.base import BaseMiddleware

ReturnT = TypeVar("ReturnT")
MiddlewareType = type["BaseMiddleware"]


def wrap_middleware(
    middleware_cls: MiddlewareType,
    /,
    *init_args: Any,  # noqa: ANN401
    **init_kwargs: Any,  # noqa: ANN401
) -> Action:
    """Build an entry action creating a fresh middleware for every call."""

    def call(call_next: CallNext, *args: Any) -> Any:  # noqa: ANN401
        middleware = middleware_cls(*init_args, **init_kwargs)
        return middleware(call_next, *args)

    return call


@final
class MiddlewareChain:
    """Around chain keyed by middleware class.

    Classes are registered together with their constructor arguments and
    instantiated anew on each invocation, so middleware may keep per-call
    state on ``self``.
    """

    __slots__: tuple[str, ...] = ("chain",)

    def __init__(self, chain: AroundChain | None = None) -> None:
        self.chain: AroundChain = AroundChain() if chain is None else chain

    def __len__(self) -> int:
        return len(self.chain)

    def __contains__(self, middleware_cls: object) -> bool:
        return self.chain.exists(middleware_cls)

    def add(
        self,
        middleware_cls: MiddlewareType,
        /,
        *init_args: Any,  # noqa: ANN401
        **init_kwargs: Any,  # noqa: ANN401
    ) -> bool:
        action = wrap_middleware(middleware_cls, *init_args, **init_kwargs)
        return self.chain.add(action, middleware_cls)

    def insert_before(
        self,
        old_cls: MiddlewareType,
        new_cls: MiddlewareType,
        /,
        *init_args: Any,  # noqa: ANN401
        **init_kwargs: Any,  # noqa: ANN401
    ) -> None:
        action = wrap_middleware(new_cls, *init_args, **init_kwargs)
        self.chain.insert_before(old_cls, action, new_cls)

    def insert_after(
        self,
        old_cls: MiddlewareType,
        new_cls: MiddlewareType,
        /,
        *init_args: Any,  # noqa: ANN401
        **init_kwargs: Any,  # noqa: ANN401
    ) -> None:
        action = wrap_middleware(new_cls, *init_args, **init_kwargs)
        self.chain.insert_after(old_cls, action, new_cls)

    def remove(self, middleware_cls: MiddlewareType) -> None:
        self.chain.remove(middleware_cls)

    def exists(self, middleware_cls: MiddlewareType) -> bool:
        return self.chain.exists(middleware_cls)

    def clear(self) -> None:
        self.chain.clear()

    def retrieve(self) -> list[MiddlewareType]:
        return [entry.id for entry in self.chain.entries]  # pyright: ignore[reportReturnType]

    def invoke(
        self,
        *args: Any,  # noqa: ANN401
        final_action: FinalAction[ReturnT] | None = None,
    ) -> ReturnT | Any:  # noqa: ANN401
        return self.chain.invoke(*args, final_action=final_action)

    def invoke_bulk(
        self,
        args_list: ArgsList,
        final_action: BulkFinalAction[ReturnT],
    ) -> ReturnT:
        return self.chain.invoke_bulk(args_list, final_action)

from __future__ import annotations


class EmptyPlaceholder:
    """Result of an around invocation that never reached its final action."""

    __slots__: tuple[str, ...] = ()

    def __repr__(self) -> str:
        return "EMPTY"

    def __hash__(self) -> int:
        return hash("EMPTY")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__)

    def __bool__(self) -> bool:
        return False

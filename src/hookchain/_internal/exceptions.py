from collections.abc import Hashable


class BaseHookchainError(Exception):
    pass


class HookNotDefinedError(BaseHookchainError, KeyError):
    """Raised when looking up a hook name that was never defined."""

    def __init__(self, name: Hashable) -> None:
        self.name: Hashable = name
        msg = (
            f"Hook {name!r} is not defined. "
            "Call define_hooks() for it before adding entries or running it."
        )
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes around it.
        return str(self.args[0])


class ChainTimeoutError(BaseHookchainError):
    """Raised when a wrapped call overran its deadline."""

    def __init__(self, timeout: float, elapsed: float) -> None:
        self.timeout: float = timeout
        self.elapsed: float = elapsed

        msg = (
            f"Wrapped call took {elapsed:.3f} seconds, exceeding the "
            f"timeout of {timeout} seconds."
        )
        super().__init__(msg)

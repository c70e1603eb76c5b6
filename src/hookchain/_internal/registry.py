from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, ClassVar

from hookchain._internal.around import AroundChain
from hookchain._internal.chain import Chain
from hookchain._internal.exceptions import HookNotDefinedError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from hookchain._internal.common.types import FinalAction

logger = logging.getLogger("hookchain.registry")

AROUND_PATTERN = re.compile(r"\Aaround_(.+)\Z")


class HookRegistry:
    """Mapping of hook names to chains.

    A name of the form ``around_X`` yields an ``AroundChain`` wired to the
    plain chains ``before_X`` and ``after_X``, which are defined with it.
    """

    __slots__: tuple[str, ...] = ("_hooks",)

    def __init__(self, hooks: Mapping[str, Chain] | None = None) -> None:
        self._hooks: dict[str, Chain] = dict(hooks) if hooks else {}

    def __contains__(self, name: object) -> bool:
        return name in self._hooks

    def __iter__(self) -> Iterator[str]:
        return iter(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)

    def __getitem__(self, name: str) -> Chain:
        return self.chain(name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} hooks={list(self._hooks)!r}>"

    def define_hooks(self, *names: str, halt_on_false: bool = True) -> None:
        """Define one or more hooks; already defined names are kept as is."""
        for name in names:
            if not name:
                msg = "Hook name must be a non-empty string."
                raise ValueError(msg)
            if name in self._hooks:
                logger.debug("Hook %r is already defined, keeping it", name)
                continue

            if match := AROUND_PATTERN.match(name):
                before_name = f"before_{match.group(1)}"
                after_name = f"after_{match.group(1)}"
                self.define_hooks(
                    before_name,
                    after_name,
                    halt_on_false=halt_on_false,
                )
                self._hooks[name] = AroundChain(
                    halt_on_false=halt_on_false,
                    before=self._hooks[before_name],
                    after=self._hooks[after_name],
                )
            else:
                self._hooks[name] = Chain(halt_on_false=halt_on_false)
            logger.debug("Defined hook %r", name)

    define_hook = define_hooks

    def chain(self, name: str) -> Chain:
        try:
            return self._hooks[name]
        except KeyError:
            raise HookNotDefinedError(name) from None

    def run_hook(
        self,
        name: str,
        *args: Any,  # noqa: ANN401
        final_action: FinalAction[Any] | None = None,
    ) -> Any:  # noqa: ANN401
        chain = self.chain(name)
        if isinstance(chain, AroundChain):
            return chain.invoke(*args, final_action=final_action)
        return chain.invoke(*args)

    def derive(self) -> HookRegistry:
        """Return a registry whose chains start as copies of these ones.

        Around chains are rewired to the copied ``before``/``after`` chains,
        so the two registries never share a chain afterwards.
        """
        copies: dict[int, Chain] = {}

        def copy_of(chain: Chain) -> Chain:
            if id(chain) not in copies:
                copies[id(chain)] = chain.copy()
            return copies[id(chain)]

        hooks: dict[str, Chain] = {}
        for name, chain in self._hooks.items():
            if isinstance(chain, AroundChain):
                before, after = chain.options.before, chain.options.after
                copies[id(chain)] = chain.copy(
                    before=copy_of(before) if before is not None else None,
                    after=copy_of(after) if after is not None else None,
                )
            hooks[name] = copy_of(chain)
        return self.__class__(hooks)


class Hookable:
    """Mixin giving a class its own hook registry.

    Each subclass starts with a derived copy of its parent's registry and
    can then add, move or remove entries without touching the parent.

    Example::

        class Person(Hookable):
            def wash_hands(self) -> None: ...

        Person.define_hooks("before_eating")
        Person.hook("before_eating").add(Person.wash_hands, "wash_hands")
        Person().run_hook("before_eating")
    """

    _hooks: ClassVar[HookRegistry] = HookRegistry()

    def __init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init_subclass__(**kwargs)
        cls._hooks = cls._hooks.derive()

    @classmethod
    def define_hooks(cls, *names: str, halt_on_false: bool = True) -> None:
        cls._hooks.define_hooks(*names, halt_on_false=halt_on_false)

    define_hook = define_hooks

    @classmethod
    def hook(cls, name: str) -> Chain:
        return cls._hooks.chain(name)

    @classmethod
    def hooks(cls) -> HookRegistry:
        return cls._hooks

    def run_hook(
        self,
        name: str,
        *args: Any,  # noqa: ANN401
        final_action: FinalAction[Any] | None = None,
    ) -> Any:  # noqa: ANN401
        """Run the named hook with this instance as the first argument."""
        return self._hooks.run_hook(
            name,
            self,
            *args,
            final_action=final_action,
        )

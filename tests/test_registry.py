from typing import Any
from unittest.mock import Mock

import pytest

from hookchain import AroundChain, Chain, Hookable, HookRegistry
from hookchain.exceptions import BaseHookchainError, HookNotDefinedError
from hookchain.middleware import CallNext
from tests.conftest import recording, wrapping


def test_define_plain_hooks() -> None:
    registry = HookRegistry()
    registry.define_hooks("before_eating", "after_eating", halt_on_false=False)

    assert set(registry) == {"before_eating", "after_eating"}
    assert len(registry) == 2
    chain = registry.chain("before_eating")
    assert type(chain) is Chain
    assert chain.options.halt_on_false is False


def test_define_around_hook_wires_before_and_after() -> None:
    registry = HookRegistry()
    registry.define_hook("around_push")

    around = registry["around_push"]
    assert isinstance(around, AroundChain)
    assert "before_push" in registry
    assert "after_push" in registry
    assert around.options.before is registry["before_push"]
    assert around.options.after is registry["after_push"]


def test_define_keeps_existing_hooks() -> None:
    registry = HookRegistry()
    registry.define_hooks("before_push")
    before = registry["before_push"]
    _ = before.add(Mock(), "validate")

    registry.define_hooks("around_push", "before_push")

    assert registry["before_push"] is before
    assert registry["around_push"].options.before is before
    assert before.exists("validate")


def test_define_rejects_empty_name() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        HookRegistry().define_hooks("")


def test_undefined_hook() -> None:
    registry = HookRegistry()
    match = "Hook 'missing' is not defined."
    with pytest.raises(HookNotDefinedError, match=match) as exc_info:
        _ = registry.chain("missing")

    assert exc_info.value.name == "missing"
    assert isinstance(exc_info.value, KeyError)
    assert isinstance(exc_info.value, BaseHookchainError)


def test_run_hook(log: list[str]) -> None:
    registry = HookRegistry()
    registry.define_hooks("around_push", "on_error")
    _ = registry["before_push"].add(recording(log, "before"))
    _ = registry["around_push"].add(wrapping(log, "X"))
    _ = registry["after_push"].add(recording(log, "after"))
    _ = registry["on_error"].add(recording(log, "on_error", False))

    result = registry.run_hook(
        "around_push",
        "job",
        final_action=lambda: log.append("push") or "jid",
    )

    assert result == "jid"
    assert registry.run_hook("on_error", "job") is False
    assert log == [
        "before",
        "X-before",
        "push",
        "X-after",
        "after",
        "on_error",
    ]


def test_derive_copies_chains_independently() -> None:
    base = HookRegistry()
    base.define_hooks("around_push", "on_done")
    _ = base["around_push"].add(Mock(), "base")

    derived = base.derive()
    _ = derived["around_push"].add(Mock(), "derived")
    _ = derived["before_push"].add(Mock(), "check")

    assert not base["around_push"].exists("derived")
    assert not base["before_push"].exists("check")
    assert derived["around_push"].exists("base")
    assert derived["before_push"] is not base["before_push"]
    assert derived["on_done"] is not base["on_done"]
    assert derived["around_push"].options.before is derived["before_push"]
    assert derived["around_push"].options.after is derived["after_push"]


class Person(Hookable):
    def __init__(self) -> None:
        self.log: list[str] = []

    def wash_hands(self) -> None:
        self.log.append("washed_hands")

    def locate_food(self) -> bool:
        self.log.append("located_food")
        return False

    def sit_down(self) -> None:
        self.log.append("sat_down")


Person.define_hooks("before_eating", "around_eating")
_ = Person.hook("before_eating").add(Person.wash_hands, "wash_hands")
_ = Person.hook("before_eating").add(Person.locate_food, "locate_food")
_ = Person.hook("before_eating").add(Person.sit_down, "sit_down")


class Child(Person):
    def ask_parent(self) -> None:
        self.log.append("asked_parent")


_ = Child.hook("before_eating").insert_before(
    "wash_hands",
    Child.ask_parent,
    "ask_parent",
)


def test_hookable_runs_hooks_on_instance() -> None:
    person = Person()
    assert person.run_hook("before_eating") is False
    assert person.log == ["washed_hands", "located_food"]


def test_hookable_subclass_diverges_from_parent() -> None:
    child = Child()
    _ = child.run_hook("before_eating")

    assert child.log == ["asked_parent", "washed_hands", "located_food"]
    assert not Person.hook("before_eating").exists("ask_parent")
    assert Child.hooks() is not Person.hooks()


def test_hookable_around_hook_passes_instance() -> None:
    seen: list[Any] = []

    class Worker(Hookable):
        pass

    def entry(call_next: CallNext, worker: Worker, job: str) -> Any:
        seen.append((worker, job))
        return call_next()

    Worker.define_hook("around_perform")
    _ = Worker.hook("around_perform").add(entry)
    worker = Worker()

    assert worker.run_hook("around_perform", "j1", final_action=lambda: 7) == 7
    assert seen == [(worker, "j1")]
    assert "around_perform" not in Person.hooks()

from timeit import timeit
from typing import Any

from hookchain import AroundChain, Chain
from hookchain.middleware import CallNext

ENTRIES = 10
BATCH = 100


def passthrough(call_next: CallNext, *_args: Any) -> Any:  # noqa: ANN401
    return call_next()


def noop(*_args: Any) -> None:  # noqa: ANN401
    return None


def push(items: list[tuple[Any, ...]]) -> int:
    return len(items)


def build_chains() -> dict[str, Any]:
    linear = Chain()
    around = AroundChain()
    hooked = AroundChain(before=Chain(), after=Chain())
    for i in range(ENTRIES):
        _ = linear.add(noop, f"noop{i}")
        _ = around.add(passthrough, f"passthrough{i}")
        _ = hooked.add(passthrough, f"passthrough{i}")
    assert hooked.options.before is not None
    assert hooked.options.after is not None
    _ = hooked.options.before.add(noop)
    _ = hooked.options.after.add(noop)
    return {"linear": linear, "around": around, "hooked": hooked}


def chains_measure() -> dict[str, dict[str, float]]:
    chains = build_chains()
    items = [("worker", {"jid": str(i)}, "default") for i in range(BATCH)]
    cases = {
        "linear": ("chain.invoke(1, 2, 3)", chains["linear"]),
        "around": (
            "chain.invoke(1, 2, 3, final_action=int)",
            chains["around"],
        ),
        "around_hooked": (
            "chain.invoke(1, 2, 3, final_action=int)",
            chains["hooked"],
        ),
        "bulk": ("chain.invoke_bulk(items, push)", chains["hooked"]),
    }
    results: dict[str, float] = {}
    for k, (stmt, chain) in cases.items():
        globs = {"chain": chain, "items": items, "push": push}
        number = 100 if k == "bulk" else 10_000
        results[k] = timeit(stmt, globals=globs, number=number)
    results = dict(sorted(results.items(), key=lambda item: item[1]))
    return {"chains": results}

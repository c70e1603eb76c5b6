import json
import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeAlias

from .chains import chains_measure

logger = logging.getLogger(__name__)

Results: TypeAlias = dict[str, "float | dict[str, float]"]

DEFAULT_OUTPUT = Path("./benchmarks/benches.json")


@contextmanager
def timer() -> Iterator[None]:
    logger.info("Running chain benchmarks...")
    start = time.monotonic()
    yield None
    logger.info("Benchmarks completed in: %.2fs.", time.monotonic() - start)


def report(results: Results) -> None:
    for group, cases in results.items():
        if not isinstance(cases, dict):
            logger.info("%s: %.4fs", group, cases)
            continue
        for case, seconds in cases.items():
            logger.info("%s.%s: %.4fs", group, case, seconds)


def write_results(results: Results, output: Path) -> None:
    with output.open(mode="w", encoding="utf-8") as fp:
        json.dump(results, fp, indent=2)
    logger.info("Results saved to: %s", output)


def main(argv: list[str]) -> None:
    output = Path(argv[0]) if argv else DEFAULT_OUTPUT
    results: Results = {}
    with timer():
        results |= chains_measure()
    report(results)
    write_results(results, output)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )
    main(sys.argv[1:])

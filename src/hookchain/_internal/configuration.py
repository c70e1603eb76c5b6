from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hookchain._internal.chain import Chain


@dataclass(slots=True, kw_only=True, frozen=True)
class ChainOptions:
    halt_on_false: bool = True
    before: Chain | None = None
    after: Chain | None = None

"""Composable interceptor chains for wrapping units of work.

This module exposes the linear ``Chain`` with halt-on-false semantics, the
``AroundChain`` whose entries wrap a final action through a ``call_next``
continuation (including a batched mode), and the ``HookRegistry`` that
maps hook names to chains and derives per-type copies of them.
"""

from importlib.metadata import version as get_version

from hookchain._internal.around import AroundChain
from hookchain._internal.chain import Chain
from hookchain._internal.common.constants import EMPTY, Outcome, is_halt
from hookchain._internal.configuration import ChainOptions
from hookchain._internal.entry import Entry
from hookchain._internal.registry import Hookable, HookRegistry

__version__ = get_version("hookchain")
__all__ = (
    "EMPTY",
    "AroundChain",
    "Chain",
    "ChainOptions",
    "Entry",
    "HookRegistry",
    "Hookable",
    "Outcome",
    "is_halt",
)

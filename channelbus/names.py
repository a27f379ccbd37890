"""
ChannelBus — Event name specs
A name argument is one of:
  - a single event name:            "change"
  - several names, whitespace-split: "change blur"  or  ["change", "blur"]
  - a mapping of name -> value:      {"change": on_change, "blur": on_blur}
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

EventNameSpec = str | Sequence[str] | Mapping[str, Any]

EVENT_SPLITTER = re.compile(r"\s+")


def split_names(spec: Any) -> list[str] | None:
    """Return the names of a multi-name spec, or None when it is not one."""
    if isinstance(spec, str):
        if EVENT_SPLITTER.search(spec):
            return spec.split()
        return None
    if isinstance(spec, (list, tuple)):
        return list(spec)
    return None


def expand(spec: Any, value: Any) -> list[tuple[str, Any]] | None:
    """
    Normalize a compound spec into (name, value) pairs, in the order given.

    Mapping specs supply their own values. Multi-name specs pair every name
    with ``value``. Returns None for a single name, which callers handle
    directly.
    """
    if isinstance(spec, Mapping):
        return list(spec.items())
    names = split_names(spec)
    if names is None:
        return None
    return [(name, value) for name in names]

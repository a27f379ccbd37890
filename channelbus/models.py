"""
ChannelBus — Pydantic models
Listener records, subscription handles and channel snapshots.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class ListenerRecord(BaseModel):
    """One registration inside a bucket."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str
    callback: Callable[..., Any]
    context: Any = None
    target: Any = Field(None, description="context if given, else the owning registry")
    removed: bool = False


class Handle(BaseModel):
    """Token returned by on()/once(); off() drops exactly this registration."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"id": "#1000", "name": "success"},
            ]
        }
    }

    id: str
    name: str

    _registry: Any = PrivateAttr(default=None)

    @classmethod
    def for_record(cls, registry: Any, name: str, record: ListenerRecord) -> Handle:
        handle = cls(id=record.id, name=name)
        handle._registry = registry
        return handle

    def off(self) -> None:
        if self._registry is not None:
            self._registry.off(self.name, self.id)


class ChannelSummary(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "load",
                    "events": {"success": 2, "fail": 1},
                    "listening_to": 0,
                }
            ]
        }
    }

    name: str
    events: dict[str, int] = Field(default_factory=dict, description="event name -> listener count")
    listening_to: int = 0

"""
ChannelBus — Listener Registry
Per-object table of event name -> ordered listener records.
Supports on/once/off/trigger plus listen_to/stop_listening, where an object
subscribes to another registry and keeps the bookkeeping for later cleanup.

Registry works stand-alone or as a base class: state is created lazily,
so subclasses do not need to call ``Registry.__init__``.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Mapping
from typing import Any

from . import config
from .models import Handle, ListenerRecord
from .names import EventNameSpec, expand, split_names

logger = logging.getLogger("channelbus.registry")

# Process-wide, never reset: handle ids stay unique across registries.
_handle_ids = itertools.count(config.HANDLE_ID_START)
_listen_ids = itertools.count(1)


def _next_handle_id() -> str:
    return f"{config.HANDLE_ID_PREFIX}{next(_handle_ids)}"


class _OnceCallback:
    """Runs the wrapped callback a single time, deregistering itself first."""

    __slots__ = ("callback", "consumed", "handle")

    def __init__(self, callback: Callable[..., Any]):
        self.callback = callback
        self.consumed = False
        self.handle: Handle | None = None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.consumed:
            return None
        self.consumed = True
        if self.handle is not None:
            self.handle.off()
        return self.callback(*args, **kwargs)


def _original(callback: Callable[..., Any]) -> Callable[..., Any]:
    if isinstance(callback, _OnceCallback):
        return callback.callback
    return callback


def _matches(record: ListenerRecord, callback: Any, context: Any) -> bool:
    """True when ``record`` is selected by an off() filter."""
    if isinstance(callback, str):
        return record.id == callback
    if callback is not None and callback != record.callback and callback != _original(record.callback):
        return False
    if context is not None and context is not record.context:
        return False
    return True


def _dispatch(records: list[ListenerRecord], args: tuple, kwargs: dict[str, Any]) -> None:
    # Iterate the records present when dispatch starts; anything removed
    # in the meantime (by an earlier listener) is skipped.
    for record in tuple(records):
        if record.removed:
            continue
        record.callback(*args, **kwargs)


class Registry:
    """Event name -> listener list table with inversion-of-control helpers."""

    _events: dict[str, list[ListenerRecord]] | None = None
    _listening_to: dict[str, Registry] | None = None
    _listen_id: str | None = None

    # ── Registration ──────────────────────────────────────────────────────────

    def on(self, name: EventNameSpec, callback: Callable[..., Any] | None = None, context: Any = None):
        """
        Bind ``callback`` to ``name``. Listening on "all" receives every event
        with the event name as first argument.

        Returns a Handle for a single name. Compound names register each name
        separately and return the registry, as does a call without callback.
        """
        pairs = expand(name, callback)
        if pairs is not None:
            for event, cb in pairs:
                self.on(event, cb, context)
            return self
        if callback is None or name is None:
            return self

        if self._events is None:
            self._events = {}
        record = ListenerRecord(
            id=_next_handle_id(),
            callback=callback,
            context=context,
            target=self if context is None else context,
        )
        self._events.setdefault(name, []).append(record)
        return Handle.for_record(self, name, record)

    def once(self, name: EventNameSpec, callback: Callable[..., Any] | None = None, context: Any = None):
        """Like on(), but the callback is removed right before its first run."""
        pairs = expand(name, callback)
        if pairs is not None:
            for event, cb in pairs:
                self.once(event, cb, context)
            return self
        if callback is None or name is None:
            return self

        guard = _OnceCallback(callback)
        handle = self.on(name, guard, context)
        guard.handle = handle
        return handle

    def off(self, name: EventNameSpec | None = None, callback: Any = None, context: Any = None) -> Registry:
        """
        Remove one or many callbacks.

        ``callback`` is either a callable or a handle id string. Without
        ``context`` every record with that callback goes; without ``callback``
        every record of the event goes; without ``name`` every event is
        considered. With no arguments at all the registry is emptied.
        """
        if self._events is None:
            return self
        pairs = expand(name, callback)
        if pairs is not None:
            for event, cb in pairs:
                self.off(event, cb, context)
            return self

        if name is None and callback is None and context is None:
            self._clear()
            return self

        names = [name] if name is not None else list(self._events)
        for event in names:
            bucket = self._events.get(event)
            if bucket is None:
                continue

            if callback is None and context is None:
                self._drop(event)
                continue

            remaining = []
            for record in bucket:
                if _matches(record, callback, context):
                    record.removed = True
                else:
                    remaining.append(record)

            if remaining:
                self._events[event] = remaining
            else:
                del self._events[event]

        return self

    def _drop(self, event: str) -> None:
        for record in self._events.pop(event, ()):
            record.removed = True

    def _clear(self) -> None:
        for bucket in self._events.values():
            for record in bucket:
                record.removed = True
        self._events = None
        logger.debug("Registry %r cleared", self)

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def trigger(self, name: EventNameSpec, *args: Any, **kwargs: Any) -> Registry:
        """
        Fire ``name`` synchronously. Listeners receive the same arguments as
        trigger(), except "all" listeners, which get the event name first.
        Exceptions raised by a listener propagate and end the dispatch.
        """
        if not self._events:
            return self

        if isinstance(name, Mapping):
            for event, value in list(name.items()):
                self.trigger(event, value, *args, **kwargs)
            return self
        names = split_names(name)
        if names is not None:
            for event in names:
                self.trigger(event, *args, **kwargs)
            return self

        bucket = self._events.get(name)
        every = self._events.get(config.ALL_EVENTS)
        if bucket:
            _dispatch(bucket, args, kwargs)
        if every:
            _dispatch(every, (name, *args), kwargs)
        return self

    # ── Inversion of control ──────────────────────────────────────────────────

    @property
    def listen_id(self) -> str:
        """Stable id under which other registries record this one."""
        if self._listen_id is None:
            self._listen_id = f"{config.LISTEN_ID_PREFIX}{next(_listen_ids)}"
        return self._listen_id

    @property
    def listening_to(self) -> dict[str, Registry]:
        return dict(self._listening_to or {})

    def listen_to(self, source: Registry, name: EventNameSpec, callback: Callable[..., Any] | None = None) -> Registry:
        """Subscribe to ``source`` with this registry as context."""
        return self._listen(source, source.on, name, callback)

    def listen_to_once(
        self, source: Registry, name: EventNameSpec, callback: Callable[..., Any] | None = None
    ) -> Registry:
        return self._listen(source, source.once, name, callback)

    def _listen(self, source: Registry, subscribe: Callable[..., Any], name: Any, callback: Any) -> Registry:
        if self._listening_to is None:
            self._listening_to = {}
        self._listening_to[source.listen_id] = source
        subscribe(name, callback, self)
        return self

    def stop_listening(
        self, source: Registry | None = None, name: EventNameSpec | None = None, callback: Any = None
    ) -> Registry:
        """
        Remove subscriptions this registry made with listen_to(), either on one
        ``source`` or on every source it listens to.
        """
        if not self._listening_to:
            return self
        full_stop = name is None and callback is None
        sources = {source.listen_id: source} if source is not None else dict(self._listening_to)

        for listen_id, obj in sources.items():
            obj.off(name, callback, self)
            if full_stop or not obj.has_listeners():
                if self._listening_to.pop(listen_id, None) is not None:
                    logger.debug("Registry %s stopped listening to %s", self.listen_id, listen_id)
        return self

    # ── Introspection ─────────────────────────────────────────────────────────

    def event_names(self) -> list[str]:
        return list(self._events or {})

    def listeners(self, name: str) -> tuple[ListenerRecord, ...]:
        return tuple((self._events or {}).get(name, ()))

    def has_listeners(self, name: str | None = None) -> bool:
        if not self._events:
            return False
        if name is None:
            return True
        return name in self._events

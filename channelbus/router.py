"""
ChannelBus — Channel Router
Namespace of isolated registries ("channels") addressed by a name prefix:
"load:success" targets event "success" on channel "load", a bare "success"
targets the default channel. Channels are created on first subscription.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping
from typing import Any

from . import config
from .errors import InvalidChannelName
from .models import ChannelSummary
from .names import EventNameSpec
from .registry import Registry

logger = logging.getLogger("channelbus.router")


class ChannelRouter:
    """
    Routes on/once/off/emit to per-channel registries.

    Args:
        channels: Channel table to operate on (default: a new empty dict)
        default_channel: Channel used when a name has no prefix
        splitter: Separator between channel and event name
    """

    def __init__(
        self,
        channels: MutableMapping[str, Registry] | None = None,
        default_channel: str | None = None,
        splitter: str | None = None,
    ):
        self.channels: MutableMapping[str, Registry] = channels if channels is not None else {}
        self.default_channel = default_channel or config.DEFAULT_CHANNEL
        self.splitter = splitter or config.CHANNEL_SPLITTER

    def parse(self, name: Any) -> tuple[str, Any]:
        """Split ``"channel:event"`` at the first separator."""
        if isinstance(name, str) and self.splitter in name:
            channel, _, event = name.partition(self.splitter)
            return channel, event
        return self.default_channel, name

    # ── Channels ──────────────────────────────────────────────────────────────

    def add_channel(self, name: str) -> ChannelRouter:
        """Create channel ``name`` unless it already exists."""
        if name is None or name == "":
            raise InvalidChannelName("Cannot add a channel without a name", name)
        if name not in self.channels:
            self.channels[name] = Registry()
            logger.debug("Channel created: %s", name)
        return self

    def remove_channel(self, name: str) -> ChannelRouter | bool:
        """Clear and delete channel ``name``. Returns False if it did not exist."""
        if name is None or name == "":
            raise InvalidChannelName("Cannot remove a channel without a name", name)
        registry = self.channels.get(name)
        if registry is None:
            return False
        registry.off()
        del self.channels[name]
        logger.debug("Channel removed: %s", name)
        return self

    def channel(self, name: str) -> Registry | None:
        return self.channels.get(name)

    def has_channel(self, name: str) -> bool:
        return name in self.channels

    def channel_names(self) -> list[str]:
        return list(self.channels)

    def describe(self) -> list[ChannelSummary]:
        """Snapshot of every channel with its listener counts."""
        return [
            ChannelSummary(
                name=name,
                events={event: len(registry.listeners(event)) for event in registry.event_names()},
                listening_to=len(registry.listening_to),
            )
            for name, registry in self.channels.items()
        ]

    # ── Subscriptions ─────────────────────────────────────────────────────────

    def on(self, name: EventNameSpec, callback: Callable[..., Any] | None = None, context: Any = None):
        """
        Listen to ``channel:event`` (or ``event`` on the default channel).
        Several events of one channel may be given space-separated:
        ``"load:state success fail"``.
        """
        channel, event = self.parse(name)
        if context is None:
            context = self
        self.add_channel(channel)
        return self.channels[channel].on(event, callback, context)

    def once(self, name: EventNameSpec, callback: Callable[..., Any] | None = None, context: Any = None):
        """Same as on(), but the callback is removed after its first run."""
        channel, event = self.parse(name)
        if context is None:
            context = self
        self.add_channel(channel)
        return self.channels[channel].once(event, callback, context)

    def off(self, name: EventNameSpec | None = None, callback: Any = None, context: Any = None) -> ChannelRouter:
        """
        Without arguments every channel is removed. ``"@channel"`` removes one
        whole channel. Otherwise ``channel:event`` or ``event`` is unbound.
        """
        if name is None:
            names = list(self.channels)
            for channel in names:
                self.remove_channel(channel)
            logger.info("All channels removed (%d)", len(names))
            return self

        if isinstance(name, str) and name.startswith(config.CHANNEL_REMOVE_PREFIX):
            channel = name[len(config.CHANNEL_REMOVE_PREFIX) :]
            if channel in self.channels:
                self.remove_channel(channel)
            return self

        channel, event = self.parse(name)
        registry = self.channels.get(channel)
        if registry is not None:
            registry.off(event, callback, context)
        return self

    # ── Publishing ────────────────────────────────────────────────────────────

    def emit(self, name: EventNameSpec, *args: Any, **kwargs: Any) -> ChannelRouter:
        """Trigger ``channel:event``. Events for unknown channels are dropped."""
        channel, event = self.parse(name)
        registry = self.channels.get(channel)
        if registry is not None:
            registry.trigger(event, *args, **kwargs)
        return self

"""
ChannelBus — Exceptions
"""

from __future__ import annotations

from typing import Any


class ChannelBusError(Exception):
    """Base error class for ChannelBus."""


class InvalidChannelName(ChannelBusError, ValueError):
    """A channel operation was given an empty or missing channel name."""

    def __init__(self, message: str, name: Any = None):
        super().__init__(message)
        self.name = name

"""
ChannelBus — Centralized configuration
All environment variables and constants in a single place.
"""

import os

# ── Channels ──────────────────────────────────────────────────────────────────

DEFAULT_CHANNEL = os.getenv("CHANNELBUS_DEFAULT_CHANNEL", "global")
CHANNEL_SPLITTER = os.getenv("CHANNELBUS_CHANNEL_SPLITTER", ":")
CHANNEL_REMOVE_PREFIX = "@"  # "@name" addresses a whole channel in off()

# ── Events ────────────────────────────────────────────────────────────────────

ALL_EVENTS = "all"  # listeners on this name receive every event

# ── Identifiers ───────────────────────────────────────────────────────────────

HANDLE_ID_PREFIX = "#"
HANDLE_ID_START = 1000
LISTEN_ID_PREFIX = "l"

# ── Version ───────────────────────────────────────────────────────────────────

VERSION = "1.0.0"

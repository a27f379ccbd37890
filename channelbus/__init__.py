# ChannelBus package

from .config import VERSION as __version__
from .errors import ChannelBusError, InvalidChannelName
from .models import ChannelSummary, Handle, ListenerRecord
from .registry import Registry
from .router import ChannelRouter

__all__ = [
    "__version__",
    "ChannelRouter",
    "Registry",
    "Handle",
    "ListenerRecord",
    "ChannelSummary",
    "ChannelBusError",
    "InvalidChannelName",
]

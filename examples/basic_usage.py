"""
Basic usage of ChannelBus.

Demonstrates how to:
- Subscribe to events on the default channel and on named channels
- Use one-shot listeners and "all" listeners
- Unsubscribe through handles, callbacks and whole channels
- Let one object listen to another and clean up in one call
"""

import logging

from channelbus import ChannelRouter, Registry


class Loader:
    def __init__(self) -> None:
        self.loaded: list[int] = []

    def success(self, value: int) -> None:
        self.loaded.append(value)
        print(f"Loaded {value}")


class Dashboard(Registry):
    def refresh(self, *args) -> None:
        print(f"Dashboard refresh: {args}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    bus = ChannelRouter()

    # -- Channels -------------------------------------------------------------
    # "load:success" is event "success" on channel "load" (created on demand).
    loader = Loader()
    handle = bus.on("load:success", loader.success, loader)
    bus.emit("load:success", 42)

    # A bare name goes to the default "global" channel.
    bus.on("ready", lambda: print("Ready on the global channel"))
    bus.emit("ready")
    bus.emit("load:ready")  # different channel, nobody listens

    # -- once / all -----------------------------------------------------------
    bus.once("load:fail", lambda reason: print(f"First failure only: {reason}"))
    bus.emit("load:fail", "timeout")
    bus.emit("load:fail", "ignored")

    bus.on("load:all", lambda name, *args: print(f"[load] {name} {args}"))
    bus.emit("load:state success", 7)

    # -- Unsubscribing --------------------------------------------------------
    handle.off()  # exactly that registration
    bus.emit("load:success", 43)
    bus.off("@load")  # the whole channel
    print(f"Channels left: {bus.channel_names()}")

    # -- Inversion of control -------------------------------------------------
    model = Registry()
    dashboard = Dashboard()
    dashboard.listen_to(model, "change reset", dashboard.refresh)
    model.trigger("change", {"rows": 3})
    dashboard.stop_listening()
    model.trigger("reset")  # no longer delivered

    for summary in bus.describe():
        print(summary.model_dump())

    bus.off()


if __name__ == "__main__":
    main()

"""Background producers of key, tick and refresh events."""

from __future__ import annotations

import enum
import queue
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Union

from procdisplay.config import KeyCode, char_key

KeyReader = Callable[[float], Optional[KeyCode]]


class EventKind(enum.Enum):
    INPUT = "input"
    TICK = "tick"
    REFRESH = "refresh"


@dataclass(frozen=True)
class Event:
    """A key press (``INPUT`` with its key), a tick, or a request to refresh."""

    kind: EventKind
    key: Optional[KeyCode] = None


@dataclass(frozen=True)
class EventConfig:
    """Event timing; rates are in milliseconds."""

    exit_key: KeyCode = char_key("q")
    tick_rate: int = 250
    refresh_rate: int = 10_000

    def __post_init__(self) -> None:
        if self.tick_rate <= 0 or self.refresh_rate <= 0:
            raise ValueError("tick_rate and refresh_rate must be positive")


class Events:
    """Merges key presses, ticks and periodic refreshes into one stream.

    ``read_key(timeout)`` waits up to ``timeout`` seconds for a key and returns
    it, or None when none arrived. Every wait is followed by a tick.
    """

    def __init__(self, read_key: KeyReader, tick_rate: int, refresh_rate: int) -> None:
        self._start(read_key, EventConfig(tick_rate=tick_rate, refresh_rate=refresh_rate))

    @classmethod
    def with_config(cls, read_key: KeyReader, config: EventConfig) -> "Events":
        instance = cls.__new__(cls)
        instance._start(read_key, config)
        return instance

    def _start(self, read_key: KeyReader, config: EventConfig) -> None:
        self.config = config
        self._queue: "queue.Queue[Union[Event, BaseException]]" = queue.Queue()
        self._stop = threading.Event()
        self._threads = [
            threading.Thread(target=self._read_input, args=(read_key,), daemon=True),
            threading.Thread(target=self._send_refreshes, daemon=True),
        ]
        for thread in self._threads:
            thread.start()

    def _read_input(self, read_key: KeyReader) -> None:
        tick = self.config.tick_rate / 1000
        while not self._stop.is_set():
            try:
                key = read_key(tick)
            except Exception as exc:  # handed to the consumer by next()
                self._queue.put(exc)
                return
            if self._stop.is_set():
                return
            if key is not None:
                self._queue.put(Event(EventKind.INPUT, key))
            self._queue.put(Event(EventKind.TICK))

    def _send_refreshes(self) -> None:
        interval = self.config.refresh_rate / 1000
        while not self._stop.wait(interval):
            self._queue.put(Event(EventKind.REFRESH))

    def next(self, timeout: Optional[float] = None) -> Event:
        """The next event; raises TimeoutError if none comes within ``timeout`` seconds."""
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event arrived in time") from None
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        """Stop the producer threads."""
        self._stop.set()
        wait = self.config.tick_rate / 1000 + 1.0
        for thread in self._threads:
            thread.join(wait)

    def __enter__(self) -> "Events":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
"""Replay-of-one publish/subscribe channel.

A :class:`ReplayChannel` keeps the most recently published value and hands it
to every new subscriber at attach time, so a UI that attaches after the first
command still sees the current state. Delivery is synchronous and in
subscription order; an exception raised by a listener propagates to the
publisher.

The listener list is a persistent vector: ``publish`` iterates a snapshot, so
listeners may detach (or attach others) while being notified.
"""

from dataclasses import dataclass, field
from itertools import count
from typing import Generic, Iterator, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from toy_robot.types import Listener, T


@dataclass
class Subscription(Generic[T]):
    """Handle returned by :meth:`ReplayChannel.subscribe`."""

    channel: "ReplayChannel[T]"
    token: int
    active: bool = True

    def unsubscribe(self) -> None:
        """Detach from the channel. Idempotent."""
        if self.active:
            self.channel._detach(self.token)
            self.active = False

    def __enter__(self) -> "Subscription[T]":
        return self

    def __exit__(self, *exc: object) -> None:
        self.unsubscribe()


@dataclass
class ReplayChannel(Generic[T]):
    """Channel retaining only its latest value.

    Attributes:
        name (str): Label used in diagnostics.
    """

    name: str = "channel"
    _latest: Optional[T] = field(default=None, init=False, repr=False)
    _has_value: bool = field(default=False, init=False, repr=False)
    _listeners: PVector[tuple[int, Listener[T]]] = field(
        default_factory=pvector, init=False, repr=False
    )
    _tokens: Iterator[int] = field(default_factory=count, init=False, repr=False)

    @property
    def latest(self) -> Optional[T]:
        """Most recently published value, or ``None`` before the first one."""
        return self._latest

    @property
    def has_value(self) -> bool:
        return self._has_value

    def __len__(self) -> int:
        return len(self._listeners)

    def publish(self, value: T) -> None:
        """Retain ``value`` and deliver it to every attached listener."""
        self._latest = value
        self._has_value = True
        for _, listener in self._listeners:
            listener(value)

    def subscribe(self, listener: Listener[T]) -> Subscription[T]:
        """Attach ``listener``; replays the latest value immediately if any.

        The listener is attached only once the replay returned, so a listener
        that raises on replay is never left subscribed.
        """
        if self._has_value:
            listener(self._latest)  # type: ignore[arg-type]
        token = next(self._tokens)
        self._listeners = self._listeners.append((token, listener))
        return Subscription(self, token)

    def _detach(self, token: int) -> None:
        self._listeners = pvector(
            entry for entry in self._listeners if entry[0] != token
        )

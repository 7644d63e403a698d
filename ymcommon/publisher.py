"""Publish/subscribe with publishers that hold their subscribers weakly."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Any


class Subscriber(ABC):
    """Receives payloads from the publishers it is subscribed to."""

    @abstractmethod
    def receive(self, payload: Any) -> bool:
        """Handle a published payload; return whether it was accepted."""


class Publisher:
    """Delivers payloads to subscribers that are still alive.

    Subscribers are referenced weakly, so a publisher never keeps one alive.
    Subscribers that have been collected are dropped on the next publish.
    """

    def __init__(self) -> None:
        self._subs: list[weakref.ref[Subscriber]] = []

    def __len__(self) -> int:
        return sum(1 for ref in self._subs if ref() is not None)

    def subscribe(self, subscriber: Subscriber | None) -> None:
        """Add ``subscriber`` unless it is None or already subscribed."""
        if subscriber is None:
            return
        if any(ref() is subscriber for ref in self._subs):
            return
        self._subs.append(weakref.ref(subscriber))

    def publish(self, payload: Any) -> None:
        """Send ``payload`` to every live subscriber, in subscription order."""
        expired_found = False
        for ref in list(self._subs):
            subscriber = ref()
            if subscriber is None:
                expired_found = True
            else:
                subscriber.receive(payload)
        if expired_found:
            self._subs = [ref for ref in self._subs if ref() is not None]
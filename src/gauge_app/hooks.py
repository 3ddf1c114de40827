"""Synchronous hook registry mirroring the host's named-event dispatch."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

# Host events that trigger a gauge refresh
UPDATE_COMBAT = "updateCombat"
DELETE_COMBAT = "deleteCombat"
UPDATE_ACTOR = "updateActor"

HookHandler = Callable[..., None]


@dataclass(eq=False)
class Subscription:
    """One registration of a handler; ``once`` entries drop after a call."""

    handler: HookHandler
    once: bool = False


class HookRegistry:
    """Named events with ordered, synchronous subscribers.

    Handlers run one at a time in subscription order. A handler that raises
    is logged and skipped so the remaining subscribers still run.
    """

    def __init__(self):
        self._subscriptions: Dict[str, List[Subscription]] = defaultdict(list)

    def on(self, event: str, handler: HookHandler) -> None:
        """Subscribe *handler* to every future *event*."""
        self._subscribe(event, Subscription(handler))

    def once(self, event: str, handler: HookHandler) -> None:
        """Subscribe *handler* to the next *event* only."""
        self._subscribe(event, Subscription(handler, once=True))

    def _subscribe(self, event: str, subscription: Subscription) -> None:
        self._subscriptions[event].append(subscription)
        logger.debug(
            "Subscribed %s to %s%s",
            getattr(subscription.handler, "__name__", "anonymous"), event,
            " (once)" if subscription.once else "",
        )

    def off(self, event: str, handler: HookHandler) -> bool:
        """Drop every registration of *handler* for *event*.

        Returns:
            True if anything was removed.
        """
        subscriptions = self._subscriptions.get(event, [])
        kept = [sub for sub in subscriptions if sub.handler != handler]
        if len(kept) == len(subscriptions):
            return False
        subscriptions[:] = kept
        return True

    def call(self, event: str, *args, **kwargs) -> int:
        """Dispatch *event* to its subscribers.

        Returns:
            Number of handlers that completed without raising.
        """
        subscriptions = self._subscriptions.get(event, [])
        completed = 0
        for sub in subscriptions[:]:
            if sub.once and sub in subscriptions:
                subscriptions.remove(sub)
            try:
                sub.handler(*args, **kwargs)
            except Exception:
                logger.exception(
                    "Hook handler %s failed on %s",
                    getattr(sub.handler, "__name__", "anonymous"), event,
                )
                continue
            completed += 1
        return completed

    def subscriber_count(self, event: str) -> int:
        return len(self._subscriptions.get(event, []))

"""
Event Bus - Priority-Ordered Publish/Subscribe.

Modules subscribe handlers to named events at an integer priority. Lower
priorities run first; equal priorities run in subscription order because
the subscriber list is re-sorted with Python's stable sort.

Design Notes:
    - ``trigger`` runs handlers strictly one after another. Handlers
      subscribed with ``is_async=True`` are awaited before the next one
      starts, so later stages can rely on earlier async side effects.
    - ``chain`` folds handler return values into one accumulator, used to
      build remote query parameters from several modules.
    - A raising handler propagates immediately; remaining handlers for the
      event do not run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

RENDER_EVENT = "render"
REMOTE_PARAMS_EVENT = "remoteParams"
POST_INIT_EVENT = "postInitMod"


class Stage(IntEnum):
    """Render-cycle priorities; lower runs earlier."""

    FILTER = 8
    SORT = 9
    ROWS = 10
    COUNT = 20


@dataclass
class EventSubscription:
    """A handler subscribed to an event."""

    event_name: str
    handler: Callable[..., Any]
    priority: int = 0
    is_async: bool = False


class EventBus:
    """Publish/subscribe hub shared by all grid modules."""

    def __init__(self) -> None:
        self._events: Dict[str, List[EventSubscription]] = {}

    def subscribe(
        self,
        event_name: str,
        handler: Callable[..., Any],
        is_async: bool = False,
        priority: int = 0,
    ) -> None:
        """
        Add a handler to an event's subscriber list.

        Args:
            event_name: Event name
            handler: Callback
            is_async: Await the handler's result when triggered
            priority: Execution order; lower runs earlier
        """
        subscribers = self._events.setdefault(event_name, [])
        subscribers.append(
            EventSubscription(
                event_name=event_name,
                handler=handler,
                priority=int(priority),
                is_async=is_async,
            )
        )
        subscribers.sort(key=lambda s: s.priority)
        logger.debug(f"Subscribed {_name_of(handler)} to '{event_name}' (priority {priority})")

    def unsubscribe(self, event_name: str, handler: Callable[..., Any]) -> None:
        """Remove every subscription of handler for event_name."""
        if event_name not in self._events:
            return

        self._events[event_name] = [
            s for s in self._events[event_name] if s.handler != handler
        ]

    def has_subscribers(self, event_name: str) -> bool:
        return bool(self._events.get(event_name))

    def subscriber_count(self, event_name: str) -> int:
        return len(self._events.get(event_name, []))

    def chain(
        self,
        event_name: str,
        initial_value: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """
        Fold subscriber results into a single value.

        Each handler receives the accumulator and returns the next one.

        Args:
            event_name: Event name
            initial_value: Starting accumulator (defaults to an empty dict)

        Returns:
            Final accumulator, or None if the event has no subscribers
        """
        if not self.has_subscribers(event_name):
            return None

        result: Any = {} if initial_value is None else initial_value

        for subscription in self._events[event_name]:
            result = subscription.handler(result)

        return result

    async def trigger(self, event_name: str, *args: Any) -> None:
        """
        Run every subscriber of event_name in priority order.

        Args:
            event_name: Event name
            *args: Arguments passed to each handler
        """
        if not self.has_subscribers(event_name):
            return

        # Copy so handlers may (un)subscribe without disturbing this pass.
        for subscription in list(self._events[event_name]):
            if subscription.is_async:
                await subscription.handler(*args)
            else:
                subscription.handler(*args)


def _name_of(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", repr(handler))

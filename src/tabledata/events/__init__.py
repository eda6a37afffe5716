"""
Events Package - Priority-Ordered Event Bus.
"""

from tabledata.events.bus import (
    POST_INIT_EVENT,
    REMOTE_PARAMS_EVENT,
    RENDER_EVENT,
    EventBus,
    EventSubscription,
    Stage,
)

__all__ = [
    "EventBus",
    "EventSubscription",
    "POST_INIT_EVENT",
    "REMOTE_PARAMS_EVENT",
    "RENDER_EVENT",
    "Stage",
]

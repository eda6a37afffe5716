"""
Data Pipeline - Named Sequences of Asynchronous Steps.

A pipeline is a registry of steps addressed by event name. Presence of a
pipeline (``has_pipeline``) decides whether a load phase happens at all;
``execute`` runs the steps strictly in registration order, awaiting each
before starting the next.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineStep:
    """A callback registered under an event name."""

    event_name: str
    callback: Callable[..., Any]


class DataPipeline:
    """Registry and sequential runner of pipeline steps."""

    def __init__(self) -> None:
        self._steps: Dict[str, List[PipelineStep]] = {}

    def add_step(self, event_name: str, callback: Callable[..., Any]) -> None:
        """
        Register a step; an identical (event, callback) pair is ignored.

        Args:
            event_name: Pipeline name
            callback: Step callable, sync or async
        """
        steps = self._steps.setdefault(event_name, [])
        if any(s.callback == callback for s in steps):
            logger.debug(f"Ignoring duplicate step for '{event_name}'")
            return

        steps.append(PipelineStep(event_name=event_name, callback=callback))

    def has_pipeline(self, event_name: str) -> bool:
        return bool(self._steps.get(event_name))

    def count_event_steps(self, event_name: str) -> int:
        return len(self._steps.get(event_name, []))

    async def execute(self, event_name: str, *args: Any) -> None:
        """
        Run all steps for event_name in order.

        Args:
            event_name: Pipeline name
            *args: Arguments passed to every step

        Raises:
            Exception: Whatever a failing step raises; remaining steps are skipped
        """
        steps = list(self._steps.get(event_name, []))
        logger.debug(f"Executing pipeline '{event_name}' with {len(steps)} steps")

        for i, step in enumerate(steps, 1):
            try:
                result = step.callback(*args)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Pipeline '{event_name}' step {i}/{len(steps)} failed: {e}")
                raise

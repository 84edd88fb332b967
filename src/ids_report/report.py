"""Report — aggregates the events raised while scanning one request.

The filter engine feeds events in through add_event(); consumers read the
total impact, the affected tags, individual events, or the rendered text.
Impact and tags are computed on first read and cached until the next
mutation. The report holds no locks: it is filled by a single owner and
handed off for read-only use.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from ids_report.errors import InvalidInput
from ids_report.model.event import Event
from ids_report.render import render_report

if TYPE_CHECKING:
    from ids_report.config import RenderConfig

logger = logging.getLogger(__name__)


class Report:
    """Event container keyed by event name, with cached impact and tags."""

    def __init__(self, events: Iterable[Event] | None = None) -> None:
        self._events: dict[str, Event] = {}
        # None means "not computed yet"; zero and [] are valid cached values
        self._tags: list[str] | None = None
        self._impact: int | None = None
        self._centrifuge: dict[str, Any] = {}
        for event in events or ():
            self.add_event(event)

    # ------------------------------------------------------------------
    # Event store
    # ------------------------------------------------------------------

    def add_event(self, event: Event) -> Report:
        """Store ``event`` under its name, replacing any earlier one."""
        self._clear()
        if event.name in self._events:
            logger.debug("Replacing event %r (impact %d)", event.name, event.impact)
        else:
            logger.debug("Adding event %r (impact %d)", event.name, event.impact)
        self._events[event.name] = event
        return self

    def get_event(self, name: str) -> Event | None:
        """Return the event stored under ``name``, or None if there is none.

        Raises:
            InvalidInput: if ``name`` is not a string.
        """
        _check_name(name)
        return self._events.get(name)

    def has_event(self, name: str) -> bool:
        _check_name(name)
        return name in self._events

    def count(self) -> int:
        return len(self._events)

    def is_empty(self) -> bool:
        return not self._events

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, name: object) -> bool:
        """Same contract as has_event(): a non-string name raises InvalidInput
        rather than returning False.
        """
        return self.has_event(name)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events.values()))

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def get_tags(self) -> list[str]:
        """Return every affected tag once, in first-seen order across events."""
        if self._tags is None:
            merged = (tag for event in self._events.values() for tag in event.tags)
            self._tags = list(dict.fromkeys(merged))
            logger.debug("Computed %d tags over %d events", len(self._tags), len(self._events))
        return list(self._tags)

    def get_impact(self) -> int:
        """Return the summed impact of all stored events."""
        if self._impact is None:
            self._impact = sum(event.impact for event in self._events.values())
            logger.debug("Computed impact %d over %d events", self._impact, len(self._events))
        return self._impact

    def _clear(self) -> None:
        self._tags = None
        self._impact = None

    # ------------------------------------------------------------------
    # Centrifuge data
    # ------------------------------------------------------------------

    def get_centrifuge(self) -> dict[str, Any] | None:
        """Return the centrifuge payload, or None if none has been set."""
        return dict(self._centrifuge) if self._centrifuge else None

    def set_centrifuge(self, data: Mapping[str, Any]) -> bool:
        """Attach centrifuge detection data (threshold, ratio, converted).

        Raises:
            InvalidInput: if ``data`` is not a mapping or is empty. Any
                previously stored payload is left untouched.
        """
        if not isinstance(data, Mapping) or not data:
            raise InvalidInput("Centrifuge data must be a non-empty mapping")
        self._centrifuge = dict(data)
        logger.debug("Centrifuge data set: %s", list(self._centrifuge))
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, config: RenderConfig | None = None) -> str:
        return render_report(self, config)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Report(events={len(self._events)}, impact={self.get_impact()})"


def _check_name(name: object) -> None:
    if not isinstance(name, str):
        raise InvalidInput(f"Event name must be a string, got {type(name).__name__}")

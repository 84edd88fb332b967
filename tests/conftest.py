"""Shared pytest fixtures for the ids_report test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from ids_report.config import RenderConfig
from ids_report.model.event import Event
from ids_report.model.filter import FilterMatch
from ids_report.report import Report


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def render_config() -> RenderConfig:
    return RenderConfig()


# ---------------------------------------------------------------------------
# Model factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_filter() -> Callable[..., FilterMatch]:
    """Factory: create a FilterMatch with sensible defaults, override via kwargs."""

    def _factory(**kwargs: Any) -> FilterMatch:
        defaults: dict[str, Any] = {
            "id": 1,
            "rule": r"(?:<script)",
            "description": "Detects script tags",
            "tags": ["xss"],
            "impact": 4,
        }
        defaults.update(kwargs)
        return FilterMatch(**defaults)

    return _factory


@pytest.fixture
def make_event(make_filter: Callable[..., FilterMatch]) -> Callable[..., Event]:
    """Factory: build an Event carrying a single filter with the given impact/tags.

    Pass ``filters=[...]`` to supply the matches explicitly instead.
    """

    def _factory(
        name: str = "email",
        value: str = "<script>",
        impact: int = 4,
        tags: list[str] | None = None,
        **kwargs: Any,
    ) -> Event:
        if "filters" not in kwargs:
            kwargs["filters"] = [
                make_filter(impact=impact, tags=tags if tags is not None else ["xss"])
            ]
        return Event(name=name, value=value, **kwargs)

    return _factory


# ---------------------------------------------------------------------------
# Report fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_report(make_event: Callable[..., Event]) -> Report:
    """email (impact 5, xss) + comment (impact 3, sqli/xss)."""
    report = Report()
    report.add_event(make_event(name="email", value="<script>", impact=5, tags=["xss"]))
    report.add_event(
        make_event(name="comment", value="' OR 1=1", impact=3, tags=["sqli", "xss"])
    )
    return report

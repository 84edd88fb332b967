"""Event Pydantic model — one piece of user input flagged by the filter engine.

An event is keyed by ``name`` (typically the request parameter that carried
the value) and owns the ordered list of filters that matched it. Impact and
tags are derived from those filters; the report only reads them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ids_report.model.filter import FilterMatch


class Event(BaseModel):
    """A flagged input value and the filter matches that fired on it."""

    model_config = ConfigDict(frozen=True)

    name: str   # unique key within a report
    value: str  # raw offending input, never rendered unescaped
    filters: list[FilterMatch] = Field(default_factory=list)

    @computed_field
    @property
    def impact(self) -> int:
        return sum(f.impact for f in self.filters)

    @computed_field
    @property
    def tags(self) -> list[str]:
        # dict.fromkeys keeps first-seen order
        return list(dict.fromkeys(tag for f in self.filters for tag in f.tags))

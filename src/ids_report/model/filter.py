"""FilterMatch Pydantic model — one detection rule that fired against a value."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FilterMatch(BaseModel):
    """Diagnostic detail for a single matched filter rule."""

    model_config = ConfigDict(frozen=True)

    id: int
    rule: str = ""  # the pattern that matched
    description: str
    tags: list[str] = Field(default_factory=list)
    impact: int = Field(default=0, ge=0)

"""Text renderer for a Report.

Produces the human-readable dump used for logging and HTML display. The
event name and value are the very payloads the detector flagged, so they
are always HTML-escaped; so is the centrifuge "converted" string, which is
derived from the same input. Filter descriptions and tags come from the
rule set and are emitted as-is.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING, Any

from ids_report.config import RenderConfig
from ids_report.model.event import Event

if TYPE_CHECKING:
    from ids_report.report import Report


def render_report(report: Report, config: RenderConfig | None = None) -> str:
    """Render ``report`` as text; an empty report renders as ""."""
    if report.is_empty():
        return ""
    config = config or RenderConfig()
    br = config.line_break
    sep = config.separator

    parts = [
        f"Total impact: {report.get_impact()}{br}\n",
        f"Affected tags: {sep.join(report.get_tags())}{br}\n",
    ]
    for event in report:
        parts.append(_render_event(event, config))
    parts.append(br)

    centrifuge = report.get_centrifuge()
    if centrifuge:
        parts.append(_render_centrifuge(centrifuge, config))

    return "".join(parts)


def _render_event(event: Event, config: RenderConfig) -> str:
    br = config.line_break
    sep = config.separator
    lines = [
        f"{br}\nVariable: {escape(event.name)} | Value: {escape(event.value)}{br}\n",
        f"Impact: {event.impact} | Tags: {sep.join(event.tags)}{br}\n",
    ]
    for match in event.filters:
        lines.append(
            f"Description: {match.description} | "
            f"Tags: {sep.join(match.tags)} | "
            f"ID: {match.id}{br}\n"
        )
    return "".join(lines)


def _render_centrifuge(centrifuge: dict[str, Any], config: RenderConfig) -> str:
    br = config.line_break
    threshold = centrifuge.get("threshold") or config.placeholder
    ratio = centrifuge.get("ratio") or config.placeholder
    out = (
        "Centrifuge detection data"
        f"{br}  Threshold: {threshold}"
        f"{br}  Ratio: {ratio}"
    )
    if centrifuge.get("converted") is not None:
        out += f"{br}  Converted: {escape(str(centrifuge['converted']))}"
    return out + f"{br}{br}\n"

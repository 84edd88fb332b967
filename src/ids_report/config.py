"""PyYAML loader → typed config dataclasses, plus logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass
class RenderConfig:
    line_break: str = "<br/>"
    separator: str = ", "
    placeholder: str = "---"


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load report.yaml and return a typed AppConfig.

    Falls back to defaults if the file is absent or a section is missing.
    The IDS_REPORT_LOG_LEVEL environment variable overrides the log level.
    Nothing in the package applies the logging section; callers wire it up with
    ``setup_logging(load_config().logging.level)``.
    """
    raw: dict = {}
    if path is None:
        path = Path(__file__).parent.parent.parent / "config" / "report.yaml"

    resolved = Path(path)
    if resolved.exists():
        with resolved.open() as f:
            raw = yaml.safe_load(f) or {}

    render_raw = raw.get("render") or {}
    logging_raw = raw.get("logging") or {}

    return AppConfig(
        render=RenderConfig(
            line_break=render_raw.get("line_break", "<br/>"),
            separator=render_raw.get("separator", ", "),
            placeholder=render_raw.get("placeholder", "---"),
        ),
        logging=LoggingConfig(
            level=os.getenv("IDS_REPORT_LOG_LEVEL", logging_raw.get("level", "INFO")),
        ),
    )


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging; ``level`` is a level name such as "debug"."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

from __future__ import annotations

"""Configuration utilities for the project."""

import json
import os
from pathlib import Path
from typing import Any

__all__ = [
    "CONFIG_PATH",
    "SUMMARY_FORMATS",
    "load_config",
    "summary_format",
    "default_calorie_deficit",
    "log_level",
]

CONFIG_PATH: Path = Path(__file__).resolve().parent.parent.parent / "config.json"

SUMMARY_FORMATS = ("text", "html", "json")


def load_config(path: Path | None = None) -> dict:
    """Load configuration from ``config.json`` or environment variables.

    Lines starting with ``#`` or ``//`` and trailing comments are ignored
    so the file can be annotated.
    """
    cfg_path = path or CONFIG_PATH
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as f:
            data = []
            for line in f:
                l = line.strip()
                if l.startswith("#") or l.startswith("//"):
                    continue
                if "#" in line:
                    line = line.split("#", 1)[0]
                if "//" in line:
                    line = line.split("//", 1)[0]
                data.append(line)
            return json.loads("".join(data))
    return {
        "summary_format": os.getenv("BODY_METRICS_FORMAT", "text"),
        "calorie_deficit": os.getenv("BODY_METRICS_CALORIE_DEFICIT", "500"),
        "log_level": os.getenv("BODY_METRICS_LOG_LEVEL", "INFO"),
    }


def summary_format(cfg: dict | None = None) -> str:
    """Return the default output format of the summary.

    An empty value in ``config.json`` falls back to the
    ``BODY_METRICS_FORMAT`` environment variable and then to ``text``.
    Unsupported formats raise ``ValueError``.
    """
    cfg = load_config() if cfg is None else cfg
    fmt = cfg.get("summary_format") or os.getenv("BODY_METRICS_FORMAT", "text")
    fmt = str(fmt).lower()
    if fmt not in SUMMARY_FORMATS:
        raise ValueError(f"Unsupported summary format: {fmt}")
    return fmt


def default_calorie_deficit(cfg: dict | None = None) -> Any:
    """Return the calorie deficit (kcal/day) used when none is given.

    The value is returned as configured, so a zero or non-numeric setting
    reaches the profile collector and is rejected there.
    """
    cfg = load_config() if cfg is None else cfg
    value = cfg.get("calorie_deficit")
    if value is None:
        value = os.getenv("BODY_METRICS_CALORIE_DEFICIT", "500")
    return value


def log_level(cfg: dict | None = None) -> str:
    cfg = load_config() if cfg is None else cfg
    return str(cfg.get("log_level") or os.getenv("BODY_METRICS_LOG_LEVEL", "INFO")).upper()

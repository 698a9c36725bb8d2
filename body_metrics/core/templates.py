from __future__ import annotations

"""Load summary sentence templates from ``templates.yaml``."""

from importlib import resources
from typing import Callable, Dict

import yaml
from jinja2 import Environment, StrictUndefined, Template
from markupsafe import Markup

__all__ = ["DESCRIPTIONS", "TEMPLATES", "FORMATS", "get_template"]


def _load_templates() -> dict:
    """Return dictionary of sentence definitions from YAML."""
    with resources.files(__package__).joinpath("templates.yaml").open(
        "r", encoding="utf-8"
    ) as fh:
        return yaml.safe_load(fh)


def _fixed(value: float) -> str:
    return f"{value:.1f}"


def _kg(value: float) -> str:
    return f"{value:.1f} kg"


def _strong(value: object) -> Markup:
    return Markup("<strong>{}</strong>").format(value)


def _environment(em: Callable[[object], object], *, autoescape: bool) -> Environment:
    env = Environment(autoescape=autoescape, undefined=StrictUndefined)
    env.filters["em"] = em
    env.filters["fixed"] = _fixed
    env.filters["kg"] = _kg
    return env


_ENVIRONMENTS: Dict[str, Environment] = {
    "html": _environment(_strong, autoescape=True),
    "text": _environment(lambda value: value, autoescape=False),
}

FORMATS = tuple(_ENVIRONMENTS)

_data = _load_templates()

# Dictionaries with descriptions and compiled templates per output format
DESCRIPTIONS: Dict[str, str] = {}
TEMPLATES: Dict[str, Dict[str, Template]] = {fmt: {} for fmt in FORMATS}

for _name, _info in _data.items():
    DESCRIPTIONS[_name] = _info.get("description", "")
    for _fmt, _env in _ENVIRONMENTS.items():
        TEMPLATES[_fmt][_name] = _env.from_string(_info["template"])


def get_template(name: str, fmt: str = "text") -> Template:
    """Return the compiled template ``name`` for output format ``fmt``."""
    try:
        return TEMPLATES[fmt][name]
    except KeyError:
        raise ValueError(f"Unknown template {name!r} for format {fmt!r}") from None


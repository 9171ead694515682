"""
Plain-text preview of a snapshot document, rendered with Jinja2.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

TITLES = {
    "day": "Element of the Day",
    "hour": "Element of the Hour",
}

# Label, snapshot key
ROWS: tuple[tuple[str, str], ...] = (
    ("Atomic mass", "atomic_mass"),
    ("Category", "category"),
    ("Standard state", "standard_state"),
    ("Electron configuration", "electron_configuration"),
    ("Electronegativity", "electronegativity"),
    ("Melting point", "melting_point"),
    ("Boiling point", "boiling_point"),
    ("Density", "density"),
    ("Oxidation states", "oxidation_states"),
    ("Discovered", "year_discovered"),
)

_environment: Environment | None = None


def get_environment() -> Environment:
    """Return the shared template environment, creating it on first use."""
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=PackageLoader("element_feed", "templates"),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
    return _environment


def render_snapshot(document: dict[str, Any], kind: str = "day") -> str:
    """Render a snapshot document as a text card.

    Args:
        document: Snapshot document, ``{"element": {...}}``
        kind: "day" or "hour", selects the title

    Returns:
        The rendered text

    Raises:
        KeyError: If ``kind`` is unknown
    """
    template = get_environment().get_template("snapshot.txt.jinja2")
    return template.render(title=TITLES[kind], element=document["element"], rows=ROWS)

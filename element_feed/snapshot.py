"""
Snapshot builder for the element of the day and the element of the hour.

A snapshot is the small document polled by the display client:
``{"element": {...}}`` with 13 display fields and an ``updated_at``
timestamp. Unlike the normalized dataset, absent values are rendered as a
sentinel string instead of null, and temperatures carry their unit.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from .columns import SNAPSHOT_FIELDS, ColumnIndex, FieldFormat
from .config import FeedConfig
from .normalizer import build_column_index, extract_table
from .records import Dataset, ElementRecord, Snapshot, SnapshotElement
from .selector import select_day_index, select_hour_index
from .utils import coerce_datetime, format_timestamp


def format_temperature(value: Any, unit: str = "K", missing_value: str = "N/A") -> str:
    """Suffix a temperature with its unit, e.g. "13.81" -> "13.81 K"."""
    return f"{value} {unit}" if value else missing_value


def or_missing(value: Any, missing_value: str = "N/A") -> Any:
    """Return the value, or the sentinel when it is empty or None."""
    return value if value else missing_value


def _build_element(lookup: Callable[[str, str], Any], timestamp: datetime, config: FeedConfig) -> SnapshotElement:
    values = {}
    for spec in SNAPSHOT_FIELDS:
        value = lookup(spec.name, spec.column)
        if spec.display is FieldFormat.TEMPERATURE:
            value = format_temperature(value, config.temperature_unit, config.missing_value)
        elif spec.display is FieldFormat.OR_MISSING:
            value = or_missing(value, config.missing_value)
        values[spec.name] = value
    return SnapshotElement(**values, updated_at=format_timestamp(timestamp))


def build_element_data(
    cells: Sequence[Any],
    column_index: ColumnIndex,
    timestamp: datetime,
    config: FeedConfig | None = None,
) -> dict[str, Any]:
    """Build the snapshot element straight from a raw PubChem row.

    Args:
        cells: Raw cell values of one element
        column_index: Column-name to position mapping
        timestamp: Moment recorded as ``updated_at``
        config: Formatting options (unit, sentinel)

    Returns:
        The element part of the snapshot document
    """
    config = config or FeedConfig()
    element = _build_element(lambda name, column: column_index.cell(cells, column), timestamp, config)
    return Snapshot(element=element).to_dict()["element"]


def build_snapshot(record: ElementRecord, timestamp: datetime, config: FeedConfig | None = None) -> Snapshot:
    """Build a snapshot from a normalized element record."""
    config = config or FeedConfig()
    element = _build_element(lambda name, column: getattr(record, name), timestamp, config)
    return Snapshot(element=element)


def _generate_from_raw(raw: Any, moment: datetime, select: Callable[[datetime, int], int], config: FeedConfig | None) -> dict[str, Any]:
    columns, rows = extract_table(raw)
    column_index = build_column_index(columns)
    cells = rows[select(moment, len(rows))]
    return {"element": build_element_data(cells, column_index, moment, config)}


def generate_element_of_the_day(moment: datetime | str, raw: Any, config: FeedConfig | None = None) -> dict[str, Any]:
    """Snapshot document of the element of the day, read from the raw source.

    Args:
        moment: The day to publish for; its local calendar date is used
        raw: Parsed PubChem document
        config: Formatting options

    Returns:
        ``{"element": {...}}``

    Raises:
        MalformedSourceError: If the raw document lacks the table structure
        InvalidModulusError: If the table has no rows
    """
    return _generate_from_raw(raw, coerce_datetime(moment), select_day_index, config)


def generate_element_of_the_hour(moment: datetime | str, raw: Any, config: FeedConfig | None = None) -> dict[str, Any]:
    """Snapshot document of the element of the hour, read from the raw source.

    The hour is taken in UTC regardless of the moment's zone.
    """
    return _generate_from_raw(raw, coerce_datetime(moment), select_hour_index, config)


def snapshot_for_day(dataset: Dataset, moment: datetime | str, config: FeedConfig | None = None) -> Snapshot:
    """Element of the day taken from a normalized dataset."""
    moment = coerce_datetime(moment)
    record = dataset.elements[select_day_index(moment, len(dataset.elements))]
    return build_snapshot(record, moment, config)


def snapshot_for_hour(dataset: Dataset, moment: datetime | str, config: FeedConfig | None = None) -> Snapshot:
    """Element of the hour taken from a normalized dataset."""
    moment = coerce_datetime(moment)
    record = dataset.elements[select_hour_index(moment, len(dataset.elements))]
    return build_snapshot(record, moment, config)

"""
Conversion of the PubChem periodic table into the flat element dataset.

The source nests its data as ``Table.Columns.Column`` (column names) and
``Table.Row[i].Cell`` (one cell list per element, parallel to the column
names). The converter flattens each row into an ElementRecord, keeping the
source row order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from .columns import ELEMENT_FIELDS, ColumnIndex
from .errors import MalformedSourceError
from .records import Dataset, DatasetMetadata, ElementRecord
from .utils import format_timestamp

logger = logging.getLogger(__name__)

DEFAULT_DATA_SOURCE = "PubChem"
DEFAULT_DESCRIPTION = "Complete periodic table data with all 118 elements"


def load_source(path: str | Path) -> dict[str, Any]:
    """Read the raw PubChem JSON file.

    Raises:
        MalformedSourceError: If the file does not contain valid JSON
        OSError: If the file cannot be read
    """
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedSourceError(f"{path} is not valid JSON: {e}") from e


def extract_table(raw: Any) -> tuple[list[str], list[Sequence[Any]]]:
    """Split the raw document into its column names and per-row cell lists.

    Args:
        raw: Parsed PubChem document

    Returns:
        A tuple of (column names, cell lists), rows in source order

    Raises:
        MalformedSourceError: If the table, column or row structure is missing
    """
    try:
        table = raw["Table"]
        columns = table["Columns"]["Column"]
        rows = table["Row"]
    except (KeyError, TypeError) as e:
        raise MalformedSourceError(f"Source has no Table.Columns.Column / Table.Row structure: {e!r}") from e

    if not isinstance(columns, list) or not isinstance(rows, list):
        raise MalformedSourceError("Table.Columns.Column and Table.Row must both be lists")

    cells = []
    for position, row in enumerate(rows):
        try:
            row_cells = row["Cell"]
        except (KeyError, TypeError) as e:
            raise MalformedSourceError(f"Row {position} has no Cell list") from e
        if not isinstance(row_cells, list):
            raise MalformedSourceError(f"Row {position} Cell must be a list")
        cells.append(row_cells)

    return columns, cells


def build_column_index(columns: Sequence[str]) -> ColumnIndex:
    """Build the column-name to position mapping, warning about gaps.

    Missing columns are not an error: the affected fields come out as None.
    """
    column_index = ColumnIndex.from_columns(columns)
    missing = column_index.missing(spec.column for spec in ELEMENT_FIELDS)
    if missing:
        logger.warning("Source table is missing expected columns: %s", ", ".join(missing))
    return column_index


def map_element_data(cells: Sequence[Any], column_index: ColumnIndex) -> ElementRecord:
    """Map one row of cells to an ElementRecord.

    Optional fields turn an empty or falsy cell into None. Required fields
    are copied verbatim, empty strings included.

    Args:
        cells: Raw cell values of one element
        column_index: Column-name to position mapping

    Returns:
        The normalized element
    """
    values = {}
    for spec in ELEMENT_FIELDS:
        value = column_index.cell(cells, spec.column)
        if spec.optional:
            value = value or None
        values[spec.name] = value
    return ElementRecord(**values)


def convert_elements_data(
    raw: Any,
    generated_at: datetime,
    data_source: str = DEFAULT_DATA_SOURCE,
    description: str = DEFAULT_DESCRIPTION,
) -> Dataset:
    """Convert the raw PubChem document into the simplified dataset.

    Args:
        raw: Parsed PubChem document
        generated_at: Timestamp recorded in the metadata
        data_source: Label recorded in the metadata
        description: Free-text description recorded in the metadata

    Returns:
        The dataset, one record per source row in source order

    Raises:
        MalformedSourceError: If the raw document lacks the table structure
    """
    columns, rows = extract_table(raw)
    column_index = build_column_index(columns)

    elements = [map_element_data(cells, column_index) for cells in rows]
    logger.debug("Mapped %d rows over %d columns", len(elements), len(columns))

    metadata = DatasetMetadata(
        total_elements=len(elements),
        data_source=data_source,
        generated_at=format_timestamp(generated_at),
        description=description,
    )
    return Dataset(metadata=metadata, elements=elements)


def load_dataset(path: str | Path) -> Dataset:
    """Read a normalized dataset previously written by the converter."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedSourceError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
        raise MalformedSourceError(f"{path} has no elements list")
    if not isinstance(data.get("metadata", {}), dict):
        raise MalformedSourceError(f"{path} metadata must be an object")
    for position, element in enumerate(data["elements"], start=1):
        if not isinstance(element, dict):
            raise MalformedSourceError(f"{path} element {position} must be an object, got {type(element).__name__}")
        # Field values are compared and hashed by the validator, so they must be scalars
        for key, value in element.items():
            if isinstance(value, (dict, list)):
                raise MalformedSourceError(f"{path} element {position} field '{key}' must be a scalar")
    return Dataset.from_dict(data)

"""
Source column names and the column-name to position mapping.

The PubChem table stores each element as a flat list of cells whose meaning
is given by a parallel list of column names. Every lookup goes through a
ColumnIndex built once from that list, so a reordered source still maps
correctly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldFormat(str, Enum):
    """How a snapshot field is rendered for display."""

    VERBATIM = "verbatim"  # Copied as-is
    OR_MISSING = "or_missing"  # Missing value replaced by the sentinel
    TEMPERATURE = "temperature"  # Unit suffixed, or the sentinel


@dataclass(frozen=True)
class FieldSpec:
    """Maps one output field to its source column.

    Attributes:
        name: Field name in the output document
        column: Column name in the PubChem table
        optional: Whether a missing value is normalized to null
        display: How the field is rendered in a snapshot
    """

    name: str
    column: str
    optional: bool = False
    display: FieldFormat = FieldFormat.VERBATIM


# Order matches the serialized element record
ELEMENT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("atomic_number", "AtomicNumber"),
    FieldSpec("symbol", "Symbol"),
    FieldSpec("name", "Name"),
    FieldSpec("atomic_mass", "AtomicMass"),
    FieldSpec("cpk_hex_color", "CPKHexColor", optional=True),
    FieldSpec("electron_configuration", "ElectronConfiguration"),
    FieldSpec("electronegativity", "Electronegativity", optional=True),
    FieldSpec("atomic_radius", "AtomicRadius", optional=True),
    FieldSpec("ionization_energy", "IonizationEnergy", optional=True),
    FieldSpec("electron_affinity", "ElectronAffinity", optional=True),
    FieldSpec("oxidation_states", "OxidationStates", optional=True),
    FieldSpec("standard_state", "StandardState"),
    FieldSpec("melting_point", "MeltingPoint", optional=True),
    FieldSpec("boiling_point", "BoilingPoint", optional=True),
    FieldSpec("density", "Density", optional=True),
    FieldSpec("category", "GroupBlock"),
    FieldSpec("year_discovered", "YearDiscovered"),
)

# Order matches the published snapshot, updated_at is appended by the builder
SNAPSHOT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("atomic_number", "AtomicNumber"),
    FieldSpec("symbol", "Symbol"),
    FieldSpec("name", "Name"),
    FieldSpec("atomic_mass", "AtomicMass"),
    FieldSpec("category", "GroupBlock"),
    FieldSpec("standard_state", "StandardState"),
    FieldSpec("electron_configuration", "ElectronConfiguration"),
    FieldSpec("electronegativity", "Electronegativity", display=FieldFormat.OR_MISSING),
    FieldSpec("melting_point", "MeltingPoint", display=FieldFormat.TEMPERATURE),
    FieldSpec("boiling_point", "BoilingPoint", display=FieldFormat.TEMPERATURE),
    FieldSpec("density", "Density", display=FieldFormat.OR_MISSING),
    FieldSpec("oxidation_states", "OxidationStates", display=FieldFormat.OR_MISSING),
    FieldSpec("year_discovered", "YearDiscovered"),
)

OPTIONAL_FIELDS: tuple[str, ...] = tuple(spec.name for spec in ELEMENT_FIELDS if spec.optional)
REQUIRED_FIELDS: tuple[str, ...] = tuple(spec.name for spec in ELEMENT_FIELDS if not spec.optional)


class ColumnIndex(Mapping[str, int]):
    """Read-only mapping from column name to cell position."""

    def __init__(self, positions: Mapping[str, int]):
        self._positions = dict(positions)

    @classmethod
    def from_columns(cls, columns: Iterable[str]) -> ColumnIndex:
        """Build the index from the table's column-name list.

        A column name appearing twice keeps its last position.
        """
        return cls({name: position for position, name in enumerate(columns)})

    def __getitem__(self, column: str) -> int:
        return self._positions[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        return f"ColumnIndex({self._positions!r})"

    def missing(self, columns: Iterable[str]) -> list[str]:
        """Return the names in ``columns`` that the source does not declare."""
        return [column for column in columns if column not in self._positions]

    def cell(self, cells: Sequence[Any], column: str) -> Any:
        """Return the cell for ``column``, or None if it cannot be found.

        A short row is treated the same as an undeclared column. Undeclared
        columns are reported once, by build_column_index.
        """
        position = self._positions.get(column)
        if position is None or position >= len(cells):
            return None
        return cells[position]

"""
Data containers for the normalized dataset and the published snapshot.

All element values keep the exact text of the source (trailing zeros,
ranges, "Ancient"), so every field is typed as an optional string.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any


@dataclass
class ElementRecord:
    """One normalized chemical element.

    Optional properties are None when the source has no value; required
    ones carry whatever the source contained.
    """

    atomic_number: str | None
    symbol: str | None
    name: str | None
    atomic_mass: str | None
    cpk_hex_color: str | None
    electron_configuration: str | None
    electronegativity: str | None
    atomic_radius: str | None
    ionization_energy: str | None
    electron_affinity: str | None
    oxidation_states: str | None
    standard_state: str | None
    melting_point: str | None
    boiling_point: str | None
    density: str | None
    category: str | None
    year_discovered: str | None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> ElementRecord:
        """Create a record from its serialized form.

        Keys absent from ``d`` become None; unknown keys are ignored.
        """
        return ElementRecord(**{f.name: d.get(f.name) for f in fields(ElementRecord)})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class DatasetMetadata:
    """Descriptive header of the normalized dataset."""

    total_elements: int
    data_source: str
    generated_at: str
    description: str

    @staticmethod
    def from_dict(d: dict[str, Any]) -> DatasetMetadata:
        return DatasetMetadata(
            total_elements=d.get("total_elements", 0),
            data_source=d.get("data_source", ""),
            generated_at=d.get("generated_at", ""),
            description=d.get("description", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Dataset:
    """The ordered element list plus its metadata.

    Element order is significant: it decides which element is published on
    which day and hour.
    """

    metadata: DatasetMetadata
    elements: list[ElementRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> Dataset:
        return Dataset(
            metadata=DatasetMetadata.from_dict(d.get("metadata", {})),
            elements=[ElementRecord.from_dict(e) for e in d.get("elements", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "elements": [e.to_dict() for e in self.elements],
        }


@dataclass
class SnapshotElement:
    """Display-oriented view of one element, as polled by the display client."""

    atomic_number: Any
    symbol: Any
    name: Any
    atomic_mass: Any
    category: Any
    standard_state: Any
    electron_configuration: Any
    electronegativity: str
    melting_point: str
    boiling_point: str
    density: str
    oxidation_states: str
    year_discovered: Any
    updated_at: str


@dataclass
class Snapshot:
    """Published element-of-the-day or element-of-the-hour document."""

    element: SnapshotElement

    def to_dict(self) -> dict[str, Any]:
        return {"element": asdict(self.element)}

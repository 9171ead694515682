"""
Configuration for the element feed.

Defaults reproduce the published layout: the PubChem source under ``data/``,
the normalized dataset at ``data-all.json`` and the snapshots under ``api/``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FeedConfig:
    """Configuration options for conversion and snapshot generation."""

    # Raw PubChem table
    source_path: str = "data/PubChemElements_all.json"

    # Normalized dataset written by the converter
    dataset_path: str = "data-all.json"

    # Root directory for the published snapshots
    output_dir: str = "."

    # Metadata written into the normalized dataset
    data_source: str = "PubChem"
    description: str = "Complete periodic table data with all 118 elements"

    # Unit appended to melting and boiling points in snapshots
    temperature_unit: str = "K"

    # Display value for absent snapshot properties
    missing_value: str = "N/A"

    # Also write the day snapshot to data.json for local testing
    mirror_day_to_data_json: bool = True

    # Indentation of the written JSON documents
    indent: int = 2

    @staticmethod
    def from_dict(d: dict) -> FeedConfig:
        """Create a config from a dictionary."""
        config = FeedConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "source_path": self.source_path,
            "dataset_path": self.dataset_path,
            "output_dir": self.output_dir,
            "data_source": self.data_source,
            "description": self.description,
            "temperature_unit": self.temperature_unit,
            "missing_value": self.missing_value,
            "mirror_day_to_data_json": self.mirror_day_to_data_json,
            "indent": self.indent,
        }

"""Element Feed

Publishes a rotating "element of the day" and "element of the hour" from
the PubChem periodic table. Converts the nested source table into a flat
element dataset and selects one element per calendar day and per UTC hour.
"""

__version__ = "1.0.0"

from .config import FeedConfig
from .errors import (
    DatasetValidationError,
    ElementFeedError,
    InvalidModulusError,
    MalformedSourceError,
    OutputWriteError,
)
from .normalizer import convert_elements_data, map_element_data
from .records import Dataset, ElementRecord, Snapshot
from .selector import day_index, day_of_year, hour_identifier, hour_index
from .snapshot import build_element_data, build_snapshot, generate_element_of_the_day, generate_element_of_the_hour
from .validator import DatasetValidator
from .writer import AtomicJsonWriter

__all__ = [
    "FeedConfig",
    "ElementFeedError",
    "MalformedSourceError",
    "InvalidModulusError",
    "DatasetValidationError",
    "OutputWriteError",
    "convert_elements_data",
    "map_element_data",
    "Dataset",
    "ElementRecord",
    "Snapshot",
    "day_of_year",
    "day_index",
    "hour_identifier",
    "hour_index",
    "build_element_data",
    "build_snapshot",
    "generate_element_of_the_day",
    "generate_element_of_the_hour",
    "DatasetValidator",
    "AtomicJsonWriter",
]

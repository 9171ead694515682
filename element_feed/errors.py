"""
Exceptions raised by the element feed.
"""

from __future__ import annotations


class ElementFeedError(Exception):
    """Base class for all element feed errors."""

    pass


class MalformedSourceError(ElementFeedError):
    """Raised when the raw periodic table source cannot be read.

    This can happen when:
    - The file is not valid JSON
    - The ``Table`` / ``Columns`` / ``Row`` structure is missing
    - A row has no ``Cell`` list
    """

    pass


class InvalidModulusError(ElementFeedError, ValueError):
    """Raised when an index is requested over an empty or negative cycle."""

    pass


class DatasetValidationError(ElementFeedError):
    """Raised when a dataset breaks one or more of its invariants.

    Attributes:
        violations: The violations reported by the validator
    """

    def __init__(self, violations: list):
        self.violations = list(violations)
        count = len(self.violations)
        super().__init__(f"Dataset failed validation with {count} violation{'s' if count != 1 else ''}")


class OutputWriteError(ElementFeedError):
    """Raised when an output document could not be written or read back."""

    pass

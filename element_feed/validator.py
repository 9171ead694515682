"""
Dataset validator.

Assembles the rule objects for the element invariants and runs them over a
normalized dataset. The converter does not call this: invalid data is
passed through as-is and checked afterwards by the ``validate`` command or
by tests.
"""

from typing import List, Optional

from .columns import OPTIONAL_FIELDS, REQUIRED_FIELDS
from .errors import DatasetValidationError
from .records import Dataset
from .validation_rules import (
    ElementCountRule,
    EnumRule,
    OptionalFieldRule,
    PatternRule,
    RequiredFieldRule,
    SequentialAtomicNumberRule,
    UniqueFieldRule,
    ValidationRule,
    Violation,
)

CATEGORIES = (
    "Alkali metal",
    "Alkaline earth metal",
    "Transition metal",
    "Post-transition metal",
    "Metalloid",
    "Nonmetal",
    "Halogen",
    "Noble gas",
    "Lanthanide",
    "Actinide",
)

STANDARD_STATES = (
    "Solid",
    "Liquid",
    "Gas",
    "Expected to be a Gas",
    "Expected to be a Solid",
)

YEAR_LITERALS = ("Ancient", "Unknown")


class DatasetValidator:
    """Check a dataset against the element invariants using rule objects"""

    def __init__(self, rules: Optional[List[ValidationRule]] = None):
        """
        Initialize the validator.

        Args:
            rules: Rules to run; defaults to the full element rule set
        """
        self.rules = rules if rules is not None else self.default_rules()

    @staticmethod
    def default_rules() -> List[ValidationRule]:
        """Create the rule set describing a well-formed element dataset"""
        rules: List[ValidationRule] = [ElementCountRule()]

        # Presence and null policy
        rules.extend(RequiredFieldRule(name) for name in REQUIRED_FIELDS)
        rules.extend(OptionalFieldRule(name) for name in OPTIONAL_FIELDS)

        # Identity
        rules.append(SequentialAtomicNumberRule())
        rules.append(UniqueFieldRule("symbol"))
        rules.append(UniqueFieldRule("name"))
        rules.append(PatternRule("symbol", r"[A-Z][a-z]{0,2}"))

        # Enumerated domains
        rules.append(EnumRule("category", CATEGORIES))
        rules.append(EnumRule("standard_state", STANDARD_STATES))
        rules.append(PatternRule("year_discovered", r"\d{4}", YEAR_LITERALS))
        rules.append(PatternRule("atomic_mass", r"\d+(\.\d+)?"))

        return rules

    def validate(self, dataset: Dataset) -> List[Violation]:
        """
        Run every rule over the dataset.

        Returns:
            All violations, grouped by rule in rule order
        """
        violations: List[Violation] = []
        for rule in self.rules:
            violations.extend(rule.check(dataset))
        return violations

    def ensure_valid(self, dataset: Dataset) -> None:
        """
        Raise if the dataset breaks any invariant.

        Raises:
            DatasetValidationError: Carrying every violation found
        """
        violations = self.validate(dataset)
        if violations:
            raise DatasetValidationError(violations)

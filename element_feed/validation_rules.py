"""
Validation rule objects for the normalized dataset.

Each rule checks one invariant of the element list and reports every
breach it finds as a Violation. Rules never modify the dataset and never
raise on bad data; deciding what to do with violations is up to the caller.
"""

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .records import Dataset, ElementRecord


@dataclass(frozen=True)
class Violation:
    """A single broken invariant.

    Attributes:
        rule: Name of the rule that reported it
        message: Human readable description
        field_name: Field concerned, if any
        index: 0-based position of the element concerned, if any
    """

    rule: str
    message: str
    field_name: Optional[str] = None
    index: Optional[int] = None


class ValidationRule(ABC):
    """Base class for all dataset rules"""

    # Class-level cache for loaded message templates
    _messages: Dict[str, Dict[str, str]] = {}

    def __init__(self, field_name: Optional[str] = None):
        """
        Initialize a validation rule.

        Args:
            field_name: Element field checked by the rule, if it checks a single field
        """
        self.field_name = field_name

    @classmethod
    def _load_messages(cls) -> Dict[str, Dict[str, str]]:
        """
        Load message templates from the JSON file shipped with the package.
        Results are cached to avoid repeated file I/O.
        """
        if not cls._messages:
            template_file = Path(__file__).parent / "validation_messages.json"
            with open(template_file, "r", encoding="utf-8") as f:
                cls._messages.update(json.load(f))
        return cls._messages

    def get_message(self, key: str = "error_message", **format_params) -> str:
        """
        Get a message template for this rule and format it.

        Args:
            key: The template key to retrieve
            **format_params: Parameters to format into the template

        Returns:
            Formatted message
        """
        templates = self._load_messages()
        class_name = self.__class__.__name__

        if class_name not in templates:
            raise KeyError(f"No message templates found for {class_name}")

        rule_templates = templates[class_name]

        if key not in rule_templates:
            raise KeyError(f"Key '{key}' not found in templates for {class_name}")

        return rule_templates[key].format(field_name=self.field_name, **format_params)

    def violation(self, index: Optional[int] = None, **format_params) -> Violation:
        """Build a Violation for the element at ``index``."""
        return Violation(
            rule=self.__class__.__name__,
            message=self.get_message(index=index, **format_params),
            field_name=self.field_name,
            index=index,
        )

    def element_violation(self, index: int, element: ElementRecord, **format_params) -> Violation:
        """Build a Violation naming the element by position and name."""
        return self.violation(index, position=index + 1, name=element.name, **format_params)

    @abstractmethod
    def check(self, dataset: Dataset) -> List[Violation]:
        """
        Check the dataset against this rule.

        Returns:
            Every violation found, in element order
        """
        pass


class RequiredFieldRule(ValidationRule):
    """Validates that a required field is present on every element"""

    def check(self, dataset: Dataset) -> List[Violation]:
        return [
            self.element_violation(i, e)
            for i, e in enumerate(dataset.elements)
            if getattr(e, self.field_name, None) is None
        ]


class OptionalFieldRule(ValidationRule):
    """Validates that an optional field is either null or a non-empty string"""

    def check(self, dataset: Dataset) -> List[Violation]:
        violations = []
        for i, e in enumerate(dataset.elements):
            value = getattr(e, self.field_name, None)
            if value is None:
                continue
            if not isinstance(value, str) or value == "":
                violations.append(self.element_violation(i, e, value=value))
        return violations


class SequentialAtomicNumberRule(ValidationRule):
    """Validates that atomic numbers run 1..N in element order"""

    def __init__(self):
        super().__init__("atomic_number")

    def check(self, dataset: Dataset) -> List[Violation]:
        violations = []
        for i, e in enumerate(dataset.elements):
            try:
                number = int(e.atomic_number)
            except (TypeError, ValueError):
                number = None
            if number != i + 1:
                violations.append(self.violation(i, expected=i + 1, value=e.atomic_number))
        return violations


class UniqueFieldRule(ValidationRule):
    """Validates that no two elements share a value for a field"""

    def check(self, dataset: Dataset) -> List[Violation]:
        violations = []
        first_seen: Dict[Any, int] = {}
        for i, e in enumerate(dataset.elements):
            value = getattr(e, self.field_name, None)
            if value in first_seen:
                violations.append(self.element_violation(i, e, value=value, first_position=first_seen[value] + 1))
            else:
                first_seen[value] = i
        return violations


class EnumRule(ValidationRule):
    """Validates that a field only takes one of a fixed set of values"""

    def __init__(self, field_name: str, allowed: Iterable[str]):
        super().__init__(field_name)
        self.allowed = tuple(allowed)

    def check(self, dataset: Dataset) -> List[Violation]:
        return [
            self.element_violation(i, e, value=getattr(e, self.field_name, None))
            for i, e in enumerate(dataset.elements)
            if getattr(e, self.field_name, None) not in self.allowed
        ]


class PatternRule(ValidationRule):
    """Validates a field against a regex, with optional literal exceptions"""

    def __init__(self, field_name: str, pattern: str, literals: Iterable[str] = ()):
        super().__init__(field_name)
        self.pattern = pattern
        self.literals = tuple(literals)
        self._regex = re.compile(pattern)

    def matches(self, value: Any) -> bool:
        if value in self.literals:
            return True
        return isinstance(value, str) and self._regex.fullmatch(value) is not None

    def check(self, dataset: Dataset) -> List[Violation]:
        return [
            self.element_violation(i, e, pattern=self.pattern, value=getattr(e, self.field_name, None))
            for i, e in enumerate(dataset.elements)
            if not self.matches(getattr(e, self.field_name, None))
        ]


class ElementCountRule(ValidationRule):
    """Validates that the metadata count matches the element list"""

    def check(self, dataset: Dataset) -> List[Violation]:
        declared = dataset.metadata.total_elements
        actual = len(dataset.elements)
        if declared != actual:
            return [self.violation(declared=declared, actual=actual)]
        return []

"""Criterion registry: the ordered catalog of criteria an auditor evaluates."""

from __future__ import annotations

from typing import Iterable, Iterator

from wcag_audit.models.criterion import ConformanceLevel, Criterion
from wcag_audit.utils.errors import DuplicateCriterionError, RegistrySealedError


class CriterionRegistry:
    """Registry of criteria keyed by identifier.

    Registration order is preserved and becomes the evaluation order, and
    therefore the order findings appear in reports. Once sealed, the
    registry rejects further registrations.

    Example:
        registry = CriterionRegistry()
        registry.register(Criterion(id="1.1.1", ...))
        registry.seal()

        for criterion in registry.all():
            findings = criterion.evaluate(content)
    """

    def __init__(self, criteria: Iterable[Criterion] | None = None) -> None:
        """Initialize the registry, optionally registering criteria.

        Args:
            criteria: Criteria to register, in order

        Raises:
            DuplicateCriterionError: If two criteria share an identifier
        """
        self._criteria: dict[str, Criterion] = {}
        self._sealed = False
        for criterion in criteria or ():
            self.register(criterion)

    def register(self, criterion: Criterion) -> None:
        """Register a criterion.

        Args:
            criterion: The criterion to register

        Raises:
            DuplicateCriterionError: If the identifier is already registered
            RegistrySealedError: If the registry has been sealed
        """
        if self._sealed:
            raise RegistrySealedError(criterion.id)
        if criterion.id in self._criteria:
            raise DuplicateCriterionError(criterion.id)
        self._criteria[criterion.id] = criterion

    def seal(self) -> "CriterionRegistry":
        """Forbid further registration. Returns self for chaining."""
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        """Whether registration has completed."""
        return self._sealed

    def all(self) -> tuple[Criterion, ...]:
        """Get every criterion in registration order."""
        return tuple(self._criteria.values())

    def get(self, criterion_id: str) -> Criterion | None:
        """Get a criterion by identifier, or None."""
        return self._criteria.get(criterion_id)

    def __getitem__(self, criterion_id: str) -> Criterion:
        if criterion_id not in self._criteria:
            raise KeyError(f"No criterion '{criterion_id}' is registered")
        return self._criteria[criterion_id]

    def __contains__(self, criterion_id: object) -> bool:
        return criterion_id in self._criteria

    def __iter__(self) -> Iterator[Criterion]:
        return iter(self._criteria.values())

    def __len__(self) -> int:
        return len(self._criteria)

    @property
    def ids(self) -> list[str]:
        """Identifiers of all registered criteria."""
        return list(self._criteria.keys())

    def at_level(self, level: ConformanceLevel) -> list[Criterion]:
        """Get the criteria registered at a conformance level."""
        return [c for c in self._criteria.values() if c.level == level]

    def count_at(self, level: ConformanceLevel) -> int:
        """Count the criteria registered at a conformance level."""
        return len(self.at_level(level))


def get_default_registry() -> CriterionRegistry:
    """Build a sealed registry holding the built-in WCAG 2.1 criteria.

    A fresh registry is returned on every call so runs never share state.

    Returns:
        Sealed CriterionRegistry
    """
    from wcag_audit.knowledge.wcag21 import get_wcag21_criteria

    return CriterionRegistry(get_wcag21_criteria()).seal()

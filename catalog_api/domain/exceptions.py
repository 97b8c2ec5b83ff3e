"""Domain-specific exceptions: framework-independent."""

from collections.abc import Sequence

from catalog_api.domain.entities.violation import Violation


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class EntityValidationError(Exception):
    """Raised when an entity breaks one or more of its field constraints."""

    def __init__(self, entity_type: str, violations: Sequence[Violation]):
        self.entity_type = entity_type
        self.violations = list(violations)
        super().__init__("; ".join(str(v) for v in self.violations))

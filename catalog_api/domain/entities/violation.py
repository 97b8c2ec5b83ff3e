"""A single field-level validation failure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """Constraint failure attached to one field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

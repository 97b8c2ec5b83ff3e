"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass

from catalog_api.domain.entities.violation import Violation


@dataclass
class Article:
    """Core domain entity representing a published article."""

    title: str
    content: str
    id: int | None = None

    def replace(self, title: str, content: str) -> None:
        """Overwrite both mutable fields."""
        self.title = title
        self.content = content

    def validate(self) -> list[Violation]:
        # content only has to be present, which the request schema enforces
        violations: list[Violation] = []
        if not self.title or not self.title.strip():
            violations.append(Violation("title", "This value should not be blank."))
        return violations

"""Shared validation step applied to every entity before it is persisted."""

import logging

from catalog_api.domain.entities import Article, Product
from catalog_api.domain.exceptions import EntityValidationError

logger = logging.getLogger(__name__)


def ensure_valid(entity: Article | Product) -> None:
    """Raise ``EntityValidationError`` when the entity reports any violation."""
    violations = entity.validate()
    if violations:
        entity_type = type(entity).__name__
        logger.info(
            "Rejected %s: %s",
            entity_type,
            "; ".join(str(v) for v in violations),
        )
        raise EntityValidationError(entity_type, violations)

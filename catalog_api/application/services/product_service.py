"""Application service (use case) for Product operations."""

import logging

from catalog_api.application.interfaces import ProductRepository
from catalog_api.application.schemas import ProductCreate, ProductUpdate
from catalog_api.application.validation import ensure_valid
from catalog_api.domain.entities import Product
from catalog_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ProductService:
    """Orchestrates product CRUD and catalog filters. Depends on the repository port (DI)."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def get_product(self, product_id: int) -> Product:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    async def list_products(self) -> list[Product]:
        return await self._repository.get_all()

    async def list_selected(self) -> list[Product]:
        return await self._repository.get_all(selected=True)

    async def list_available(self) -> list[Product]:
        return await self._repository.get_all(available=True)

    async def search_products(self, name: str | None = None) -> list[Product]:
        """Substring search on the product name; ``None`` or ``""`` matches everything."""
        return await self._repository.search_by_name(name or "")

    async def create_product(self, data: ProductCreate) -> Product:
        product = Product(
            name=data.name,
            price=data.price,
            quantity=data.quantity,
            selected=data.selected,
            available=data.available,
        )
        ensure_valid(product)
        created = await self._repository.create(product)
        logger.info("Created product %s (%s)", created.id, created.name)
        return created

    async def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        product = await self.get_product(product_id)
        product.replace(
            name=data.name,
            price=data.price,
            quantity=data.quantity,
            selected=data.selected,
            available=data.available,
        )
        ensure_valid(product)
        updated = await self._repository.update(product)
        logger.info("Updated product %s", product_id)
        return updated

    async def delete_product(self, product_id: int) -> None:
        if not await self._repository.delete(product_id):
            raise EntityNotFoundError("Product", product_id)
        logger.info("Deleted product %s", product_id)

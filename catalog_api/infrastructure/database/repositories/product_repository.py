"""Concrete repository implementation for Product backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.interfaces import ProductRepository
from catalog_api.domain.entities import Product
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.database.base import is_storable_id
from catalog_api.infrastructure.database.models import ProductModel


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Map ORM model → domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            price=model.price,
            quantity=model.quantity,
            selected=model.selected,
            available=model.available,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Map domain entity → ORM model (for creation)."""
        return ProductModel(
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
            selected=entity.selected,
            available=entity.available,
        )

    async def get_by_id(self, product_id: int) -> Product | None:
        if not is_storable_id(product_id):
            return None
        result = await self._session.get(ProductModel, product_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        selected: bool | None = None,
        available: bool | None = None,
    ) -> list[Product]:
        stmt = select(ProductModel)

        if selected is not None:
            stmt = stmt.where(ProductModel.selected == selected)
        if available is not None:
            stmt = stmt.where(ProductModel.available == available)

        stmt = stmt.order_by(ProductModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def search_by_name(self, term: str) -> list[Product]:
        # LIKE '%term%' with % and _ in the term matched literally
        stmt = (
            select(ProductModel)
            .where(ProductModel.name.contains(term, autoescape=True))
            .order_by(ProductModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, product: Product) -> Product:
        model = self._to_model(product)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, product: Product) -> Product:
        model = await self._session.get(ProductModel, product.id)
        if model is None:
            raise EntityNotFoundError("Product", product.id)
        model.name = product.name
        model.price = product.price
        model.quantity = product.quantity
        model.selected = product.selected
        model.available = product.available
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, product_id: int) -> bool:
        if not is_storable_id(product_id):
            return False
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

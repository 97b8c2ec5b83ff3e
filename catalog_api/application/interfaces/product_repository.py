"""Abstract repository interface (port) for Product persistence."""

from abc import ABC, abstractmethod

from catalog_api.domain.entities import Product


class ProductRepository(ABC):
    """Port for product persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Retrieve a single product by its ID."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        selected: bool | None = None,
        available: bool | None = None,
    ) -> list[Product]:
        """Retrieve products, optionally filtered on the boolean flags."""
        ...

    @abstractmethod
    async def search_by_name(self, term: str) -> list[Product]:
        """Retrieve products whose name contains ``term``. An empty term matches all."""
        ...

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Persist a new product and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Overwrite an existing product's mutable fields. Raises EntityNotFoundError when the row is gone."""
        ...

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        """Delete a product. Returns True if deleted, False if not found."""
        ...

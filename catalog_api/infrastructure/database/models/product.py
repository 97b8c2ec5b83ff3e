"""SQLAlchemy ORM model for the Product entity."""

from sqlalchemy import BigInteger, Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.infrastructure.database.base import Base, BigIntId


class ProductModel(Base):
    """ORM model: maps to the 'products' table."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[int] = mapped_column(BigInteger, nullable=False)
    selected: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, name='{self.name}')>"

"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from pydantic import BaseModel, Field

# quantity is stored in a signed 64-bit column
MAX_QUANTITY = 2**63 - 1


class ProductCreate(BaseModel):
    """Schema for creating a new product. The flags are optional."""

    name: str = Field(..., max_length=255, examples=["Pen"])
    price: float = Field(..., allow_inf_nan=False, examples=[1.5])
    quantity: int = Field(..., le=MAX_QUANTITY, examples=[10])
    selected: bool = False
    available: bool = True


class ProductUpdate(BaseModel):
    """Schema for replacing an existing product: every field required."""

    name: str = Field(..., max_length=255)
    price: float = Field(..., allow_inf_nan=False)
    quantity: int = Field(..., le=MAX_QUANTITY)
    selected: bool
    available: bool


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    price: float
    quantity: int
    selected: bool
    available: bool

    model_config = {"from_attributes": True}

"""Product CRUD endpoints and catalog filters."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from catalog_api.application.schemas import ProductCreate, ProductUpdate, ProductResponse
from catalog_api.application.services import ProductService
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.dependencies import get_product_service

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
NO_PRODUCTS_FOUND = "No products found"

router = APIRouter(prefix="/products", tags=["Products"])


def _not_found(e: EntityNotFoundError) -> HTTPException:
    logger.info("%s", e)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)


def _serialize(products) -> list[ProductResponse]:
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("", response_model=list[ProductResponse])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve every product."""
    return _serialize(await service.list_products())


# Filter routes are declared before /{product_id} so they are not parsed as IDs.


@router.get("/selected", response_model=list[ProductResponse])
async def list_selected_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve the products flagged as selected."""
    return _serialize(await service.list_selected())


@router.get("/available", response_model=list[ProductResponse])
async def list_available_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve the products that can currently be ordered."""
    return _serialize(await service.list_available())


@router.get(
    "/search",
    response_model=list[ProductResponse],
    responses={404: {"description": "No product name contains the term"}},
)
async def search_products(
    name: str = Query("", description="Substring to look for in product names"),
    service: ProductService = Depends(get_product_service),
):
    """Search products by name substring. An empty term returns every product."""
    products = await service.search_products(name)
    if not products:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": NO_PRODUCTS_FOUND},
        )
    return _serialize(products)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Retrieve a single product by ID."""
    try:
        product = await service.get_product(product_id)
    except EntityNotFoundError as e:
        raise _not_found(e)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a new product. ``selected`` defaults to false and ``available`` to true."""
    product = await service.create_product(data)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Overwrite every field of an existing product."""
    try:
        product = await service.update_product(product_id, data)
    except EntityNotFoundError as e:
        raise _not_found(e)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete a product by ID."""
    try:
        await service.delete_product(product_id)
    except EntityNotFoundError as e:
        raise _not_found(e)

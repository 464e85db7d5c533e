"""Product listing endpoints."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace.core.security import Identity, get_current_identity
from marketplace.interfaces.http.deps import get_product_service
from marketplace.modules.products import (
    ProductCreateInput,
    ProductNotFoundError,
    ProductOwnershipError,
    ProductService,
)
from marketplace.schemas import ProductCreate, ProductResponse

router = APIRouter()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED, summary="Create a new product")
async def add_product(
    payload: ProductCreate,
    identity: Identity = Depends(get_current_identity),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    product = await service.create_product(
        identity,
        ProductCreateInput(
            title=payload.title,
            price=payload.price,
            description=payload.description,
            category_id=payload.category_id,
            location=payload.location,
        ),
    )
    return ProductResponse.model_validate(product)


@router.get("", response_model=List[ProductResponse], summary="List all products")
async def list_products(service: ProductService = Depends(get_product_service)) -> List[ProductResponse]:
    products = await service.list_products()
    if not products:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No products registered")
    return [ProductResponse.model_validate(product) for product in products]


@router.get("/mine", response_model=List[ProductResponse], summary="List the caller's products")
async def list_my_products(
    identity: Identity = Depends(get_current_identity),
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    products = await service.list_owned(identity)
    if not products:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="You don't have any product registered")
    return [ProductResponse.model_validate(product) for product in products]


@router.delete("/{product_id}", response_model=ProductResponse, summary="Delete a product")
async def delete_product(
    product_id: str,
    identity: Identity = Depends(get_current_identity),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    try:
        product = await service.delete_product(product_id, identity)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ProductOwnershipError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return ProductResponse.model_validate(product)

# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.product_dto import ProductRequest, ProductResponse, MessageResponse
from ...application.dto.user_dto import CurrentUser
from ...application.use_cases.product import (
    ListProductsUseCase,
    CreateProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)
from ...di.container import DIContainer
from .dependencies import get_container, get_current_user


# Every route requires a valid bearer token
router = APIRouter(tags=["products"])


@router.get("", response_model=List[ProductResponse])
async def list_products(
    current_user: CurrentUser = Depends(get_current_user),
    container: DIContainer = Depends(get_container),
) -> List[ProductResponse]:
    """
    List the current user's products, newest first
    """
    list_products_use_case = container.get(ListProductsUseCase)
    return await list_products_use_case.execute(user_id=current_user.id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductRequest,
    current_user: CurrentUser = Depends(get_current_user),
    container: DIContainer = Depends(get_container),
) -> ProductResponse:
    """
    Create a product
    
    Args:
        request: Product body (name and sku required)
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ProductResponse with the created product
    """
    create_product_use_case = container.get(CreateProductUseCase)
    return await create_product_use_case.execute(request=request, user_id=current_user.id)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    request: ProductRequest,
    current_user: CurrentUser = Depends(get_current_user),
    container: DIContainer = Depends(get_container),
) -> ProductResponse:
    """
    Update one of the current user's products
    
    The ID is taken as text and checked by the use case so a bad ID gets
    the same 400 response as any other invalid input.
    """
    update_product_use_case = container.get(UpdateProductUseCase)
    return await update_product_use_case.execute(
        product_id=product_id,
        request=request,
        user_id=current_user.id,
    )


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    container: DIContainer = Depends(get_container),
) -> MessageResponse:
    delete_product_use_case = container.get(DeleteProductUseCase)
    return await delete_product_use_case.execute(
        product_id=product_id,
        user_id=current_user.id,
    )

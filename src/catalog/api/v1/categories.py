from fastapi import APIRouter, Depends, Response, status

from catalog.core.dependencies import get_product_service
from catalog.schemas import CategoryCreate, CategoryRead
from catalog.services import ProductService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(payload: CategoryCreate, service: ProductService = Depends(get_product_service)):
    return await service.save_category(payload)


@router.get("", response_model=list[CategoryRead])
async def list_categories(service: ProductService = Depends(get_product_service)):
    return await service.get_all_categories()


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: int, service: ProductService = Depends(get_product_service)):
    return await service.get_category_by_id(category_id)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, service: ProductService = Depends(get_product_service)):
    await service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

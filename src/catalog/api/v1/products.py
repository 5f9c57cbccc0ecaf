"""
Product routes. Every route delegates to ProductService; errors surface through
the handlers registered in error_handlers.py.
"""
from fastapi import APIRouter, Depends, Query, Response, status

from catalog.config import Settings
from catalog.core.dependencies import get_app_settings, get_product_service
from catalog.schemas import PageResponse, ProductCreate, ProductRead
from catalog.services import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    return await service.save_product(payload)


@router.post("/batch", response_model=list[ProductRead], status_code=status.HTTP_201_CREATED)
async def create_products(payload: list[ProductCreate], service: ProductService = Depends(get_product_service)):
    return await service.save_all_products(payload)


@router.get("", response_model=list[ProductRead])
async def list_products(service: ProductService = Depends(get_product_service)):
    return await service.get_all_products()


@router.get("/page", response_model=PageResponse[ProductRead])
async def list_products_page(
    page_no: int = Query(0),
    page_size: int | None = Query(None),
    service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_app_settings),
):
    # Out-of-range values are rejected by the service, not by query validation
    size = settings.DEFAULT_PAGE_SIZE if page_size is None else min(page_size, settings.MAX_PAGE_SIZE)
    page = await service.get_products_by_page(page_no, size)
    return PageResponse[ProductRead](
        items=[ProductRead.model_validate(p) for p in page.items],
        page_no=page.page_no,
        page_size=page.page_size,
        total_items=page.total_items,
        total_pages=page.total_pages,
        has_next=page.has_next,
    )


@router.get("/by-category/{category_name}", response_model=list[ProductRead])
async def list_products_by_category(category_name: str, service: ProductService = Depends(get_product_service)):
    return await service.get_products_by_category(category_name)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return await service.get_product_by_id(product_id)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    return await service.update_product(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("")
async def delete_all_products(service: ProductService = Depends(get_product_service)) -> dict:
    deleted = await service.delete_all_products()
    return {"deleted": deleted}

from fastapi import APIRouter

from . import categories, products

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(products.router)
api_router.include_router(categories.router)

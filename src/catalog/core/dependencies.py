from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.config import Settings, get_settings
from catalog.database.session import get_async_session
from catalog.services import ProductService


async def get_product_service(db: AsyncSession = Depends(get_async_session)) -> ProductService:
    # One service per request, bound to that request's session
    return ProductService(db)


def get_app_settings() -> Settings:
    return get_settings()

"""
Transfer objects for products.

`ProductCreate` is the inbound shape for both create and update: every mutable
field plus the id of an existing category. `ProductRead` is what the HTTP layer
returns, with the category embedded.
"""
from pydantic import BaseModel, ConfigDict, Field

from .audit import AuditRead
from .category import CategoryRead


class ProductCreate(BaseModel):
    title: str = Field(..., max_length=255)
    img: str | None = Field(default=None, max_length=500)
    description: str | None = None
    price: int
    # Not range-checked; stock levels are whatever the caller supplies
    quantity: int
    category_id: int


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    img: str | None = None
    description: str | None = None
    price: int
    quantity: int
    category: CategoryRead
    audit: AuditRead | None = None

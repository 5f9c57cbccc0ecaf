from pydantic import BaseModel, ConfigDict, Field, field_validator

from .audit import AuditRead


class CategoryCreate(BaseModel):
    category_name: str = Field(..., max_length=100)

    @field_validator("category_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        # Runs before max_length; blank names are rejected by the service, not here
        return v.strip() if isinstance(v, str) else v


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_name: str
    audit: AuditRead | None = None

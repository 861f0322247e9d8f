from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional

from multilingua.schemas.validators import ensure_slug, require_text
from multilingua.utils.slugify import slugify


class SubjectCreate(BaseModel):
    name: str = Field(..., title="Subject Name", description="Display name in the source language.")
    slug: Optional[str] = Field(None, title="Slug", description="URL key; derived from the name when omitted.")
    icon: str = Field("", title="Icon", description="Presentational icon identifier.")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return require_text(value)

    @field_validator("slug")
    @classmethod
    def _slug_format(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else ensure_slug(value)

    @model_validator(mode="after")
    def _derive_slug(self) -> "SubjectCreate":
        if self.slug is None:
            self.slug = slugify(self.name)
        return self


class SubjectResponse(BaseModel):
    id: int = Field(..., title="Subject ID")
    name: str
    slug: str
    icon: str
    article_count: int = Field(0, ge=0, description="Number of articles created under this subject.")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Technology",
                "slug": "technology",
                "icon": "ri-computer-line",
                "article_count": 3,
            }
        },
    )

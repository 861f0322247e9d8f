from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime

from multilingua.schemas.validators import (
    ensure_article_slug,
    ensure_language_code,
    require_text,
    to_naive_utc,
)
from multilingua.utils.slugify import slugify

CANONICAL_LANGUAGE = "en"

# Article fields a patch may explicitly clear
NULLABLE_UPDATE_FIELDS = frozenset({"author_image"})


class TranslationContent(BaseModel):
    """Per-language content as stored.

    Rows written before input validation existed may be partially filled, so
    every field is optional here; completeness is decided at read time.
    """

    title: str = ""
    excerpt: str = ""
    content: str = ""
    notes: Optional[list[str]] = None
    resources: Optional[list[str]] = None

    def is_complete(self) -> bool:
        return all(
            isinstance(value, str) and value.strip()
            for value in (self.title, self.excerpt, self.content)
        )


def language_divergence(
    translations: dict[str, TranslationContent], available_languages: list[str]
) -> tuple[list[str], list[str]]:
    """Compare the display list with the stored translations.

    Returns ``(listed_without_content, complete_but_unlisted)``, both in a
    stable order.
    """
    listed_without_content = [
        code for code in available_languages
        if code not in translations or not translations[code].is_complete()
    ]
    complete_but_unlisted = [
        code for code, entry in translations.items()
        if code not in available_languages and entry.is_complete()
    ]
    return listed_without_content, complete_but_unlisted


class LocalizedContent(TranslationContent):
    """Validated per-language content accepted on writes."""

    title: str = Field(..., title="Title")
    excerpt: str = Field(..., title="Excerpt")
    content: str = Field(..., title="Content", description="Markdown-flavoured body text.")
    notes: list[str] = Field(default_factory=list, title="Key Notes")
    resources: list[str] = Field(default_factory=list, title="Further Resources")

    @field_validator("title", "excerpt", "content")
    @classmethod
    def _required_text(cls, value: str) -> str:
        return require_text(value)

    @field_validator("notes", "resources", mode="before")
    @classmethod
    def _missing_list_is_empty(cls, value):
        return [] if value is None else value


def _normalize_language_keys(translations: dict) -> dict:
    normalized = {}
    for code, entry in translations.items():
        key = ensure_language_code(code)
        if key in normalized:
            raise ValueError(f"duplicate translation for language '{key}'")
        normalized[key] = entry
    return normalized


def _normalize_language_list(codes: list[str]) -> list[str]:
    normalized: list[str] = []
    for code in codes:
        key = ensure_language_code(code)
        if key in normalized:
            raise ValueError(f"language '{key}' is listed more than once")
        normalized.append(key)
    return normalized


class ArticleCreate(BaseModel):
    slug: Optional[str] = Field(None, title="Slug", description="URL key; derived from the English title when omitted.")
    subject_id: int = Field(..., title="Subject ID")
    author: str = Field(..., title="Author")
    author_image: Optional[str] = Field(None, title="Author Image")
    image_url: str = Field(..., title="Cover Image URL")
    read_time: int = Field(..., gt=0, title="Read Time", description="Estimated reading time in minutes.")
    publish_date: Optional[datetime] = Field(None, description="Defaults to the creation time.")
    featured: bool = Field(False, title="Featured")
    view_count: int = Field(0, ge=0, title="View Count")
    translations: dict[str, LocalizedContent] = Field(..., description="Content per language code; 'en' is required.")
    available_languages: Optional[list[str]] = Field(
        None, description="Language tabs to display; defaults to the translation languages."
    )

    @field_validator("author")
    @classmethod
    def _author_not_blank(cls, value: str) -> str:
        return require_text(value)

    @field_validator("slug")
    @classmethod
    def _slug_format(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else ensure_article_slug(value)

    @field_validator("publish_date")
    @classmethod
    def _publish_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return None if value is None else to_naive_utc(value)

    @field_validator("translations")
    @classmethod
    def _translation_keys(cls, value: dict[str, LocalizedContent]) -> dict[str, LocalizedContent]:
        return _normalize_language_keys(value)

    @field_validator("available_languages")
    @classmethod
    def _available_languages(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return None if value is None else _normalize_language_list(value)

    @model_validator(mode="after")
    def _canonical_translation(self) -> "ArticleCreate":
        if CANONICAL_LANGUAGE not in self.translations:
            raise ValueError(f"translations must include '{CANONICAL_LANGUAGE}'")
        if self.slug is None:
            self.slug = ensure_article_slug(slugify(self.translations[CANONICAL_LANGUAGE].title))
        if self.available_languages is None:
            self.available_languages = list(self.translations)
        return self

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "slug": "water-cycle-explained",
                "subject_id": 2,
                "author": "Multilingua Science Team",
                "image_url": "https://images.example.com/water-cycle.jpg",
                "read_time": 6,
                "translations": {
                    "en": {
                        "title": "The Water Cycle",
                        "excerpt": "How water moves through nature.",
                        "content": "# Evaporation\n\nWater is essential to life...",
                    },
                    "fr": {
                        "title": "Le Cycle de l'Eau",
                        "excerpt": "Comment l'eau circule dans la nature.",
                        "content": "# Évaporation\n\nL'eau est essentielle à la vie...",
                    },
                },
                "available_languages": ["en", "fr"],
            }
        }
    )


class ArticleUpdate(BaseModel):
    """Partial update; only fields present in the payload are applied.

    A ``null`` translation removes that language; the 'en' translation
    cannot be removed.
    """

    slug: Optional[str] = None
    subject_id: Optional[int] = None
    author: Optional[str] = None
    author_image: Optional[str] = None
    image_url: Optional[str] = None
    read_time: Optional[int] = Field(None, gt=0)
    publish_date: Optional[datetime] = None
    featured: Optional[bool] = None
    translations: Optional[dict[str, Optional[LocalizedContent]]] = None
    available_languages: Optional[list[str]] = None

    @field_validator("author")
    @classmethod
    def _author_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else require_text(value)

    @field_validator("slug")
    @classmethod
    def _slug_format(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else ensure_article_slug(value)

    @field_validator("publish_date")
    @classmethod
    def _publish_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return None if value is None else to_naive_utc(value)

    @field_validator("translations")
    @classmethod
    def _translation_keys(cls, value):
        return None if value is None else _normalize_language_keys(value)

    @field_validator("available_languages")
    @classmethod
    def _available_languages(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return None if value is None else _normalize_language_list(value)

    @model_validator(mode="after")
    def _explicit_nulls(self) -> "ArticleUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in NULLABLE_UPDATE_FIELDS:
                raise ValueError(f"'{name}' cannot be null")
        if self.translations and CANONICAL_LANGUAGE in self.translations:
            if self.translations[CANONICAL_LANGUAGE] is None:
                raise ValueError(f"the '{CANONICAL_LANGUAGE}' translation cannot be removed")
        return self


class ArticleResponse(BaseModel):
    id: int
    slug: str
    subject_id: int
    title: str = Field(..., description="Mirror of translations['en'].title.")
    excerpt: str = Field(..., description="Mirror of translations['en'].excerpt.")
    content: str = Field(..., description="Mirror of translations['en'].content.")
    author: str
    author_image: Optional[str] = None
    image_url: str
    read_time: int
    publish_date: datetime
    featured: bool = False
    view_count: int = 0
    translations: dict[str, TranslationContent]
    available_languages: list[str]

    model_config = ConfigDict(from_attributes=True)


class LanguageInfo(BaseModel):
    code: str
    name: str
    native_name: str
    is_rtl: bool


class EffectiveView(BaseModel):
    """The content actually shown to a reader for one requested language."""

    requested_language: str
    language: str = Field(..., description="Language actually served.")
    is_fallback: bool
    is_rtl: bool
    title: str
    excerpt: str
    content: str
    notes: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
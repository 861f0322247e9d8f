from .article import (
    CANONICAL_LANGUAGE,
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    EffectiveView,
    LanguageInfo,
    LocalizedContent,
    TranslationContent,
    language_divergence,
)
from .subject import SubjectCreate, SubjectResponse

__all__ = [
    "CANONICAL_LANGUAGE",
    "ArticleCreate",
    "ArticleResponse",
    "ArticleUpdate",
    "EffectiveView",
    "LanguageInfo",
    "LocalizedContent",
    "TranslationContent",
    "language_divergence",
    "SubjectCreate",
    "SubjectResponse",
]

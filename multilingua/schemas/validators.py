"""Shared field checks for the catalog schemas."""

import re
from datetime import datetime, timezone

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}(?:-[a-z0-9]{2,8})*$")


def require_text(value: str) -> str:
    if value is None or not value.strip():
        raise ValueError("must not be empty")
    return value


def ensure_slug(value: str) -> str:
    if not SLUG_PATTERN.match(value):
        raise ValueError(f"'{value}' is not a valid slug (lowercase letters, digits and single hyphens)")
    return value


# path segments of the article routes that an article slug would shadow
RESERVED_ARTICLE_SLUGS = frozenset({"featured", "recent", "subject"})


def ensure_article_slug(value: str) -> str:
    value = ensure_slug(value)
    if value in RESERVED_ARTICLE_SLUGS:
        raise ValueError(f"'{value}' is reserved by the article routes")
    return value


def ensure_language_code(value: str) -> str:
    code = value.strip().lower()
    if not LANGUAGE_CODE_PATTERN.match(code):
        raise ValueError(f"'{value}' is not a valid language code")
    return code


def to_naive_utc(value: datetime) -> datetime:
    """Publish dates are compared as naive UTC so SQL and memory backends sort alike."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

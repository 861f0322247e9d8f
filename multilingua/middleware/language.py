"""
Language Detection Middleware

Sets request.state.locale from:
  1. X-Language request header (exact match against supported languages)
  2. Accept-Language header (quality-weighted, best match)
  3. settings.default_language

Only picks the reader's preferred language; which content is served for it
is still decided by the translation resolver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from multilingua.config import settings
from multilingua.i18n.locale import parse_accept_language

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response


def detect_locale(x_language: str, accept_language: str, supported: list[str], default: str) -> str:
    locale = x_language.strip().lower()
    if locale in supported:
        return locale
    return parse_accept_language(accept_language, supported) or default


class LanguageMiddleware(BaseHTTPMiddleware):
    """Attach the negotiated locale to request.state.locale."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        locale = detect_locale(
            request.headers.get("X-Language", ""),
            request.headers.get("Accept-Language", ""),
            settings.supported_languages,
            settings.default_language,
        )
        request.state.locale = locale
        return await call_next(request)

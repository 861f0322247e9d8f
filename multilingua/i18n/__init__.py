"""
i18n (Internationalization) package

Language metadata, RTL detection and Accept-Language negotiation for the
multilingual article catalog.
"""

from .locale import (
    LANGUAGE_NAMES,
    RTL_LOCALES,
    base_language,
    get_language_info,
    is_rtl_locale,
    parse_accept_language,
)

__all__ = [
    "LANGUAGE_NAMES",
    "RTL_LOCALES",
    "base_language",
    "get_language_info",
    "is_rtl_locale",
    "parse_accept_language",
]

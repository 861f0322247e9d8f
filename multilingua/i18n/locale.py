"""
Locale helpers

Pure functions for the reader-facing language catalogue:
- language metadata (English and native display names)
- RTL (right-to-left) detection
- Accept-Language header negotiation with quality-value (q=) support

Language codes are opaque keys everywhere else in the catalog; this module
only adds display metadata and never limits which codes may be stored.
"""

from __future__ import annotations

# ── Constants ─────────────────────────────────────────────────────────────────

# Base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "yi", "ku"})

# code -> (English name, native name)
LANGUAGE_NAMES: dict[str, tuple[str, str]] = {
    "en": ("English", "English"),
    "fr": ("French", "Français"),
    "es": ("Spanish", "Español"),
    "ar": ("Arabic", "العربية"),
    "de": ("German", "Deutsch"),
    "it": ("Italian", "Italiano"),
    "pt": ("Portuguese", "Português"),
    "he": ("Hebrew", "עברית"),
    "fa": ("Persian", "فارسی"),
    "ur": ("Urdu", "اردو"),
}


# ── Public helpers ────────────────────────────────────────────────────────────


def base_language(locale: str) -> str:
    """Return the lowercase base tag of a locale ("fr-CA" -> "fr")."""
    return locale.split("-")[0].strip().lower()


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given locale is written right-to-left.

    Only the base language tag is compared, so both "ar" and "ar-EG"
    are identified as RTL.
    """
    return base_language(locale) in RTL_LOCALES


def _quality(params: str) -> float:
    """q-value from the parameter part of one header entry; 1.0 when absent or malformed."""
    for param in params.split(";"):
        name, _, value = param.strip().partition("=")
        if name == "q":
            try:
                return float(value)
            except ValueError:
                return 1.0
    return 1.0


def parse_accept_language(header: str, supported: list[str]) -> str | None:
    """Pick the best supported language for an Accept-Language header.

    Tags are ranked by q-value (default 1.0, stable for equal weights); each
    tag is tried as an exact match first and then by its base language.
    Tags with q=0 are refused by the client and never match.

    Args:
        header:    Raw header value, e.g. "fr-CA,fr;q=0.9,en;q=0.7".
        supported: Language codes the site serves, in preference order.

    Returns:
        The matching code from ``supported`` or None.
    """
    if not header:
        return None

    ranked: list[tuple[float, str]] = []
    for entry in filter(None, (item.strip() for item in header.split(","))):
        tag, _, params = entry.partition(";")
        weight = _quality(params)
        if weight > 0:
            ranked.append((weight, tag.strip().lower()))
    ranked.sort(key=lambda item: item[0], reverse=True)

    by_code = {code.lower(): code for code in reversed(supported)}
    for _, tag in ranked:
        match = by_code.get(tag) or by_code.get(base_language(tag))
        if match:
            return match
    return None


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return display metadata for a language code.

    Unknown codes fall back to the code itself for both names.
    """
    name, native_name = LANGUAGE_NAMES.get(locale, (locale, locale))
    return {
        "code": locale,
        "name": name,
        "native_name": native_name,
        "is_rtl": is_rtl_locale(locale),
    }

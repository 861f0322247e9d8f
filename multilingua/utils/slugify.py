import re
from unidecode import unidecode


def slugify(text):
    """Turn a display string into a URL-safe slug ("Arts & Culture" -> "arts-culture")."""
    if not text or not str(text).strip():
        raise ValueError("slugify() requires a non-empty string")

    text = unidecode(str(text)).lower()
    text = re.sub(r'[^a-z0-9]+', '-', text).strip('-')
    return text or "n-a"

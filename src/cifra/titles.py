import re
import unicodedata

# Zero-width characters and bidi controls that sneak in from copy/paste.
_INVISIBLE_RE = re.compile("[\u200b-\u200f\u202a-\u202e\u2060\ufeff]")
_LEADING_JUNK_RE = re.compile(r"^[\s\x00-\x1f]+")

# "Hino 23 - Grace", "12. Louvores: Grace", "hinos Grace"
_CATEGORY_PREFIX_RE = re.compile(
    r"^(?:\d+\s*[-.:]\s*)?(?:hinos?|louvores?)\b\s*[-:]?\s*",
    re.IGNORECASE,
)
_CATEGORY_WORDS = {"hino", "hinos", "louvor", "louvores"}
_BRACKETED_RE = re.compile(r"^\[(.+)\]$")


def display_title(title: str) -> str:
    """Return *title* cleaned up for display.

    Strips invisible characters and a leading category word (``Hino``,
    ``Louvor`` and plurals, accented or not), then unwraps ``[…]``.
    """
    cleaned = unicodedata.normalize("NFKC", title)
    cleaned = _INVISIBLE_RE.sub("", cleaned)
    cleaned = _LEADING_JUNK_RE.sub("", cleaned)
    cleaned = cleaned.rstrip()
    cleaned = _CATEGORY_PREFIX_RE.sub("", cleaned, count=1)

    # Catch accented spellings the regex misses, e.g. "Hínó".
    first, _, rest = cleaned.partition(" ")
    folded = unicodedata.normalize("NFKD", first)
    folded = re.sub(r"[^a-z]", "", folded, flags=re.IGNORECASE).lower()
    if folded in _CATEGORY_WORDS:
        cleaned = re.sub(r"^[-:]\s*", "", rest.strip()).strip()

    cleaned = cleaned.strip()
    m = _BRACKETED_RE.match(cleaned)
    if m:
        cleaned = m.group(1).strip()
    return cleaned

"""Text helpers for author display data and lenient attribute parsing."""

import re
import unicodedata
from typing import Any


def normalize_text(
    text: str,
    *,
    lowercase: bool = True,
    remove_accents: bool = True,
    collapse_whitespace: bool = True,
) -> str:
    """
    Normalize text for slugs and comparisons.

    Args:
        text: Input text to normalize
        lowercase: Convert to lowercase
        remove_accents: Remove diacritical marks (é -> e)
        collapse_whitespace: Replace multiple spaces with single space

    Returns:
        Normalized string
    """
    if not text:
        return ""

    result = text

    if remove_accents:
        # Decompose unicode characters and remove combining marks
        nfkd = unicodedata.normalize("NFKD", result)
        result = "".join(c for c in nfkd if not unicodedata.combining(c))

    if lowercase:
        result = result.lower()

    if collapse_whitespace:
        result = re.sub(r"\s+", " ", result).strip()

    return result


def slugify(name: str) -> str:
    """
    Build a URL-safe slug from an author name.

    - "José Saramago" -> "jose-saramago"
    - "Le Guin, Ursula K." -> "le-guin-ursula-k"
    """
    normalized = normalize_text(name)
    slug = re.sub(r"[^a-z0-9]+", "-", normalized)
    return slug.strip("-")


def author_initials(name: str, length: int = 2) -> str:
    """Upper-cased leading characters of a name, shown when there is no thumbnail."""
    if length < 1:
        return ""
    return name.strip()[:length].upper()


def trim_words(text: str | None, num_words: int = 15, more: str = "...") -> str:
    """Keep the first ``num_words`` words of ``text``, appending ``more`` if anything was cut."""
    if not text:
        return ""
    words = text.split()
    if len(words) <= num_words:
        return " ".join(words)
    return " ".join(words[:num_words]) + more


def book_count_label(count: int) -> str:
    """Singular/plural label for an author's number of books."""
    return f"{count} Book" if count == 1 else f"{count} Books"


def clamp(value: int, low: int, high: int) -> int:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def parse_int(value: Any, default: int) -> int:
    """
    Parse an integer attribute leniently.

    Accepts ints, numeric strings and strings with a leading number ("8 authors").
    Anything else yields ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)

    match = re.match(r"\s*([+-]?\d+)", str(value))
    if not match:
        return default
    return int(match.group(1))


def parse_bool(value: Any, default: bool) -> bool:
    """Parse a "true"/"false" style attribute; unrecognized values yield ``default``."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default

    normalized = str(value).strip().lower()
    if normalized in {"true", "1", "yes", "on"}:
        return True
    if normalized in {"false", "0", "no", "off"}:
        return False
    return default

"""Text helpers for building output filenames."""

import re
import unicodedata

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Convert text to a filename-safe slug.

    Accented letters are folded to their ASCII base letter. Characters with
    no ASCII counterpart (CJK, emoji) are dropped.

    Args:
        text: Text to convert

    Returns:
        Slugified text (lowercase, alphanumeric with hyphens)

    Example:
        >>> slugify("Café crashes!")
        'cafe-crashes'
    """
    # Decompose combined characters (é -> e + accent) before dropping non-ASCII
    folded = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    )
    return _NON_ALPHANUMERIC.sub("-", folded.lower()).strip("-")


def issue_filename(number: int, title: str) -> str:
    """Filename for an exported issue: zero-padded number plus title slug.

    A title without any usable characters gives just the number.
    """
    slug = slugify(title)
    if not slug:
        return f"{number:03d}.md"
    return f"{number:03d}-{slug}.md"

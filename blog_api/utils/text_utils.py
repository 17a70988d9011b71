# Standard library imports
import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

DEFAULT_SLUG = "post"


def slugify(text: str) -> str:
    """
    Build a URL slug from free text.

    "Hello, World!" -> "hello-world". Accents are folded to ASCII; a title
    with no usable characters yields DEFAULT_SLUG.
    """
    if not text:
        return DEFAULT_SLUG
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM.sub("-", folded.lower()).strip("-")
    return slug or DEFAULT_SLUG

"""
Helper functions for Wikipedia page title normalization and validation.

Titles are kept in "space form" in memory ("Kevin Bacon", not "Kevin_Bacon"),
which is the form every comparison against the target page uses.
"""

import re
import urllib.parse
from typing import Iterable, List, Optional

DEFAULT_LANGUAGE = "en"

# Namespace prefixes that never name a content article.
NON_CONTENT_NAMESPACES = {
    "Media", "Special", "Talk", "User", "User talk", "Wikipedia", "Wikipedia talk",
    "Project", "Project talk", "WP", "File", "File talk", "Image", "Image talk",
    "MediaWiki", "MediaWiki talk", "Template", "Template talk", "Help", "Help talk",
    "Category", "Category talk", "Portal", "Portal talk", "Draft", "Draft talk",
    "TimedText", "TimedText talk", "Module", "Module talk", "Tag",
}

_WHITESPACE_RE = re.compile(r"\s+")


def site_prefix(language: str = DEFAULT_LANGUAGE) -> str:
    """Returns the URL prefix under which pages of the given wiki live."""
    return f"https://{language}.wikipedia.org/wiki/"


def normalize_page_title(raw: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Returns the canonical in-memory node identifier for a title, URL or href.

    Args:
      raw: A page title, a full page URL under the site prefix, or a "/wiki/..." href.
      language: The wiki language the URL prefix belongs to.

    Returns:
      The normalized title. May be empty if the input held nothing usable.

    Examples:
      "Kevin_Bacon"                                  =>   "Kevin Bacon"
      "https://en.wikipedia.org/wiki/Kevin_Bacon"    =>   "Kevin Bacon"
      "/wiki/Caf%C3%A9_society"                      =>   "Café society"
      "  Footloose  "                                =>   "Footloose"
    """
    title = raw.strip()
    path = _strip_site_prefix(title, language)
    if path is not None:
        # Query strings never belong to the title; fragments are kept so the
        # link filter can still see them.
        path = path.split("?", 1)[0]
        title = urllib.parse.unquote(path)
    return _WHITESPACE_RE.sub(" ", title.replace("_", " ")).strip()


def to_url_title(title: str) -> str:
    """Returns the underscore form of a space-form title, as used in page URLs."""
    return title.strip().replace(" ", "_")


def page_url(title: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Returns the full page URL for a space-form title."""
    return site_prefix(language) + urllib.parse.quote(to_url_title(title), safe="()'!,;:*")


def is_content_link(title: str) -> bool:
    """Returns whether a normalized title names a content article.

    Anchor links ("Foo#Bar", "#History") are rejected. So is any title whose
    first colon comes before its first space ("Wikt:bacon", "MOS:LINK"), and any
    title in a known non-content namespace ("Help talk:Links"). A colon after a
    space ("Star Wars: Episode IV") is fine.
    """
    if not title or "#" in title:
        return False
    if ":" in title:
        namespace = title.split(":", 1)[0]
        if " " not in namespace:
            return False
        namespace = namespace.strip()
        if namespace in NON_CONTENT_NAMESPACES or namespace.capitalize() in NON_CONTENT_NAMESPACES:
            return False
    return True


def strip_fragment(title: str) -> str:
    """Returns a normalized title without its "#section" part."""
    return title.split("#", 1)[0].strip()


def filter_content_links(titles: Iterable[str], limit: Optional[int] = None) -> List[str]:
    """Returns content titles in first-seen order with duplicates removed.

    Args:
      titles: Normalized titles, in the order the remote service returned them.
      limit: If given, only the first ``limit`` surviving titles are kept. The
        limit applies after filtering and deduplication.
    """
    seen = set()
    result: List[str] = []
    for title in titles:
        if title in seen or not is_content_link(title):
            continue
        seen.add(title)
        result.append(title)
        if limit is not None and len(result) >= limit:
            break
    return result


def is_str(val) -> bool:
    """Returns whether or not the provided value is a string type."""
    return isinstance(val, str)


def validate_page_title(page_title: str):
    """Validates the provided value is a valid page title.

    Raises:
      ValueError: If the provided page title is invalid.
    """
    if not page_title or not is_str(page_title) or not page_title.strip():
        raise ValueError(
            f'Invalid page title "{page_title}" provided. Page title must be a non-empty string.'
        )


def _strip_site_prefix(value: str, language: str) -> Optional[str]:
    for prefix in (
        site_prefix(language),
        f"http://{language}.wikipedia.org/wiki/",
        f"https://{language}.m.wikipedia.org/wiki/",
        f"//{language}.wikipedia.org/wiki/",
        "/wiki/",
    ):
        if value.startswith(prefix):
            return value[len(prefix):]
    return None

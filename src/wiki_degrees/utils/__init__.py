from .wiki_helpers import (
    filter_content_links,
    is_content_link,
    normalize_page_title,
    page_url,
    to_url_title,
    validate_page_title,
)

__all__ = [
    "filter_content_links",
    "is_content_link",
    "normalize_page_title",
    "page_url",
    "to_url_title",
    "validate_page_title",
]

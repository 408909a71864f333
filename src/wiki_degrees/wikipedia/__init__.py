"""
Wikipedia module for wiki_degrees.

This module contains the live link lookup used to reveal the page graph.
"""

from .live_service import LiveWikiService

__all__ = [
    'LiveWikiService',
]

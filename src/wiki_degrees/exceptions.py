"""
Custom exceptions for wiki_degrees.
"""

class WikiDegreesException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class InvalidPageTitleException(WikiDegreesException):
    """Raised when a start page is empty or otherwise unusable after normalization."""
    pass

class PageNotFoundException(WikiDegreesException):
    """Raised when a specific Wikipedia page cannot be found."""
    pass

class WikiServiceUnavailableException(WikiDegreesException):
    """Raised when the Wikipedia API is unreachable or returns an error."""
    pass

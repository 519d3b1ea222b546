"""Application services: search term sanitization."""

from ranked_search.application.services.term_sanitizer import TermSanitizer

__all__ = ["TermSanitizer"]

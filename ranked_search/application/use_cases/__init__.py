"""Application use cases: one entry point per workflow."""

from ranked_search.application.use_cases.search import SearchService

__all__ = ["SearchService"]

"""Application interfaces (ports): search protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from ranked_search.infrastructure.
"""

from ranked_search.application.interfaces.search import (
    IQueryBuilder,
    IResultRehydrator,
    ISearchExecutor,
    ITermSanitizer,
)

__all__ = [
    "IQueryBuilder",
    "IResultRehydrator",
    "ISearchExecutor",
    "ITermSanitizer",
]

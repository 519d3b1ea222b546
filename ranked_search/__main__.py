"""Serve the API with uvicorn: ``python -m ranked_search`` or ``ranked-search``."""

import uvicorn

from ranked_search.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "ranked_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()

"""Search term sanitization.

Reduces untrusted text to alphanumeric tokens suffixed with the boolean-mode
wildcard, so the bound term can never carry full-text operators (+ - < > ( )
~ " @) or statement-breaking characters.
"""

import logging
import re
from typing import ClassVar

from ranked_search.application.dtos.search import WILDCARD, TokenSet

logger = logging.getLogger(__name__)


class TermSanitizer:
    """Normalize raw user input into a TokenSet. Never raises."""

    # Any whitespace counts as a separator; everything else outside
    # [A-Za-z0-9] is dropped.
    WHITESPACE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"\s+")
    UNSAFE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9 ]")

    def __init__(self, max_tokens: int | None = None) -> None:
        """Initialize with an optional cap on the number of tokens kept.

        Args:
            max_tokens: Keep at most this many leading tokens (None = no cap).
        """
        self.max_tokens = max_tokens

    def sanitize(self, raw: str | None) -> TokenSet:
        """Return the wildcard-marked tokens of raw.

        None, empty, whitespace-only and punctuation-only input all yield an
        empty TokenSet.
        """
        text = self.normalize(raw)
        if not text:
            return TokenSet()
        words = text.split(" ")
        if self.max_tokens is not None and len(words) > self.max_tokens:
            logger.debug(
                "Search term truncated from %d to %d tokens",
                len(words),
                self.max_tokens,
            )
            words = words[: self.max_tokens]
        return TokenSet(tuple(f"{word}{WILDCARD}" for word in words))

    @classmethod
    def normalize(cls, raw: str | None) -> str:
        """Strip unsafe characters, collapse whitespace, trim."""
        if not raw:
            return ""
        text = cls.WHITESPACE_PATTERN.sub(" ", str(raw))
        text = cls.UNSAFE_PATTERN.sub("", text)
        return cls.WHITESPACE_PATTERN.sub(" ", text).strip()

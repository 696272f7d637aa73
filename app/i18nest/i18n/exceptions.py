"""Custom exceptions for the translation pipeline.

Lookup misses are never exceptions; they resolve to ``None``. Only
ingestion failures and runaway nesting are raised.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18nest errors.

    Example:
        try:
            translator.loader().from_text(text).load()
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class DocumentParseError(I18nError, ValueError):
    """Raised when translation document text cannot be parsed into a mapping.

    Example:
        >>> parse_document("{not: [valid")
        Traceback (most recent call last):
        ...
        DocumentParseError: Failed to parse translation document: ...
    """

    pass


class NestingTooDeepError(I18nError, RecursionError):
    """Raised when nested reuse resolution exceeds the configured depth.

    Usually means two translation values reuse each other.

    Attributes:
        key: Key being resolved when the ceiling was hit.
        depth: Depth reached.
    """

    def __init__(self, key: Optional[str], depth: int):
        self.key = key
        self.depth = depth
        super().__init__(
            f"Nesting too deep while resolving key {key!r} (depth {depth})"
        )

"""i18nest - nested key translation with language fallback and pluralization."""

__version__ = "0.1.0"

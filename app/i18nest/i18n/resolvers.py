"""Key resolution: namespace extraction, key splitting and language fallback.

Turns a candidate key such as ``"app:menu.file.open"`` into a raw string
from the TranslationStore, trying the active language, its region-stripped
variants, then the fallback language and its variants.
"""

from typing import List, Optional

from i18nest.configuration import I18nSettings
from i18nest.i18n.models import TranslationStore, language_candidates
from i18nest.i18n.operations import Operation
from i18nest.logging import get_module_logger

logger = get_module_logger()


class KeyResolver:
    """Resolves candidate keys to raw (not yet nested-resolved) strings.

    Attributes:
        store: TranslationStore to read from.
        settings: Settings providing separators and languages.
    """

    def __init__(self, store: TranslationStore, settings: I18nSettings):
        self.store = store
        self.settings = settings
        self.log = logger.bind(component="i18n.resolver")

    def _debug(self, event: str, level: str = "debug", **kwargs) -> None:
        if self.settings.debug:
            getattr(self.log, level)(event, **kwargs)

    def get_namespace(self, key: str) -> Optional[str]:
        """Return the namespace prefix of ``key``, or the default namespace.

        A prefix counts only when the namespace separator appears at a
        positive index.
        """
        separator = self.settings.ns_separator
        if separator:
            index = key.find(separator)
            if index > 0:
                namespace = key[:index]
                self._debug("namespace_found", key=key, namespace=namespace)
                return namespace
        return self.settings.default_namespace

    def split_key_path(self, key: str) -> Optional[List[str]]:
        """Split ``key`` on the key separator.

        Returns:
            Path segments, or None if the key cannot be split.
        """
        separator = self.settings.key_separator
        if not separator:
            self._debug(
                "key_split_failed", level="error", key=key, key_separator=separator
            )
            return None
        return key.split(separator)

    def resolve(self, key: str, operation: Optional[Operation] = None) -> Optional[str]:
        """Find the raw string for a single candidate key.

        Args:
            key: Candidate key, optionally namespace-prefixed.
            operation: Operation whose Pre capability rewrites the key.

        Returns:
            Raw string, or None on a miss.
        """
        if key is None:
            return None
        namespace = self.get_namespace(key)
        if namespace is None:
            self._debug("namespace_undetermined", key=key)
            return None

        # Namespace plus the one character separating it from the key
        if key.startswith(namespace) and len(key) > len(namespace):
            key = key[len(namespace) + 1 :]

        if operation is not None and operation.pre:
            key = operation.preprocess(key)

        value = self.resolve_in_namespace(namespace, key)

        if value is None and operation is not None and operation.pre:
            retry_key = operation.preprocess_after_miss(key)
            if retry_key is not None and retry_key != key:
                self._debug("retrying_after_miss", key=key, retry_key=retry_key)
                value = self.resolve_in_namespace(namespace, retry_key)
        return value

    def resolve_in_namespace(self, namespace: str, key: str) -> Optional[str]:
        """Look up ``key`` under ``namespace`` through the language fallback chain."""
        segments = self.split_key_path(key)
        if segments is None:
            return None

        for language in self.language_chain():
            value = self.store.lookup(language, namespace, segments)
            if value is not None:
                return value
        return None

    def language_chain(self) -> List[str]:
        """Active language and its variants, then the fallback language and its variants."""
        chain = language_candidates(self.settings.language)
        for language in language_candidates(self.settings.fallback_language):
            if language not in chain:
                chain.append(language)
        return chain

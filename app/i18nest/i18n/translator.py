"""Translation service resolving keys to localized strings.

Ties together the TranslationStore, the KeyResolver and the
NestingResolver.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from i18nest.configuration import I18nSettings, get_settings
from i18nest.i18n.exceptions import NestingTooDeepError
from i18nest.i18n.loader import Loader
from i18nest.i18n.models import TranslationStore
from i18nest.i18n.nesting import NestingResolver
from i18nest.i18n.operations import Composite, Interpolation, Operation, Plural
from i18nest.i18n.resolvers import KeyResolver
from i18nest.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating dotted keys with fallback, reuse and plurals.

    Keys look like ``"namespace:path.to.key"``; the namespace prefix is
    optional and defaults to ``settings.default_namespace``. Lookups never
    raise on a miss, they return None.

    Attributes:
        settings: Settings shared by every component.
        store: TranslationStore holding loaded payloads.
        key_resolver: KeyResolver used for raw lookups.
        nesting: NestingResolver used to substitute reuse tokens.

    Example:
        translator = Translator()
        translator.loader().from_text('{"app": {"name": "Widget"}}').namespace("common").load()
        translator.t("common:app.name")  # "Widget"
    """

    def __init__(
        self,
        settings: Optional[I18nSettings] = None,
        store: Optional[TranslationStore] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or TranslationStore()
        self.key_resolver = KeyResolver(self.store, self.settings)
        self.nesting = NestingResolver(self.settings, self._translate_key)
        logger.info(
            "initialized_translator",
            language=self.settings.language,
            fallback_language=self.settings.fallback_language,
        )

    def loader(self) -> Loader:
        """Return a new Loader bound to this translator."""
        return Loader(self)

    def load(self, language: str, namespace: str, document: Dict[str, Any]) -> None:
        """Store ``document`` under ``(language, namespace)``, replacing any previous one.

        The first loaded namespace becomes the default namespace if none is set.
        """
        self.store.load(language, namespace, document)
        if self.settings.default_namespace is None:
            self.settings.default_namespace = namespace
            if self.settings.debug:
                logger.debug("default_namespace_initialized", namespace=namespace)

    def is_empty(self) -> bool:
        return self.store.is_empty()

    def available_languages(self) -> List[str]:
        """Get loaded language codes (normalized)."""
        return self.store.languages()

    def t(
        self,
        *keys: str,
        count: Optional[Union[int, float]] = None,
        variables: Optional[Dict[str, Any]] = None,
        operation: Optional[Operation] = None,
    ) -> Optional[str]:
        """Translate the first resolvable key.

        Args:
            *keys: Candidate keys, tried in order.
            count: Optional count selecting the singular or plural form.
            variables: Optional values for ``{{name}}`` placeholders.
            operation: Explicit operation; overrides ``count`` and ``variables``.

        Returns:
            Translated string, or None if no key resolved.

        Raises:
            NestingTooDeepError: If reuse tokens nest past ``max_nesting_depth``.
        """
        if operation is None:
            operation = self.build_operation(count=count, variables=variables)
        return self.translate(keys, operation)

    def build_operation(
        self,
        count: Optional[Union[int, float]] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Optional[Operation]:
        """Build the operation implied by a count and/or variables."""
        plural = None
        if count is not None:
            plural = Plural(
                count,
                plural_suffix=self.settings.plural_suffix,
                singular_suffix=self.settings.singular_suffix,
            )
        interpolation = None
        if variables:
            interpolation = Interpolation(
                variables,
                prefix=self.settings.interpolation_prefix,
                suffix=self.settings.interpolation_suffix,
            )
        if plural is not None and interpolation is not None:
            return Composite(plural, interpolation)
        return plural or interpolation

    def translate(
        self,
        keys: Union[str, Sequence[str]],
        operation: Optional[Operation] = None,
    ) -> Optional[str]:
        """Resolve the first of ``keys`` that has a value.

        Args:
            keys: A key or an ordered sequence of candidate keys.
            operation: Optional operation applied around each lookup.

        Returns:
            Fully resolved string, or None if no key resolved.
        """
        if isinstance(keys, str):
            keys = [keys]
        return self._translate(keys, operation, 0)

    def exists(self, key: str) -> bool:
        """Check whether ``key`` has a raw value (no operation, no nesting)."""
        return self.key_resolver.resolve(key) is not None

    def _translate_key(
        self, key: str, operation: Optional[Operation], depth: int
    ) -> Optional[str]:
        return self._translate([key], operation, depth)

    def _translate(
        self, keys: Sequence[str], operation: Optional[Operation], depth: int
    ) -> Optional[str]:
        if depth > self.settings.max_nesting_depth:
            key = keys[0] if keys else None
            logger.error("nesting_too_deep", key=key, depth=depth)
            raise NestingTooDeepError(key, depth)

        for key in keys or []:
            raw = self.key_resolver.resolve(key, operation)
            if raw is not None:
                return self.nesting.render(raw, operation, depth)
            if self.settings.debug:
                logger.warning(
                    "translation_not_found",
                    key=key,
                    language=self.settings.language,
                    fallback_language=self.settings.fallback_language,
                )
        return None

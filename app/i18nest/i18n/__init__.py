"""i18n pipeline - resolves dotted keys to localized strings.

Main components:
- models: TranslationStore and language code helpers
- operations: Plural, Interpolation and Composite lookup operations
- resolvers: KeyResolver with namespace and language fallback handling
- nesting: NestingResolver for reuse tokens such as ``$t(app.name)``
- translator: Translator service
- loader: Loader builder and YAMLTranslationLoader
- validators: is_candidate_key
"""

from i18nest.i18n.exceptions import (
    DocumentParseError,
    I18nError,
    NestingTooDeepError,
)
from i18nest.i18n.factory import create_translator, get_translator
from i18nest.i18n.loader import Loader, YAMLTranslationLoader
from i18nest.i18n.models import (
    TranslationStore,
    language_candidates,
    normalize_language,
)
from i18nest.i18n.nesting import NestingResolver
from i18nest.i18n.operations import (
    Composite,
    Interpolation,
    Operation,
    Plural,
    combine,
)
from i18nest.i18n.resolvers import KeyResolver
from i18nest.i18n.translator import Translator
from i18nest.i18n.validators import is_candidate_key

__all__ = [
    "I18nError",
    "DocumentParseError",
    "NestingTooDeepError",
    "TranslationStore",
    "normalize_language",
    "language_candidates",
    "Operation",
    "Plural",
    "Interpolation",
    "Composite",
    "combine",
    "KeyResolver",
    "NestingResolver",
    "Translator",
    "Loader",
    "YAMLTranslationLoader",
    "is_candidate_key",
    "create_translator",
    "get_translator",
]

"""Factory functions for creating translators."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from i18nest.configuration import I18nSettings
from i18nest.i18n.loader import YAMLTranslationLoader
from i18nest.i18n.translator import Translator
from i18nest.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    settings: Optional[I18nSettings] = None,
) -> Translator:
    """Create a Translator, optionally loading a directory of translation files.

    Args:
        translations_dir: Directory of ``<namespace>.<language>.yml`` files.
        settings: Settings to use (default: the process-wide settings).

    Returns:
        Translator: Configured translator instance

    Raises:
        FileNotFoundError: If translations_dir does not exist.
        DocumentParseError: If a translation file cannot be parsed.

    Usage:
        translator = create_translator(Path("locales"))
        translator.t("common:app.name")
    """
    translator = Translator(settings=settings)
    if translations_dir is not None:
        YAMLTranslationLoader(translations_dir).load_all(translator)
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            languages=translator.available_languages(),
        )
    return translator


@lru_cache
def get_translator() -> Translator:
    """Get the process-wide translator, bound to the process-wide settings."""
    return Translator()

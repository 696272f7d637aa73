"""Translation loading.

``Loader`` is the builder that hands one parsed payload to a translator.
``YAMLTranslationLoader`` discovers payload files in a directory and feeds
each through a Loader.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from i18nest.i18n.documents import parse_document
from i18nest.i18n.exceptions import DocumentParseError, I18nError
from i18nest.logging import get_module_logger

if TYPE_CHECKING:
    from i18nest.i18n.translator import Translator

logger = get_module_logger()

DEFAULT_NAMESPACE = "DEFAULT_NAMESPACE"


class Loader:
    """Builder loading one (language, namespace) payload into a translator.

    Example:
        translator.loader().from_text(text).namespace("common").lang("fr_CA").load()

    An unset language defaults to ``settings.language``. An unset namespace
    defaults to ``settings.default_namespace``, or ``DEFAULT_NAMESPACE``.
    """

    def __init__(self, translator: "Translator"):
        self._translator = translator
        self._document: Optional[Dict[str, Any]] = None
        self._namespace: Optional[str] = None
        self._language: Optional[str] = None

    def from_text(self, text: str) -> "Loader":
        """Parse ``text`` as the payload.

        Raises:
            DocumentParseError: If the text is not a valid document.
        """
        return self.from_document(parse_document(text))

    def from_document(self, document: Dict[str, Any]) -> "Loader":
        """Use an already parsed mapping as the payload."""
        if not isinstance(document, dict):
            raise DocumentParseError(
                f"Translation document must be a mapping, got {type(document).__name__}"
            )
        self._document = document
        return self

    def namespace(self, namespace: Optional[str]) -> "Loader":
        self._namespace = namespace
        return self

    def lang(self, language: Optional[str]) -> "Loader":
        self._language = language
        return self

    def load(self) -> None:
        """Store the payload, replacing any previous one for the same language and namespace.

        Raises:
            I18nError: If no payload was given or no language can be determined.
        """
        if self._document is None:
            raise I18nError("No document to load; call from_text() or from_document()")

        settings = self._translator.settings
        language = self._language or settings.language
        if not language:
            raise I18nError("No language to load the document under")
        namespace = self._namespace or settings.default_namespace or DEFAULT_NAMESPACE

        self._translator.load(language, namespace, self._document)
        if settings.debug:
            logger.debug(
                "loaded_document",
                language=language,
                namespace=namespace,
                key_count=len(self._document),
            )


class YAMLTranslationLoader:
    """Loader for translation files in a directory.

    Expects files named ``<namespace>.<language>.yml`` (``.yaml`` and
    ``.json`` are accepted too), e.g. ``common.en_US.yml``.

    Attributes:
        translations_dir: Path to directory containing translation files.
    """

    FILE_SUFFIXES = (".yml", ".yaml", ".json")

    def __init__(self, translations_dir: Path):
        """Initialize the directory loader.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        if not self.translations_dir.is_dir():
            raise FileNotFoundError(
                f"Translations directory not found: {self.translations_dir}"
            )
        logger.info(
            "initialized_yaml_loader", translations_dir=str(self.translations_dir)
        )

    def discover(self) -> List[Tuple[str, str, Path]]:
        """List ``(namespace, language, path)`` for every translation file, sorted by name."""
        found = []
        for path in sorted(self.translations_dir.iterdir()):
            if not path.is_file() or path.suffix not in self.FILE_SUFFIXES:
                continue
            # "common.en_US.yml" -> ("common", "en_US")
            parts = path.stem.rsplit(".", 1)
            if len(parts) != 2 or not all(parts):
                logger.warning("skipped_translation_file", file=str(path))
                continue
            found.append((parts[0], parts[1], path))
        return found

    def load_all(self, translator: "Translator") -> List[Tuple[str, str]]:
        """Load every discovered file into ``translator``.

        Returns:
            ``(language, namespace)`` pairs loaded, in load order.

        Raises:
            DocumentParseError: If a file cannot be parsed; files loaded
                before it stay loaded.
        """
        loaded = []
        for namespace, language, path in self.discover():
            text = path.read_text(encoding="utf-8")
            try:
                translator.loader().from_text(text).namespace(namespace).lang(
                    language
                ).load()
            except DocumentParseError as e:
                logger.error("document_parse_error", file=str(path), error=str(e))
                raise DocumentParseError(f"Failed to parse {path}: {e}") from e
            loaded.append((language, namespace))

        logger.info(
            "loaded_translations",
            translations_dir=str(self.translations_dir),
            file_count=len(loaded),
        )
        return loaded

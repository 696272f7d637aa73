"""Translation models for the i18n pipeline.

Defines the translation tree store and language code helpers.
"""

import copy
import threading
from typing import Any, Dict, List, Optional, Sequence

from i18nest.i18n.documents import lookup_child

LANGUAGE_REGION_SEPARATOR = "_"
ALTERNATE_REGION_SEPARATOR = "-"


def normalize_language(language: str) -> str:
    """Normalize a language code to its underscore form ("en-US" -> "en_US")."""
    return language.replace(ALTERNATE_REGION_SEPARATOR, LANGUAGE_REGION_SEPARATOR)


def language_candidates(language: Optional[str]) -> List[str]:
    """List a language code followed by its region-stripped variants.

    Example:
        >>> language_candidates("zh-Hant-TW")
        ['zh_Hant_TW', 'zh_Hant', 'zh']

    Args:
        language: Language code, possibly with region suffixes.

    Returns:
        Candidate codes from most to least specific; empty if language is unset.
    """
    if not language:
        return []
    current = normalize_language(language)
    candidates = [current]
    index = current.rfind(LANGUAGE_REGION_SEPARATOR)
    while index > 0:
        current = current[:index]
        candidates.append(current)
        index = current.rfind(LANGUAGE_REGION_SEPARATOR)
    return candidates


class TranslationStore:
    """In-memory translation tree: language -> namespace -> nested keys -> leaf.

    The tree is keyed by normalized language codes. Each (language,
    namespace) payload is replaced as a whole on load, never merged.
    Access is guarded by a re-entrant lock so loads may run while other
    threads translate.

    Attributes:
        tree: The underlying nested dict. Read it only through the store.
    """

    def __init__(self):
        self.tree: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.RLock()

    def load(self, language: str, namespace: str, document: Dict[str, Any]) -> None:
        """Insert or replace the subtree at ``[language][namespace]``.

        Args:
            language: Language code; normalized before storage.
            namespace: Namespace the document is stored under.
            document: Parsed document mapping. A deep copy is stored.
        """
        snapshot = copy.deepcopy(document)
        with self._lock:
            language_tree = self.tree.setdefault(normalize_language(language), {})
            language_tree[namespace] = snapshot

    def is_empty(self) -> bool:
        """Return True if no language has been loaded."""
        with self._lock:
            return not self.tree

    def languages(self) -> List[str]:
        """Return loaded language codes in load order."""
        with self._lock:
            return list(self.tree.keys())

    def namespaces(self, language: str) -> List[str]:
        """Return namespaces loaded for ``language`` (exact code only)."""
        with self._lock:
            return list(self.tree.get(normalize_language(language), {}).keys())

    def lookup(
        self, language: str, namespace: str, segments: Sequence[str]
    ) -> Optional[str]:
        """Walk ``segments`` under ``[language][namespace]``.

        Any absent segment, or an intermediate node that is not a mapping,
        is a miss. The walk must end on a string leaf.

        Returns:
            The leaf string, or None on a miss.
        """
        with self._lock:
            node = lookup_child(self.tree.get(language), namespace)
            for segment in segments:
                node = lookup_child(node, segment)
                if node is None:
                    return None
        if isinstance(node, str):
            return node
        return None

"""Hierarchical document helpers.

Translation payloads and reuse-token options are parsed with PyYAML's safe
loader, which also accepts JSON text.
"""

from typing import Any, Dict, Optional

import yaml

from i18nest.i18n.exceptions import DocumentParseError


def parse_document(text: str) -> Dict[str, Any]:
    """Parse document text into a tree of string-keyed nodes.

    Args:
        text: YAML or JSON text whose root is a mapping.

    Returns:
        Parsed mapping.

    Raises:
        DocumentParseError: If the text is not valid or its root is not a mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentParseError(f"Failed to parse translation document: {e}") from e
    if not isinstance(data, dict):
        raise DocumentParseError(
            f"Translation document root must be a mapping, got {type(data).__name__}"
        )
    return data


def lookup_child(node: Any, key: str) -> Optional[Any]:
    """Return ``node[key]`` when ``node`` is a mapping, else None."""
    if isinstance(node, dict):
        return node.get(key)
    return None

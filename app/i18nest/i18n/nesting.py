"""Nested reuse resolution.

A translation value may reuse other keys through reuse tokens, by default
``$t(key)``. A token may carry options after a comma, and a ``count``
option selects the singular or plural form of the reused key::

    "You have $t(inbox.message, {\"count\": 3})"

Tokens are substituted one distinct token text at a time until no token is
left. Resolving a reused key goes back through the translator, so reused
values are themselves nested-resolved; the depth of that recursion is
bounded by ``max_nesting_depth``.
"""

from typing import Callable, Optional, Tuple, Union

from i18nest.configuration import I18nSettings
from i18nest.i18n.documents import parse_document
from i18nest.i18n.exceptions import DocumentParseError, NestingTooDeepError
from i18nest.i18n.operations import Operation, Plural, combine
from i18nest.logging import get_module_logger

logger = get_module_logger()

OPTIONS_SEPARATOR = ","
COUNT_OPTION = "count"

TranslateKey = Callable[[str, Optional[Operation], int], Optional[str]]


class NestingResolver:
    """Rewrites raw values by substituting their reuse tokens.

    Attributes:
        settings: Settings providing reuse delimiters and plural suffixes.
        translate_key: Callback resolving one key with an operation at a
            given nesting depth.
    """

    def __init__(self, settings: I18nSettings, translate_key: TranslateKey):
        self.settings = settings
        self.translate_key = translate_key

    def render(self, raw: str, operation: Optional[Operation] = None, depth: int = 0) -> str:
        """Post-process ``raw`` and substitute its reuse tokens until none change.

        The operation's Post capability is applied again on every pass that
        changed the value, so values produced by substitution are
        post-processed too.

        Raises:
            NestingTooDeepError: If the value keeps changing past the depth ceiling.
        """
        value = raw
        passes = 0
        while True:
            if operation is not None and operation.post:
                value = operation.postprocess(value)
            substituted = self.substitute(value, operation, depth)
            if substituted is None:
                return value
            passes += 1
            if passes > self.settings.max_nesting_depth:
                raise NestingTooDeepError(raw, depth + passes)
            value = substituted

    def substitute(
        self, raw: str, operation: Optional[Operation] = None, depth: int = 0
    ) -> Optional[str]:
        """Replace every reuse token in ``raw``.

        Each pass uses the operation passed in, never one derived from an
        earlier token's count.

        Returns:
            The rewritten string, or None if nothing was replaced.
        """
        result = None
        current = raw
        while True:
            updated = self.substitute_once(current, operation, depth)
            if updated is None:
                return result
            result = current = updated

    def substitute_once(
        self, raw: str, operation: Optional[Operation] = None, depth: int = 0
    ) -> Optional[str]:
        """Replace the first reuse token (and identical copies of it) in ``raw``.

        Returns:
            The rewritten string, or None if there is no token or the
            replacement left the string unchanged.
        """
        if not raw or not self.settings.nesting_enabled:
            return None
        prefix = self.settings.reuse_prefix
        suffix = self.settings.reuse_suffix

        start = raw.find(prefix)
        if start < 0:
            return None
        end = raw.find(suffix, start + len(prefix))
        if end < 0:
            return None

        token = raw[start : end + len(suffix)]
        inner = raw[start + len(prefix) : end]

        key, nested_operation = self.extract_count(inner, operation, depth)
        replacement = self.translate_key(key, nested_operation, depth + 1)
        if replacement is None:
            if self.settings.debug:
                logger.debug("reuse_target_missing", token=token, key=key)
            replacement = ""

        updated = raw.replace(token, replacement)
        if updated == raw:
            return None
        return updated

    def extract_count(
        self, inner: str, operation: Optional[Operation], depth: int = 0
    ) -> Tuple[str, Optional[Operation]]:
        """Split a token body into its key and the operation to resolve it with.

        Commas are tried left to right. The first one followed by options
        with a usable numeric ``count`` wins; the text before it is the key.
        Commas followed by text that does not parse are skipped.

        Returns:
            ``(key, operation)``; the unchanged body and operation if no
            count applies.
        """
        index = inner.find(OPTIONS_SEPARATOR)
        while 0 < index < len(inner) - 1:
            plural = self.parse_count(inner[index + 1 :], operation, depth)
            if plural is not None:
                return inner[:index], combine(plural, operation)
            index = inner.find(OPTIONS_SEPARATOR, index + 1)
        return inner, operation

    def parse_count(
        self, options_text: str, operation: Optional[Operation], depth: int = 0
    ) -> Optional[Plural]:
        """Build a Plural from the ``count`` option in ``options_text``, if any.

        Options must be a braced mapping, e.g. ``{"count": 3}``.
        """
        if not options_text.lstrip().startswith("{"):
            return None
        try:
            options = parse_document(options_text)
        except DocumentParseError:
            return None

        count = options.get(COUNT_OPTION)
        count_text = "" if count is None else str(count)
        if not count_text:
            return None

        # The count may itself be a reuse token
        resolved = self.substitute(count_text, operation, depth)
        if resolved:
            count_text = resolved

        number = parse_number(count_text)
        if number is None:
            if self.settings.debug:
                logger.debug("count_not_numeric", count=count_text)
            return None

        return Plural(
            number,
            plural_suffix=self.settings.plural_suffix,
            singular_suffix=self.settings.singular_suffix,
        )


def parse_number(text: str) -> Optional[Union[int, float]]:
    """Parse ``text`` as an int, else a float.

    Digit separators and surrounding whitespace are rejected.

    Returns:
        The number, or None if ``text`` is not numeric.
    """
    if "_" in text or text.strip() != text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None

"""Translation settings."""

from typing import Optional

from pydantic import Field

from i18nest.configuration.base import LibrarySettings


class I18nSettings(LibrarySettings):
    """Settings consulted by every component of the translation pipeline.

    Settings are created once per session and changed only by explicit
    attribute assignment. The only implicit change is ``default_namespace``,
    which the loader fills in from the first loaded payload when unset.

    Environment Variables:
        I18N_LANGUAGE: Active language (default: "en")
        I18N_FALLBACK_LANGUAGE: Language consulted when the active one misses
        I18N_DEFAULT_NAMESPACE: Namespace used for keys without a prefix
        I18N_KEY_SEPARATOR: Separator between key path segments (default: ".")
        I18N_NS_SEPARATOR: Separator between namespace and key (default: ":")
        I18N_REUSE_PREFIX / I18N_REUSE_SUFFIX: Reuse token delimiters
            (default: "$t(" and ")"); an empty value disables nesting
        I18N_PLURAL_SUFFIX / I18N_SINGULAR_SUFFIX: Suffixes appended to a key
            by pluralization (default: "_plural" and "")
        I18N_INTERPOLATION_PREFIX / I18N_INTERPOLATION_SUFFIX: Variable
            placeholder delimiters (default: "{{" and "}}")
        I18N_MAX_NESTING_DEPTH: Ceiling for nested reuse resolution (default: 32)
        I18N_DEBUG: Emit diagnostic logs for misses (default: False)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        PREFIX: Environment prefix; empty means production rendering

    Example:
        ```python
        from i18nest.configuration import get_settings

        settings = get_settings()
        settings.language = "fr_CA"
        settings.fallback_language = "en"
        ```
    """

    language: Optional[str] = Field(default="en", alias="I18N_LANGUAGE")
    fallback_language: Optional[str] = Field(
        default=None, alias="I18N_FALLBACK_LANGUAGE"
    )
    default_namespace: Optional[str] = Field(
        default=None, alias="I18N_DEFAULT_NAMESPACE"
    )

    key_separator: Optional[str] = Field(default=".", alias="I18N_KEY_SEPARATOR")
    ns_separator: Optional[str] = Field(default=":", alias="I18N_NS_SEPARATOR")
    reuse_prefix: Optional[str] = Field(default="$t(", alias="I18N_REUSE_PREFIX")
    reuse_suffix: Optional[str] = Field(default=")", alias="I18N_REUSE_SUFFIX")

    plural_suffix: str = Field(default="_plural", alias="I18N_PLURAL_SUFFIX")
    singular_suffix: str = Field(default="", alias="I18N_SINGULAR_SUFFIX")
    interpolation_prefix: str = Field(
        default="{{", alias="I18N_INTERPOLATION_PREFIX"
    )
    interpolation_suffix: str = Field(
        default="}}", alias="I18N_INTERPOLATION_SUFFIX"
    )

    max_nesting_depth: int = Field(
        default=32,
        ge=1,
        alias="I18N_MAX_NESTING_DEPTH",
        description="Maximum depth of nested reuse resolution",
    )
    debug: bool = Field(default=False, alias="I18N_DEBUG")

    LOG_LEVEL: str = "INFO"
    PREFIX: str = ""

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    @property
    def nesting_enabled(self) -> bool:
        """True when both reuse delimiters are non-empty."""
        return bool(self.reuse_prefix) and bool(self.reuse_suffix)

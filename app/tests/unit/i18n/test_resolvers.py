"""Tests for i18nest.i18n.resolvers module."""

import pytest

from i18nest.i18n.models import TranslationStore
from i18nest.i18n.operations import Plural
from i18nest.i18n.resolvers import KeyResolver
from tests.factories.i18n import make_settings


@pytest.fixture
def store():
    """Store with en/common and en/errors documents."""
    store = TranslationStore()
    store.load(
        "en",
        "common",
        {
            "app": {"name": "Widget"},
            "apple": "Apple",
            "apple_plural": "Apples",
            "pear": "Pear",
        },
    )
    store.load("en", "errors", {"not_found": "Not found"})
    return store


@pytest.fixture
def resolver(store):
    """KeyResolver with "common" as default namespace."""
    return KeyResolver(store, make_settings(default_namespace="common"))


class TestGetNamespace:
    """Tests for KeyResolver.get_namespace()."""

    def test_prefixed_key(self, resolver):
        """The text before the namespace separator is the namespace."""
        assert resolver.get_namespace("errors:not_found") == "errors"

    def test_unprefixed_key_uses_default(self, resolver):
        """Keys without a prefix use the default namespace."""
        assert resolver.get_namespace("app.name") == "common"

    def test_separator_at_start_uses_default(self, resolver):
        """A separator at index zero does not mark a namespace."""
        assert resolver.get_namespace(":app.name") == "common"

    def test_no_default_namespace(self, store):
        """Without a prefix or default namespace there is no namespace."""
        resolver = KeyResolver(store, make_settings())
        assert resolver.get_namespace("app.name") is None

    def test_custom_separator(self, store):
        """A custom namespace separator is honored."""
        resolver = KeyResolver(store, make_settings(ns_separator="::"))
        assert resolver.get_namespace("errors::not_found") == "errors"


class TestSplitKeyPath:
    """Tests for KeyResolver.split_key_path()."""

    def test_split_on_separator(self, resolver):
        """Keys are split on the key separator."""
        assert resolver.split_key_path("a.b.c") == ["a", "b", "c"]

    def test_custom_separator(self, store):
        """A custom key separator is honored."""
        resolver = KeyResolver(store, make_settings(key_separator="/"))
        assert resolver.split_key_path("a/b.c") == ["a", "b.c"]

    def test_empty_separator_fails(self, store):
        """An empty key separator cannot split and yields None."""
        resolver = KeyResolver(store, make_settings(key_separator="", debug=True))
        assert resolver.split_key_path("a.b") is None


class TestResolve:
    """Tests for KeyResolver.resolve()."""

    def test_default_namespace_key(self, resolver):
        """Unprefixed keys resolve in the default namespace."""
        assert resolver.resolve("app.name") == "Widget"

    def test_prefixed_key(self, resolver):
        """Prefixed keys resolve in their namespace."""
        assert resolver.resolve("errors:not_found") == "Not found"
        assert resolver.resolve("common:app.name") == "Widget"

    def test_default_namespace_text_prefix_stripped(self, resolver):
        """A key starting with the default namespace text drops it and one character."""
        assert resolver.resolve("common.app.name") == "Widget"

    def test_key_equal_to_namespace(self, resolver):
        """A key that is exactly the namespace is looked up as is."""
        assert resolver.resolve("common") is None

    def test_missing_key(self, resolver):
        """Unknown keys resolve to None."""
        assert resolver.resolve("app.missing") is None
        assert resolver.resolve("nowhere:app.name") is None

    def test_none_key(self, resolver):
        """None resolves to None."""
        assert resolver.resolve(None) is None

    def test_no_namespace_cannot_resolve(self, store):
        """Without a determinable namespace the key cannot resolve."""
        resolver = KeyResolver(store, make_settings())
        assert resolver.resolve("app.name") is None

    def test_key_separator_failure_is_a_miss(self, store):
        """A key that cannot be split is a miss, not an error."""
        resolver = KeyResolver(
            store, make_settings(default_namespace="common", key_separator="")
        )
        assert resolver.resolve("apple") is None

    def test_pre_operation_rewrites_key(self, resolver):
        """Pre capability rewrites the key before lookup."""
        assert resolver.resolve("apple", Plural(3)) == "Apples"
        assert resolver.resolve("apple", Plural(1)) == "Apple"

    def test_retry_after_miss(self, resolver):
        """A miss on the rewritten key retries with the after-miss key."""
        assert resolver.resolve("pear", Plural(3)) == "Pear"

    def test_pre_operation_on_prefixed_key(self, resolver):
        """Pre capability applies to the key with its namespace stripped."""
        assert resolver.resolve("common:apple", Plural(2)) == "Apples"


class TestLanguageFallback:
    """Tests for the language fallback chain."""

    def test_region_falls_back_to_base(self, store):
        """A region-specific language falls back to its base language."""
        resolver = KeyResolver(
            store, make_settings(language="en_US", default_namespace="common")
        )
        assert resolver.resolve("app.name") == "Widget"

    def test_hyphenated_active_language(self, store):
        """A hyphenated active language is normalized before lookup."""
        resolver = KeyResolver(
            store, make_settings(language="en-US", default_namespace="common")
        )
        assert resolver.resolve("app.name") == "Widget"

    def test_language_chain_order(self, store):
        """Active language variants come before fallback language variants."""
        resolver = KeyResolver(
            store, make_settings(language="fr_CA", fallback_language="en-GB")
        )
        assert resolver.language_chain() == ["fr_CA", "fr", "en_GB", "en"]

    def test_language_chain_without_duplicates(self, store):
        """Languages shared by both chains are listed once."""
        resolver = KeyResolver(
            store, make_settings(language="en_US", fallback_language="en")
        )
        assert resolver.language_chain() == ["en_US", "en"]

    def test_fallback_language_used_on_miss(self, fallback_translator):
        """The fallback language is consulted when the active chain misses."""
        assert fallback_translator.key_resolver.resolve("button.close") == "Close"

    def test_active_language_preferred(self, fallback_translator):
        """The most specific active language wins."""
        resolver = fallback_translator.key_resolver
        assert resolver.resolve("button.cancel") == "Annuler"
        assert resolver.resolve("button.save") == "Enregistrer"

    def test_fallback_region_before_base(self, fallback_translator):
        """A region-specific fallback language is tried before its base."""
        assert fallback_translator.key_resolver.resolve("colour") == "colour"

    def test_miss_in_region_subtree_falls_back(self):
        """A loaded region subtree that lacks the key does not stop the chain."""
        store = TranslationStore()
        store.load("en_US", "common", {"other": "x"})
        store.load("en", "common", {"app": {"name": "Widget"}})
        resolver = KeyResolver(
            store, make_settings(language="en_US", default_namespace="common")
        )
        assert resolver.resolve("app.name") == "Widget"

    def test_no_language_configured(self, store):
        """With no active or fallback language nothing resolves."""
        resolver = KeyResolver(
            store, make_settings(language=None, default_namespace="common")
        )
        assert resolver.resolve("app.name") is None

import pytest

from tests.factories.i18n import make_settings


@pytest.fixture
def settings():
    """Fresh I18nSettings isolated from .env files."""
    return make_settings()


@pytest.fixture(autouse=True)
def clear_i18n_env(monkeypatch):
    """Keep I18N_* variables from the host environment out of tests."""
    for name in (
        "I18N_LANGUAGE",
        "I18N_FALLBACK_LANGUAGE",
        "I18N_DEFAULT_NAMESPACE",
        "I18N_KEY_SEPARATOR",
        "I18N_NS_SEPARATOR",
        "I18N_REUSE_PREFIX",
        "I18N_REUSE_SUFFIX",
        "I18N_DEBUG",
        "I18N_MAX_NESTING_DEPTH",
    ):
        monkeypatch.delenv(name, raising=False)

"""Feature-level fixtures for i18n tests."""

import json

import pytest
import yaml

from tests.factories.i18n import make_common_document, make_settings, make_translator


@pytest.fixture
def plural_settings():
    """Settings with an explicit singular suffix."""
    return make_settings(singular_suffix="_singular", default_namespace="common")


@pytest.fixture
def translator(plural_settings):
    """Translator with the common document loaded under en/common."""
    return make_translator(settings=plural_settings)


@pytest.fixture
def fallback_translator():
    """Translator with en, en_GB and fr documents and en as fallback."""
    settings = make_settings(language="fr_CA", fallback_language="en_GB")
    documents = {
        ("en", "common"): {
            "button": {"save": "Save", "cancel": "Cancel", "close": "Close"},
            "colour": "color",
        },
        ("en-GB", "common"): {"colour": "colour"},
        ("fr", "common"): {"button": {"save": "Enregistrer"}},
        ("fr_CA", "common"): {"button": {"cancel": "Annuler"}},
    }
    return make_translator(documents=documents, settings=settings)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - common.en.yml
    - common.fr.yml
    - errors.en.json
    - README.md (ignored)
    """
    with open(tmp_path / "common.en.yml", "w") as f:
        yaml.dump(make_common_document(), f)

    with open(tmp_path / "common.fr.yml", "w") as f:
        yaml.dump({"app": {"name": "Gadget"}, "greeting": "Bonjour $t(app.name)"}, f)

    with open(tmp_path / "errors.en.json", "w") as f:
        json.dump({"not_found": "Not found: $t(common:app.name)"}, f)

    (tmp_path / "README.md").write_text("not a translation file")
    return tmp_path

"""
Unit tests for translator dependency providers
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from textbank.config.settings import ApplicationSettings, TranslationSettings, get_settings
from textbank.dependencies import TranslatorDep, create_translator
from textbank.i18n.middleware import install_language_middleware
from textbank.i18n.translator import Translator


@pytest.fixture
def app_settings(lang_dir):
    return ApplicationSettings(
        translations=TranslationSettings(root_folder=str(lang_dir), reference_language="en")
    )


def test_create_translator_uses_settings(app_settings, lang_dir):
    translator = create_translator(app_settings, language_provider=lambda: "sv-SE")

    assert isinstance(translator, Translator)
    assert translator.reference_language == "en"
    assert translator.text("Errors/Required") == "[/Errors/Required]"
    assert (lang_dir / "en_website.xml").exists()


def test_create_translator_with_custom_storage(app_settings):
    class RecordingStorage:
        def __init__(self):
            self.saved = []

        def exists(self, path):
            return False

        def create_directory(self, path):
            pass

        def load(self, path):
            return self.saved[-1][0]

        def save(self, tree, path):
            self.saved.append((tree, path))

    storage = RecordingStorage()
    translator = create_translator(app_settings, storage=storage)

    assert translator.text_in("en", "Title", "Welcome") == "Welcome"
    # One save for the new file, one for the inserted leaf
    assert len(storage.saved) == 2


@pytest.mark.unit
def test_translator_dependency_in_request(app_settings, write_language_file):
    write_language_file("sv-SE", "<Home><Greeting>Hej {0}</Greeting></Home>")

    app = FastAPI()
    install_language_middleware(app)
    app.dependency_overrides[get_settings] = lambda: app_settings

    @app.get("/greeting")
    def greeting(translator: TranslatorDep):
        return {"message": translator.text("Home/Greeting", "Hello {0}", ["Ada"])}

    client = TestClient(app)

    assert client.get("/greeting", headers={"Accept-Language": "sv-SE"}).json() == {
        "message": "Hej Ada"
    }
    assert client.get("/greeting", headers={"Accept-Language": "de"}).json() == {
        "message": "Hello Ada"
    }


@pytest.mark.parametrize(
    "overrides,expected",
    [({"log_level": "ERROR"}, logging.ERROR), ({"debug": True, "log_level": "ERROR"}, logging.DEBUG)],
)
def test_create_translator_applies_log_settings(lang_dir, overrides, expected):
    package_logger = logging.getLogger("textbank")
    initial_level = package_logger.level
    settings = ApplicationSettings(
        translations=TranslationSettings(root_folder=str(lang_dir)), **overrides
    )
    try:
        create_translator(settings)
        assert package_logger.level == expected
    finally:
        package_logger.setLevel(initial_level)

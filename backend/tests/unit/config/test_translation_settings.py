"""
Unit tests for translation settings
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from textbank.config.settings import (
    ApplicationSettings,
    TranslationSettings,
    get_settings,
    reload_settings,
)


class TestTranslationSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ROOT_FOLDER", "FILE_PATTERN", "REFERENCE_LANGUAGE", "DEFAULT_LANGUAGE", "FILL_EMPTY_NODES"):
            monkeypatch.delenv(f"TRANSLATIONS_{name}", raising=False)

        settings = TranslationSettings()

        assert settings.root_folder == "lang"
        assert settings.file_pattern == "{0}_website.xml"
        assert settings.reference_language == "en"
        assert settings.default_language == "en"
        assert settings.fill_empty_nodes is True

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("TRANSLATIONS_ROOT_FOLDER", "/srv/site/lang")
        monkeypatch.setenv("TRANSLATIONS_REFERENCE_LANGUAGE", "sv")
        monkeypatch.setenv("TRANSLATIONS_FILL_EMPTY_NODES", "false")

        settings = TranslationSettings()

        assert settings.root_folder == "/srv/site/lang"
        assert settings.reference_language == "sv"
        assert settings.fill_empty_nodes is False

    def test_file_path_for(self):
        settings = TranslationSettings(root_folder="site/lang")
        assert settings.file_path_for("sv-SE") == Path("site/lang") / "sv-SE_website.xml"

    @pytest.mark.parametrize("pattern", ["website.xml", "lang/{0}.xml", "..\\{0}.xml"])
    def test_invalid_file_pattern(self, pattern):
        with pytest.raises(ValidationError):
            TranslationSettings(file_pattern=pattern)

    def test_blank_reference_language(self):
        with pytest.raises(ValidationError):
            TranslationSettings(reference_language="  ")


class TestApplicationSettings:
    def test_nested_translations(self):
        settings = ApplicationSettings(translations=TranslationSettings(root_folder="x"))
        assert settings.translations.root_folder == "x"
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_log_level_is_normalized(self):
        assert ApplicationSettings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            ApplicationSettings(log_level="LOUD")

    def test_reload_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("DEBUG", "true")
        try:
            reloaded = reload_settings()
            assert reloaded is get_settings()
            assert reloaded.log_level == "WARNING"
            assert reloaded.debug is True
        finally:
            monkeypatch.delenv("LOG_LEVEL")
            monkeypatch.delenv("DEBUG")
            reload_settings()

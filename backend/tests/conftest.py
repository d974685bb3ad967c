from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

# Keep a developer's .env out of the settings under test.
os.environ.setdefault("DOCKER_CONTAINER", "true")

from textbank.config.settings import TranslationSettings  # noqa: E402
from textbank.i18n.fallback_writer import FallbackWriter  # noqa: E402
from textbank.i18n.storage import FileDocumentStorage  # noqa: E402
from textbank.i18n.store import TranslationStore  # noqa: E402
from textbank.i18n.translator import Translator  # noqa: E402


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture
def lang_dir(tmp_path: Path) -> Path:
    return tmp_path / "lang"


@pytest.fixture
def translation_settings(lang_dir: Path) -> TranslationSettings:
    return TranslationSettings(root_folder=str(lang_dir))


@pytest.fixture
def storage() -> FileDocumentStorage:
    return FileDocumentStorage()


@pytest.fixture
def store(storage, translation_settings) -> TranslationStore:
    return TranslationStore(storage, translation_settings)


@pytest.fixture
def writer(storage, translation_settings) -> FallbackWriter:
    return FallbackWriter(storage, translation_settings)


@pytest.fixture
def translator(store, writer) -> Translator:
    return Translator(store, writer, reference_language="en", language_provider=lambda: "en")


@pytest.fixture
def write_language_file(lang_dir: Path):
    """Write a hand-maintained language file, the way a translator would."""

    def _write(language: str, body: str, *, raw: bool = False) -> Path:
        lang_dir.mkdir(parents=True, exist_ok=True)
        path = lang_dir / f"{language}_website.xml"
        if raw:
            content = body
        else:
            content = (
                '<?xml version="1.0" encoding="utf-8" standalone="yes"?>\n'
                "<languages>\n"
                f'  <language name="Test" id="{language.lower()}">\n'
                f"{body}\n"
                "  </language>\n"
                "</languages>\n"
            )
        path.write_text(content, encoding="utf-8")
        return path

    return _write

"""
Streamlit page smoke tests using Streamlit's AppTest harness.
"""

import importlib
from pathlib import Path

import pytest

from plagiarism_detector.core.cosine_similarity import compare_texts

testing = pytest.importorskip("streamlit.testing.v1")

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")

pytestmark = pytest.mark.usefixtures("restore_root_logging")


@pytest.fixture
def app(clean_env):
    clean_env.setenv("LOG_TO_FILE", "false")
    clean_env.setenv("LOG_LEVEL", "WARNING")
    clean_env.setenv("PLAGIARISM_THRESHOLD", "80")
    at = testing.AppTest.from_file(APP_PATH, default_timeout=30)
    return at.run()


def test_renders_without_errors(app):
    assert not app.exception
    assert app.title[0].value == "🔎 Plagiarism Detector"


def test_threshold_defaults_to_configured_value(app):
    assert app.sidebar.slider[0].value == 80.0


def test_requires_both_files(app):
    app.button[0].click().run()
    assert app.error[0].value == "Please select both files to compare."


@pytest.fixture
def app_module(clean_env):
    clean_env.setenv("LOG_TO_FILE", "false")
    clean_env.setenv("LOG_LEVEL", "WARNING")
    return importlib.import_module("app")


def test_result_card_escapes_file_names(app_module):
    card = app_module.result_card_html(
        compare_texts("same words", "same words"),
        ("<script>alert(1)</script>.txt", "notes & drafts.txt"),
    )

    assert "<script>" not in card
    assert "&lt;script&gt;alert(1)&lt;/script&gt;.txt" in card
    assert "notes &amp; drafts.txt" in card
    assert "Similarity: 100.00%" in card

import pytest

from plagiarism_detector.core.config import DEFAULT_THRESHOLD, DetectorSettings, load_settings
from plagiarism_detector.core.validation import ParameterValidationError


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings(environ={})
        assert settings == DetectorSettings()
        assert settings.threshold == DEFAULT_THRESHOLD == 70.0
        assert settings.max_file_size_mb is None

    def test_reads_values(self):
        settings = load_settings(environ={
            "PLAGIARISM_THRESHOLD": "82.5",
            "LOG_LEVEL": "debug",
            "LOG_DIR": "/var/log/checker",
            "STRUCTURED_LOGGING": "no",
            "LOG_TO_FILE": "0",
            "MAX_FILE_SIZE_MB": "2",
        })

        assert settings.threshold == 82.5
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == "/var/log/checker"
        assert settings.structured_logging is False
        assert settings.log_to_file is False
        assert settings.max_file_size_mb == 2.0

    def test_blank_size_limit_means_unlimited(self):
        assert load_settings(environ={"MAX_FILE_SIZE_MB": ""}).max_file_size_mb is None

    @pytest.mark.parametrize("environ", [
        {"PLAGIARISM_THRESHOLD": "seventy"},
        {"PLAGIARISM_THRESHOLD": "101"},
        {"MAX_FILE_SIZE_MB": "-1"},
        {"STRUCTURED_LOGGING": "maybe"},
    ])
    def test_invalid_values(self, environ):
        with pytest.raises(ParameterValidationError):
            load_settings(environ=environ)

    def test_reads_process_environment(self, clean_env):
        clean_env.setenv("PLAGIARISM_THRESHOLD", "55")
        assert load_settings(dotenv=False).threshold == 55.0

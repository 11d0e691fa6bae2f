"""Settings for the plagiarism checker, read from the environment and ``.env``."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .validation import ParameterValidator

DEFAULT_THRESHOLD = 70.0


@dataclass(frozen=True)
class DetectorSettings:
    threshold: float = DEFAULT_THRESHOLD
    log_level: str = "INFO"
    log_dir: str = "logs"
    structured_logging: bool = True
    log_to_file: bool = True
    # No limit unless configured; inputs are read fully into memory
    max_file_size_mb: Optional[float] = None


def load_settings(environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> DetectorSettings:
    """
    Build settings from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``
        dotenv: Whether to load a ``.env`` file into ``os.environ`` first

    Raises:
        ParameterValidationError: If a variable holds an invalid value
    """
    if environ is None:
        if dotenv:
            load_dotenv()
        environ = os.environ

    threshold = ParameterValidator.validate_threshold(
        environ.get("PLAGIARISM_THRESHOLD", DEFAULT_THRESHOLD)
    )

    max_size = environ.get("MAX_FILE_SIZE_MB")
    max_file_size_mb = None
    if max_size not in (None, ""):
        max_file_size_mb = ParameterValidator.validate_positive_float(max_size, "MAX_FILE_SIZE_MB", min_value=0.0)

    return DetectorSettings(
        threshold=threshold,
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        log_dir=environ.get("LOG_DIR", "logs"),
        structured_logging=ParameterValidator.validate_boolean(
            environ.get("STRUCTURED_LOGGING", "true"), "STRUCTURED_LOGGING"
        ),
        log_to_file=ParameterValidator.validate_boolean(environ.get("LOG_TO_FILE", "true"), "LOG_TO_FILE"),
        max_file_size_mb=max_file_size_mb,
    )

"""
Input validation and error types for the plagiarism checker.

Reading an input is the only way a comparison can fail; everything that
decodes to text produces a score, even if that score is 0.0.
"""

import inspect
from functools import wraps
from pathlib import Path
from typing import Any, Optional, Union


class ValidationError(Exception):
    """Base class for validation errors."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)


class FileValidationError(ValidationError):
    """Exception raised for file-related validation errors."""
    pass


class InputUnreadableError(FileValidationError):
    """
    One of the two inputs could not be opened or read.

    ``label`` says which input failed ("first", "second" or a caller-chosen
    name) so a front end can tell the user which file to fix.
    """

    def __init__(self, message: str, label: str = None, path: Any = None):
        self.label = label
        self.path = path
        super().__init__(message, field=label, value=path)


class ParameterValidationError(ValidationError):
    """Exception raised for parameter validation errors."""
    pass


class FileValidator:
    """File checks applied before an input is read."""

    @staticmethod
    def validate_file_path(file_path: Union[str, Path],
                           label: str = "input",
                           max_size_mb: Optional[float] = None) -> Path:
        """
        Check that ``file_path`` names an existing regular file.

        Args:
            file_path: Path to the file
            label: Which input this is, used in error messages
            max_size_mb: Optional maximum file size in MB

        Returns:
            Path object

        Raises:
            InputUnreadableError: If the path is empty, missing, not a file
                or larger than ``max_size_mb``
        """
        if file_path is None or str(file_path) == "":
            raise InputUnreadableError(f"No path given for the {label} file", label=label, path=file_path)

        path = Path(file_path)

        try:
            if not path.exists():
                raise InputUnreadableError(f"The {label} file does not exist: {file_path}",
                                           label=label, path=path)
            if not path.is_file():
                raise InputUnreadableError(f"The {label} path is not a file: {file_path}",
                                           label=label, path=path)
            if max_size_mb is not None:
                size_mb = path.stat().st_size / (1024 * 1024)
                if size_mb > max_size_mb:
                    raise InputUnreadableError(
                        f"The {label} file is too large: {size_mb:.1f}MB (max: {max_size_mb}MB)",
                        label=label,
                        path=path
                    )
        except OSError as e:
            raise InputUnreadableError(f"Cannot access the {label} file {file_path}: {e}",
                                       label=label, path=path) from e

        return path


class ParameterValidator:
    """Parameter validation utilities."""

    @staticmethod
    def validate_positive_float(value: Any, field: str, min_value: float = 0.0,
                                max_value: Optional[float] = None) -> float:
        """Validate a bounded float parameter."""
        if isinstance(value, bool):
            raise ParameterValidationError(f"{field} must be a number, got bool", field=field, value=value)

        if not isinstance(value, (int, float)):
            try:
                value = float(value)
            except (ValueError, TypeError):
                raise ParameterValidationError(
                    f"{field} must be a number, got {type(value).__name__}",
                    field=field,
                    value=value
                )

        if value != value:
            raise ParameterValidationError(f"{field} must be a number, got NaN", field=field, value=value)

        if value < min_value:
            raise ParameterValidationError(
                f"{field} must be >= {min_value}, got {value}",
                field=field,
                value=value
            )

        if max_value is not None and value > max_value:
            raise ParameterValidationError(
                f"{field} must be <= {max_value}, got {value}",
                field=field,
                value=value
            )

        return float(value)

    @staticmethod
    def validate_threshold(value: Any) -> float:
        """A plagiarism threshold is a percentage between 0 and 100."""
        return ParameterValidator.validate_positive_float(value, "threshold", min_value=0.0, max_value=100.0)

    @staticmethod
    def validate_boolean(value: Any, field: str) -> bool:
        """Accept real booleans or the usual true/false spellings."""
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("0", "false", "no", "off"):
            return False
        raise ParameterValidationError(f"{field} must be a boolean, got {value!r}", field=field, value=value)


def validate_inputs(**validators):
    """
    Decorator to validate function inputs.

    Args:
        **validators: Dict mapping parameter names to validation functions
    """
    def decorator(func):
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for param_name, validator in validators.items():
                if param_name in bound_args.arguments:
                    value = bound_args.arguments[param_name]
                    try:
                        bound_args.arguments[param_name] = validator(value)
                    except ValidationError:
                        raise
                    except Exception as e:
                        raise ParameterValidationError(
                            f"Validation failed for {param_name}: {str(e)}",
                            field=param_name,
                            value=value
                        ) from e

            return func(*bound_args.args, **bound_args.kwargs)
        return wrapper
    return decorator

import pytest

from plagiarism_detector.core.validation import (
    FileValidator,
    InputUnreadableError,
    ParameterValidationError,
    ParameterValidator,
    ValidationError,
    validate_inputs,
)


class TestParameterValidator:

    @pytest.mark.parametrize("value,expected", [(0, 0.0), (70, 70.0), ("69.99", 69.99), (100.0, 100.0)])
    def test_valid_thresholds(self, value, expected):
        assert ParameterValidator.validate_threshold(value) == expected

    @pytest.mark.parametrize("value", [-0.01, 100.01, None, "abc", True])
    def test_invalid_thresholds(self, value):
        with pytest.raises(ParameterValidationError) as exc_info:
            ParameterValidator.validate_threshold(value)
        assert exc_info.value.field == "threshold"

    @pytest.mark.parametrize("value,expected", [("true", True), ("Yes", True), ("off", False), (False, False)])
    def test_booleans(self, value, expected):
        assert ParameterValidator.validate_boolean(value, "flag") is expected


class TestFileValidator:

    def test_existing_file(self, write_text):
        path = write_text("a.txt", "x")
        assert FileValidator.validate_file_path(str(path)) == path

    def test_error_names_the_input(self, tmp_path):
        with pytest.raises(InputUnreadableError) as exc_info:
            FileValidator.validate_file_path(tmp_path / "gone.txt", label="second")
        error = exc_info.value
        assert isinstance(error, ValidationError)
        assert error.label == error.field == "second"
        assert error.path == tmp_path / "gone.txt"


class TestValidateInputs:

    def test_replaces_argument_with_validated_value(self):
        @validate_inputs(threshold=ParameterValidator.validate_threshold)
        def echo(threshold=70.0):
            return threshold

        assert echo("80") == 80.0
        assert echo() == 70.0

    def test_wraps_unexpected_errors(self):
        def explode(value):
            raise RuntimeError("boom")

        @validate_inputs(value=explode)
        def echo(value):
            return value

        with pytest.raises(ParameterValidationError, match="Validation failed for value: boom"):
            echo(1)

import pytest

from bikiran_utils.api_resp import ValidationFailure
from bikiran_utils.core.validation import is_valid_reference_name, validate_inputs


class TestValidateInputs:
    def test_accepts_valid_values(self):
        validate_inputs(order_by="created_at", reference_name="trace-01_A")

    def test_accepts_nothing(self):
        validate_inputs()

    def test_rejects_order_by_injection(self):
        with pytest.raises(ValidationFailure) as exc_info:
            validate_inputs(order_by="id; drop table users")
        assert [e.field for e in exc_info.value.field_errors] == ["order_by"]

    def test_collects_all_errors(self):
        with pytest.raises(ValidationFailure) as exc_info:
            validate_inputs(order_by="1st", reference_name="has space")
        failure = exc_info.value
        assert failure.message == "Invalid request parameters"
        assert [e.field for e in failure.field_errors] == ["order_by", "reference_name"]

    def test_reference_name_length(self):
        with pytest.raises(ValidationFailure, match="Invalid request parameters") as exc_info:
            validate_inputs(reference_name="a" * 129)
        assert "longer than 128" in exc_info.value.field_errors[0].message


class TestIsValidReferenceName:
    @pytest.mark.parametrize("value", ["trace-01_A", "a" * 128])
    def test_valid(self, value):
        assert is_valid_reference_name(value) is True

    @pytest.mark.parametrize("value", ["", None, "a" * 129, "has space", "x<script>", "trace\n"])
    def test_invalid(self, value):
        assert is_valid_reference_name(value) is False

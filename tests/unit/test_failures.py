import pytest

from bikiran_utils.api_resp import ApiFailure, FieldError, NotFoundFailure, ValidationFailure, create_failure


class TestApiFailure:
    def test_is_exception_subclass(self):
        assert issubclass(ApiFailure, Exception)

    def test_message_preserved(self):
        err = ApiFailure("invalid state")
        assert err.message == "invalid state"
        assert str(err) == "invalid state"

    def test_defaults(self):
        err = ApiFailure("x")
        assert err.reference == ""
        assert err.field_errors == ()
        assert err.status_code == 400

    def test_raise_and_catch(self):
        with pytest.raises(ApiFailure, match="stock exhausted"):
            raise ApiFailure("stock exhausted")

    def test_none_message_becomes_empty(self):
        assert ApiFailure(None).message == ""


class TestCreateFailure:
    def test_reference_attached(self):
        err = create_failure("payment declined", "txn-881")
        assert err.message == "payment declined"
        assert err.reference == "txn-881"
        assert err.field_errors == ()

    def test_reference_optional(self):
        assert create_failure("payment declined").reference == ""


class TestFieldErrors:
    def test_accepts_mixed_inputs(self):
        err = ApiFailure.with_field_errors(
            "Invalid",
            [FieldError(field="a", message="x"), ("b", "y"), {"field": "c", "message": "z"}],
        )
        assert err.field_errors == (
            FieldError(field="a", message="x"),
            FieldError(field="b", message="y"),
            FieldError(field="c", message="z"),
        )

    def test_subclass_factory_keeps_type(self):
        err = ValidationFailure.with_field_errors("Invalid", [("name", "required")])
        assert isinstance(err, ValidationFailure)
        assert err.status_code == 422


class TestNotFoundFailure:
    def test_status(self):
        assert NotFoundFailure("missing").status_code == 404
        assert issubclass(NotFoundFailure, ApiFailure)

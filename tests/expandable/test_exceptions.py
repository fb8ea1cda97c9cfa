"""Tests for expandable reference exceptions."""

from stripe_bindings.expandable import DeserializationError
from stripe_bindings.shared.exceptions import StripeBindingsError


class TestDeserializationError:
    def test_with_field_path(self):
        """Should name the resource and field in the message."""
        error = DeserializationError(
            "Input should be a valid integer",
            resource_type="PaymentIntent",
            field_path="amount",
        )
        assert "PaymentIntent" in str(error)
        assert "'amount'" in str(error)
        assert error.code == "DESERIALIZATION_ERROR"
        assert error.details["field_path"] == "amount"
        assert error.details["reason"] == "Input should be a valid integer"

    def test_without_field_path(self):
        """An empty path should be allowed for whole-payload failures."""
        error = DeserializationError("malformed JSON", resource_type="Customer")
        assert error.field_path == ""
        assert str(error) == "Could not decode Customer: malformed JSON"

    def test_is_base_error(self):
        """Should be catchable as StripeBindingsError."""
        error = DeserializationError("bad", resource_type="SKU")
        assert isinstance(error, StripeBindingsError)

"""Tests for request parameter base models."""

import pytest
from pydantic import ValidationError

from stripe_bindings.checkout.params import CheckoutSessionParams
from stripe_bindings.params import RequestOptions, RequestParams


class TestRequestOptions:
    def test_defaults_unset(self):
        """All options should start unset."""
        options = RequestOptions()
        assert options.expand is None
        assert options.metadata is None
        assert options.extra is None
        assert options.idempotency_key is None
        assert options.stripe_account is None

    def test_rejects_unknown_fields(self):
        """Typos in option names should fail loudly."""
        with pytest.raises(ValidationError):
            RequestOptions(expnad=["customer"])


class TestRequestParams:
    def test_options_not_shared(self):
        """Each parameter object should get its own options."""
        first = RequestParams()
        second = RequestParams()
        first.add_expand("customer")
        assert second.options.expand is None

    def test_add_expand_appends(self):
        """Repeated add_expand calls should accumulate."""
        params = RequestParams()
        params.add_expand("customer")
        params.add_expand("payment_intent.customer")
        assert params.options.expand == ["customer", "payment_intent.customer"]

    def test_add_metadata(self):
        """Should collect metadata key/value pairs."""
        params = RequestParams()
        params.add_metadata("order_id", "6735")
        assert params.options.metadata == {"order_id": "6735"}

    def test_options_by_composition(self):
        """Options should be passable as a named field."""
        params = CheckoutSessionParams(options=RequestOptions(expand=["customer"]))
        assert params.options.expand == ["customer"]

    def test_rejects_unknown_params(self):
        """Undeclared parameters must go through add_extra."""
        with pytest.raises(ValidationError):
            CheckoutSessionParams(allow_promotion_codes=True)

"""
Tests for response classification.
"""

import pytest

from mundipagg_service.adapters.exceptions import MalformedResponseError, UnmappedTransportError
from mundipagg_service.adapters.mundipagg.classifier import (
    UNMAPPED_ERROR_CODE,
    authorization_from,
    classify_body,
    classify_failure,
    error_code_from,
    message_from,
    success_from,
)


class TestBodyHelpers:
    """Test the individual field extractors."""

    def test_minimal_paid_charge(self):
        body = {"status": "paid", "id": "ch_1"}

        assert success_from(body) is True
        assert authorization_from(body) == "ch_1"
        assert error_code_from(body) is None

    @pytest.mark.parametrize("status", ["pending", "paid", "processing", "voided"])
    def test_success_statuses(self, status):
        assert success_from({"status": status}) is True

    @pytest.mark.parametrize("status", ["failed", "canceled", "overpaid", None])
    def test_failure_statuses(self, status):
        assert success_from({"status": status}) is False
        assert error_code_from({"status": status}) == UNMAPPED_ERROR_CODE

    def test_message_prefers_top_level(self):
        body = {"message": "Charge not found", "last_transaction": {"acquirer_message": "ignored"}}

        assert message_from(body) == "Charge not found"

    def test_message_falls_back_to_acquirer(self):
        assert message_from({"last_transaction": {"acquirer_message": "Aprovado"}}) == "Aprovado"

    @pytest.mark.parametrize(
        "body",
        [{"status": "paid"}, {"last_transaction": {}}, {"last_transaction": None}],
    )
    def test_missing_message_is_malformed(self, body):
        with pytest.raises(MalformedResponseError):
            message_from(body)


class TestClassifyBody:
    """Test classification of 2xx bodies."""

    def test_paid_charge(self, charge_body):
        body = charge_body(status="paid", charge_id="ch_1")

        response = classify_body(body, test=True)

        assert response.success is True
        assert response.authorization == "ch_1"
        assert response.message == "Transação capturada com sucesso"
        assert response.params == body
        assert response.test is True
        assert response.error_code is None
        assert response.avs_code is None
        assert response.cvv_code is None

    def test_failed_charge(self, charge_body):
        body = charge_body(status="failed")
        body["last_transaction"]["acquirer_message"] = "Transação negada"

        response = classify_body(body)

        assert response.success is False
        assert response.message == "Transação negada"
        assert response.authorization == "ch_test123"
        assert response.error_code == UNMAPPED_ERROR_CODE

    def test_verification_codes(self, charge_body):
        body = charge_body()
        body["last_transaction"].update(avs_code="Y", cvv_code="M")

        response = classify_body(body)

        assert response.avs_code == "Y"
        assert response.cvv_code == "M"

    @pytest.mark.parametrize(
        "overrides",
        [{"message": {"a": 1}}, {"id": 12345}, {"message": ["declined"]}],
    )
    def test_wrong_field_types_are_malformed(self, charge_body, overrides):
        body = charge_body(status="canceled", **overrides)

        with pytest.raises(MalformedResponseError) as exc_info:
            classify_body(body)

        assert exc_info.value.body == body

    def test_non_object_body(self):
        with pytest.raises(MalformedResponseError):
            classify_body(["not", "a", "charge"])


class TestClassifyFailure:
    """Test status-code driven failures."""

    @pytest.mark.parametrize(
        "status_code,message",
        [
            (400, "Invalid request"),
            (401, "Invalid API key"),
            (404, "The requested resource does not exist"),
            (412, "Valid parameters but request failed"),
            (422, "Invalid parameters"),
            (500, "An internal error occurred"),
        ],
    )
    def test_mapped_status_codes(self, status_code, message):
        response = classify_failure(status_code, '{"message": "The request is invalid."}', test=True)

        assert response.success is False
        assert response.message == message
        assert response.params == {}
        assert response.authorization is None
        assert response.test is True
        assert response.error_code == UNMAPPED_ERROR_CODE

    @pytest.mark.parametrize("status_code", [418, 403, 429, 502, 503])
    def test_unmapped_status_codes_raise(self, status_code):
        with pytest.raises(UnmappedTransportError) as exc_info:
            classify_failure(status_code, "I'm a teapot")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.body == "I'm a teapot"

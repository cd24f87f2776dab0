import logging

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.providers.document_store.exceptions import (
    DocumentStoreError,
    DocumentStoreNotInitializedError,
)
from packages.payments.exceptions import (
    MissingAccessTokenError,
    TransactionLookupError,
)
from packages.payments.models.domain.transaction import TransactionRecord
from packages.payments.models.domain.webhook_result import WebhookResult
from packages.payments.services.webhook_service import PaymentWebhookService
from packages.users.exceptions import UnattributableTransactionError
from packages.users.models.domain.user_entitlement import EntitlementGrant

PAYMENT_BODY = {"type": "payment", "data": {"id": "555"}}


@pytest.fixture
def verifier():
    verifier = MagicMock()
    verifier.verify = AsyncMock(
        return_value=TransactionRecord(
            id="555", status="approved", payer={"email": "a@b.com"}
        )
    )
    return verifier


@pytest.fixture
def entitlement_service():
    service = MagicMock()
    service.grant_premium = AsyncMock(
        return_value=EntitlementGrant(
            user_id="a_b.com", email="a@b.com", transaction_id="555"
        )
    )
    return service


@pytest.fixture
def service(verifier, entitlement_service):
    return PaymentWebhookService(
        verifier=verifier, entitlement_service=entitlement_service
    )


class TestPaymentWebhookService:
    """Test PaymentWebhookService.handle outcomes."""

    async def test_approved_payment_is_granted(
        self, service, verifier, entitlement_service
    ):
        """Test that an approved payment grants premium."""
        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.GRANTED
        assert result.status_code == 200
        assert result.body == "ok"
        verifier.verify.assert_awaited_once_with("555")
        entitlement_service.grant_premium.assert_awaited_once()
        record = entitlement_service.grant_premium.await_args.args[0]
        assert record.id == "555"

    async def test_query_string_notification(self, service, verifier):
        """Test that IPN query-string notifications are processed."""
        result = await service.handle({}, {"topic": "payment", "id": "777"}, {})

        assert result is WebhookResult.GRANTED
        verifier.verify.assert_awaited_once_with("777")

    async def test_non_payment_event_is_ignored(
        self, service, verifier, entitlement_service
    ):
        """Test that other event types are acknowledged without work."""
        result = await service.handle({"type": "merchant_order"}, {}, {})

        assert result is WebhookResult.IGNORED
        assert result.status_code == 200
        assert result.body == "ignored"
        verifier.verify.assert_not_called()
        entitlement_service.grant_premium.assert_not_called()

    async def test_missing_id_is_ignored(self, service, verifier):
        """Test that a payment event without an id is ignored."""
        result = await service.handle({"type": "payment"}, None, {})

        assert result is WebhookResult.IGNORED
        verifier.verify.assert_not_called()

    async def test_secret_required_and_missing(self, verifier, entitlement_service):
        """Test that a configured secret rejects calls without it."""
        service = PaymentWebhookService(
            verifier=verifier,
            entitlement_service=entitlement_service,
            shared_secret="s3cret",
        )

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.UNAUTHORIZED
        assert result.status_code == 401
        assert result.body == "unauthorized"
        verifier.verify.assert_not_called()

    async def test_secret_required_and_present(self, verifier, entitlement_service):
        """Test that the correct secret header is accepted."""
        service = PaymentWebhookService(
            verifier=verifier,
            entitlement_service=entitlement_service,
            shared_secret="s3cret",
        )

        result = await service.handle(
            PAYMENT_BODY, {}, {"x-webhook-secret": "s3cret"}
        )

        assert result is WebhookResult.GRANTED

    async def test_ignored_before_authentication(self, verifier, entitlement_service):
        """Test that ignorable events are acknowledged even without the secret."""
        service = PaymentWebhookService(
            verifier=verifier,
            entitlement_service=entitlement_service,
            shared_secret="s3cret",
        )

        result = await service.handle({"type": "merchant_order"}, {}, {})

        assert result is WebhookResult.IGNORED

    async def test_missing_access_token(self, service, verifier, entitlement_service):
        """Test that a missing access token is a retryable failure."""
        verifier.verify.side_effect = MissingAccessTokenError("no token")

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.MISSING_ACCESS_TOKEN
        assert result.status_code == 500
        assert result.body == "missing access token"
        entitlement_service.grant_premium.assert_not_called()

    async def test_lookup_failure(self, service, verifier, entitlement_service):
        """Test that a provider lookup failure is a retryable failure."""
        verifier.verify.side_effect = TransactionLookupError(
            "not found", status_code=404, response_text='{"message":"not found"}'
        )

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.FETCH_FAILED
        assert result.status_code == 500
        assert result.body == "transaction fetch fail"
        entitlement_service.grant_premium.assert_not_called()

    @pytest.mark.parametrize(
        "status", ["pending", "in_process", "rejected", "refunded", None]
    )
    async def test_not_approved(self, service, verifier, entitlement_service, status):
        """Test that non-approved transactions are acknowledged without a grant."""
        verifier.verify.return_value = TransactionRecord(
            id="555", status=status, payer={"email": "a@b.com"}
        )

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.NOT_APPROVED
        assert result.status_code == 200
        assert result.body == "pending/not-approved"
        entitlement_service.grant_premium.assert_not_called()

    async def test_no_email(self, service, entitlement_service):
        """Test that an approved payment without an email is final."""
        entitlement_service.grant_premium.side_effect = UnattributableTransactionError(
            "555"
        )

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.MISSING_EMAIL
        assert result.status_code == 200
        assert result.body == "no payer email"

    async def test_store_failure_is_error(self, service, entitlement_service):
        """Test that a failed write is reported as a retryable error."""
        entitlement_service.grant_premium.side_effect = DocumentStoreError("boom")

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.ERROR
        assert result.status_code == 500
        assert result.body == "error"

    async def test_store_not_initialized_is_error(self, service, entitlement_service):
        """Test that an uninitialized store surfaces as an error response."""
        entitlement_service.grant_premium.side_effect = (
            DocumentStoreNotInitializedError("not initialized")
        )

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.ERROR

    async def test_unexpected_exception_is_error(self, service, verifier):
        """Test that nothing escapes handle()."""
        verifier.verify.side_effect = RuntimeError("unexpected")

        result = await service.handle(PAYMENT_BODY, {}, {})

        assert result is WebhookResult.ERROR


class TestPaymentWebhookServiceLogging:
    """Test that the raw notification is readable in log messages."""

    async def test_ignored_logs_raw_notification(self, service, caplog):
        caplog.set_level(logging.INFO)

        await service.handle({"type": "merchant_order", "id": "9001"}, {"src": "x"}, {})

        assert '"type": "merchant_order"' in caplog.text
        assert '"id": "9001"' in caplog.text
        assert '"src": "x"' in caplog.text

    async def test_lookup_failure_logs_raw_notification(self, service, verifier, caplog):
        caplog.set_level(logging.INFO)
        verifier.verify.side_effect = TransactionLookupError("not found", status_code=404)

        await service.handle({"type": "payment", "data": {"id": "123456"}}, {}, {})

        assert '"data": {"id": "123456"}' in caplog.text

    async def test_unexpected_error_logs_raw_notification(
        self, service, verifier, caplog
    ):
        caplog.set_level(logging.INFO)
        verifier.verify.side_effect = RuntimeError("unexpected")

        await service.handle(PAYMENT_BODY, {"topic": "payment"}, {})

        assert '"data": {"id": "555"}' in caplog.text
        assert '"topic": "payment"' in caplog.text

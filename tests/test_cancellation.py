"""Tests for CancellationToken cooperative cancellation."""

from llm_relay.services.cancellation import CancellationToken


class TestCancellationToken:
    def test_token_not_cancelled_by_default(self):
        assert CancellationToken().is_cancelled is False

    def test_cancel_sets_flag(self):
        token = CancellationToken()
        token.cancel()
        assert token.is_cancelled is True

    def test_cancel_is_idempotent(self):
        token = CancellationToken()
        token.cancel()
        token.cancel()
        assert token.is_cancelled is True

    def test_tokens_are_independent(self):
        a = CancellationToken()
        b = CancellationToken()
        a.cancel()
        assert b.is_cancelled is False

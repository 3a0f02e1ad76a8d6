"""Tests for the mock client."""

import pytest

from sendinblue import Address, Message, MockClient, RejectedError


class TestMockClient:
    def test_records_sent_messages(self, mock_client: MockClient, simple_message: Message):
        mock_client.send(simple_message)
        assert mock_client.sent == [simple_message]

    def test_configured_error_is_raised(self, simple_message: Message):
        client = MockClient(error=RejectedError(400, "Bad Request"))

        with pytest.raises(RejectedError):
            client.send(simple_message)
        assert client.sent == []

    def test_reset(self, mock_client: MockClient):
        mock_client.send(Message(sender=Address("a@x.com")))
        mock_client.reset()
        assert mock_client.sent == []

    async def test_send_async(self, mock_client: MockClient, simple_message: Message):
        await mock_client.send_async(simple_message)
        assert len(mock_client.sent) == 1

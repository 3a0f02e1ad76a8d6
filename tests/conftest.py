"""Shared test fixtures for the sendinblue library."""

from collections.abc import Callable

import httpx
import pytest

from sendinblue import Address, Message, MockClient, SendInBlueConfig


@pytest.fixture
def sendinblue_config() -> SendInBlueConfig:
    return SendInBlueConfig(api_key="xkeysib-test_key_123")


@pytest.fixture
def simple_message() -> Message:
    return Message(
        sender=Address(name="A", email="a@x.com"),
        to=[Address(name="B", email="b@x.com")],
        subject="Hi",
        text_content="Hello",
    )


@pytest.fixture
def captured_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_http_client(captured_requests: list[httpx.Request]) -> Callable[..., httpx.Client]:
    """Build an httpx client whose transport records requests and answers with a fixed response."""

    def factory(status_code: int = 201, **response_kwargs) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return httpx.Response(status_code, **response_kwargs)

        return httpx.Client(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def mock_client() -> MockClient:
    return MockClient()

"""Global test configuration and fixtures."""
import os
from typing import Any, List

import pytest

from connects.api.api_client import RequestDescriptor, ResponseEnvelope

class MockTransport:
    """Records every request and answers with queued envelopes or exceptions"""

    def __init__(self, *responses: Any):
        self.responses: List[Any] = list(responses)
        self.requests: List[RequestDescriptor] = []
        self.closed = False

    def queue(self, status: int, body: Any = None) -> "MockTransport":
        self.responses.append(ResponseEnvelope(status=status, body=body))
        return self

    def fail(self, error: BaseException) -> "MockTransport":
        self.responses.append(error)
        return self

    @property
    def last(self) -> RequestDescriptor:
        return self.requests[-1]

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True

@pytest.fixture
def transport():
    """Fresh mock transport per test"""
    return MockTransport()

@pytest.fixture(autouse=True)
def clean_env():
    """Hide CONNECTS_ environment variables from every test"""
    saved_vars = {k: v for k, v in os.environ.items() if k.startswith("CONNECTS_")}
    for key in saved_vars:
        del os.environ[key]

    yield

    for key in list(os.environ.keys()):
        if key.startswith("CONNECTS_"):
            del os.environ[key]
    for key, value in saved_vars.items():
        os.environ[key] = value

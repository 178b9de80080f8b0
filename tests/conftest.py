import pytest

from otpkit import HashEngine

RFC_KEY = b"12345678901234567890"


class CountingEngine(HashEngine):
    """SHA-1 engine that records how often it was asked to hash."""

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def __call__(self, data: bytes) -> bytes:
        self.calls += 1
        return super().__call__(data)


@pytest.fixture
def rfc_key() -> bytes:
    return RFC_KEY


@pytest.fixture
def counting_engine() -> CountingEngine:
    return CountingEngine()

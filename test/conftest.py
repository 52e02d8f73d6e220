import pytest


class MessageSpy:
    """
    Zero-argument message callable that records how often it was called.
    """

    def __init__(self, message: str = "lazy message"):
        self.message = message
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.message


@pytest.fixture
def message_spy():
    """
    A fresh MessageSpy for each test, for checking lazy message construction.
    """
    return MessageSpy()


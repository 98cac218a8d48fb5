"""Shared test fixtures for monime-python."""

import pytest

from monime.client import MonimeClient
from monime.config import ClientConfig


BASE_URL = "https://api.monime.io/v1"

MONIME_CONFIG = {
    "space_id": "spc-test-123",
    "access_token": "mon_test_token_abc",
}


class FakeSleep:
    """Records requested backoff delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def no_jitter() -> float:
    return 0.0


def make_config(**overrides) -> ClientConfig:
    return ClientConfig(**{**MONIME_CONFIG, **overrides})


def make_client(*, sleep=None, **overrides) -> MonimeClient:
    return MonimeClient(
        make_config(**overrides),
        sleep=sleep or FakeSleep(),
        jitter=no_jitter,
    )


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def client(fake_sleep):
    return make_client(sleep=fake_sleep)

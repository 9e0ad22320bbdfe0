from __future__ import annotations

import logging
import random
import sys

import pytest


def pytest_configure() -> None:
    logging.basicConfig(level=logging.ERROR)  # set log levels very high for tests


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption("--seed", action="store")


@pytest.fixture
def seed(request: pytest.FixtureRequest) -> str:
    seed = request.config.getoption("--seed")

    if not isinstance(seed, str):
        return str(random.randint(0, sys.maxsize))

    return seed


@pytest.fixture
def r(seed: str) -> random.Random:
    return random.Random(seed)

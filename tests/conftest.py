import os

import pytest

from minimessage import ParserConfig

ENV_PREFIX = "MINIMESSAGE_"


# keep configuration tests from leaking variables into each other
@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    yield
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            del os.environ[key]


@pytest.fixture
def strict() -> ParserConfig:
    return ParserConfig(strict=True)

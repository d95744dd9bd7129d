from __future__ import annotations

import pytest
from fakes import FakeConnector, make_settings

from relay.state.settings import AppSettings


@pytest.fixture
def connector() -> FakeConnector:
    return FakeConnector()


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()

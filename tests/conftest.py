"""
Shared fixtures for the emitter test suite.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from emitter import EventEmitter, mixin


@pytest.fixture
def entity():
    """A plain object with the emitter grafted onto it."""
    return mixin(SimpleNamespace())


@pytest.fixture
def emitter():
    return EventEmitter()


@pytest.fixture
def spy():
    return MagicMock(name="spy")


@pytest.fixture(params=["instance", "grafted"])
def any_emitter(request):
    """Runs a test once against each composition mode."""
    if request.param == "instance":
        return EventEmitter()
    return mixin(SimpleNamespace())

"""Shared fakes for the discovery backend."""

import sys
from pathlib import Path
from types import SimpleNamespace

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


class FakeModels:
    def __init__(self, text=None, exc=None):
        self.text = text
        self.exc = exc
        self.calls = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return SimpleNamespace(text=self.text)


class FakeBackend:
    """Client factory that records how often a client was built."""

    def __init__(self, text=None, exc=None):
        self.models = FakeModels(text=text, exc=exc)
        self.factory_calls = 0

    def __call__(self, settings):
        self.factory_calls += 1
        return SimpleNamespace(aio=SimpleNamespace(models=self.models))


@pytest.fixture
def fake_backend():
    return FakeBackend

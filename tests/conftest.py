import os

import pytest
from fastapi.testclient import TestClient

from whiterabbit import server
from whiterabbit.config import Settings
from whiterabbit.corpus.loader import default_corpus
from whiterabbit.textgen.markov import ChainCache


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("WR_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def default_cache() -> ChainCache:
    return ChainCache(default_corpus)


@pytest.fixture
def tiny_cache() -> ChainCache:
    return ChainCache(lambda: ["The cat sat.", "The dog ran."])


@pytest.fixture
def make_client(monkeypatch):
    def _make(settings: Settings | None = None, loader=default_corpus) -> TestClient:
        monkeypatch.setattr(server, "state", server.ServiceState(settings or Settings(), loader=loader))
        return TestClient(server.app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()

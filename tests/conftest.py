from __future__ import annotations

import pytest

from tokenregistry.config import get_settings
from tokenregistry.models.schema import CustomTokenEntry, TokenDescriptor
from tokenregistry.registry.store import TokenRegistry
from tokenregistry.storage.database import DuckDBCustomTokenStore
from tokenregistry.tokens.catalog import load_default_catalog

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


def make_token(address: str, chain_id: int = 1, symbol: str = "TKN", decimals: int = 18, name: str = "Token"):
    return TokenDescriptor(address=address, chain_id=chain_id, symbol=symbol, decimals=decimals, name=name)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("TOKENREGISTRY_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("TOKENREGISTRY_DUCKDB_PATH", raising=False)
    monkeypatch.delenv("TOKENREGISTRY_DEFAULT_TOKEN_LIST_PATH", raising=False)
    get_settings.cache_clear()
    load_default_catalog.cache_clear()
    yield
    get_settings.cache_clear()
    load_default_catalog.cache_clear()


@pytest.fixture
def catalog():
    return (
        make_token("0xAAA", chain_id=1, symbol="FOO", name="Foo"),
        make_token(USDC, chain_id=1, symbol="USDC", decimals=6, name="USDCoin"),
        make_token("0xCCC", chain_id=2, symbol="BAZ", name="Baz"),
    )


@pytest.fixture
def store(tmp_path):
    s = DuckDBCustomTokenStore.open(tmp_path / "custom.duckdb")
    yield s
    s.close()


@pytest.fixture
def registry(store, catalog):
    return TokenRegistry(store, catalog)


class FailingStore:
    """Store whose writes always fail, and reads too once fail_reads is set."""

    def __init__(self, entries: list[CustomTokenEntry] | None = None):
        self.entries = list(entries or [])
        self.fail_reads = False

    def read_custom_tokens_list(self):
        if self.fail_reads:
            raise OSError("store unavailable")
        return list(self.entries)

    def has_custom_token(self, address, chain_id):
        return False

    def create_custom_token(self, info, banned=False):
        raise OSError("disk full")

    def delete_custom_token(self, entry):
        raise OSError("disk full")

    def update_custom_token(self, address, entry):
        raise OSError("disk full")

import pytest

from conftest import make_token
from tokenregistry.models.schema import CustomTokenEntry
from tokenregistry.storage.database import DuckDBCustomTokenStore
from tokenregistry.storage.parquet import export_custom_tokens, import_custom_tokens


def _seed(store):
    store.create_custom_token(make_token("0x111", chain_id=1, symbol="ONE"))
    banned = make_token("0x222", chain_id=1, symbol="TWO")
    store.create_custom_token(banned)
    store.update_custom_token("0x222", CustomTokenEntry(info=banned, banned=True))
    store.create_custom_token(make_token("0x333", chain_id=2, symbol="THREE"))


def test_export_import_round_trip(store, tmp_path):
    _seed(store)
    path = export_custom_tokens(store, tmp_path / "out" / "custom.parquet")

    with DuckDBCustomTokenStore.open(tmp_path / "other.duckdb") as other:
        assert import_custom_tokens(other, path) == 3
        assert other.read_custom_tokens_list() == store.read_custom_tokens_list()


def test_export_single_chain(store, tmp_path):
    _seed(store)
    path = export_custom_tokens(store, tmp_path / "chain2.parquet", chain_id=2)

    with DuckDBCustomTokenStore.open(tmp_path / "other.duckdb") as other:
        import_custom_tokens(other, path)
        assert [e.info.symbol for e in other.read_custom_tokens_list()] == ["THREE"]


def test_import_skips_existing(store, tmp_path):
    _seed(store)
    path = export_custom_tokens(store, tmp_path / "custom.parquet")

    assert import_custom_tokens(store, path) == 0
    assert store.count() == 3


def test_import_missing_file(store, tmp_path):
    with pytest.raises(FileNotFoundError):
        import_custom_tokens(store, tmp_path / "nope.parquet")


def test_import_writes_banned_rows_in_one_insert(store, tmp_path, monkeypatch):
    _seed(store)
    path = export_custom_tokens(store, tmp_path / "custom.parquet")

    with DuckDBCustomTokenStore.open(tmp_path / "other.duckdb") as other:
        def no_updates(address, entry):
            raise AssertionError("import should not update rows")

        monkeypatch.setattr(other, "update_custom_token", no_updates)
        import_custom_tokens(other, path)

        banned = {e.info.symbol: e.banned for e in other.read_custom_tokens_list()}
        assert banned == {"ONE": False, "TWO": True, "THREE": False}

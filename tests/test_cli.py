import pytest
from click.testing import CliRunner

from conftest import USDC
from tokenregistry.cli import cli
from tokenregistry.tokens.asset_id import asset_id_from_address


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    db = str(tmp_path / "cli.duckdb")

    def _run(*args):
        return runner.invoke(cli, ["--db", db, *args])

    return _run


ADD_BAR = ["add", "--chain", "ethereum", "--address", "0xBBB", "--symbol", "BAR", "--decimals", "18", "--name", "Bar"]


def test_list_defaults(run):
    result = run("list", "--chain", "ethereum")

    assert result.exit_code == 0, result.output
    assert "USDC" in result.output
    assert "WMATIC" not in result.output


def test_add_and_lookup(run):
    assert run(*ADD_BAR).exit_code == 0

    result = run("lookup", "--chain", "1", "--symbol", "bar")

    assert result.exit_code == 0, result.output
    assert '"source": "custom"' in result.output
    assert "0xBBB" in result.output


def test_add_duplicate_fails(run):
    run(*ADD_BAR)
    result = run(*ADD_BAR)

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_ban_hides_from_list(run):
    run(*ADD_BAR)
    assert run("ban", "--chain", "ethereum", "--address", "0xbbb").exit_code == 0

    assert "BAR" not in run("list", "--chain", "ethereum").output
    assert "BAR" in run("list", "--chain", "ethereum", "--include-banned").output

    run("unban", "--chain", "ethereum", "--address", "0xbbb")
    assert "BAR" in run("list", "--chain", "ethereum", "--source", "custom").output


def test_remove_default_fails(run):
    result = run("remove", "--chain", "ethereum", "--address", USDC)

    assert result.exit_code == 1
    assert "Unable to find custom token" in result.output


def test_remove_custom(run):
    run(*ADD_BAR)

    assert run("remove", "--chain", "ethereum", "--address", "0xBBB").exit_code == 0
    assert run("lookup", "--chain", "ethereum", "--address", "0xBBB").exit_code == 1


def test_lookup_by_asset_id(run):
    result = run("lookup", "--chain", "ethereum", "--asset-id", str(asset_id_from_address(USDC)))

    assert result.exit_code == 0, result.output
    assert '"symbol": "USDC"' in result.output


def test_lookup_requires_one_key(run):
    result = run("lookup", "--chain", "ethereum", "--symbol", "USDC", "--address", USDC)

    assert result.exit_code == 2


def test_unknown_chain(run):
    result = run("list", "--chain", "solana")

    assert result.exit_code == 2
    assert "Unknown chain" in result.output


def test_export_import(run, tmp_path):
    run(*ADD_BAR)
    out = tmp_path / "custom.parquet"

    assert run("export", str(out)).exit_code == 0

    runner = CliRunner()
    result = runner.invoke(cli, ["--db", str(tmp_path / "fresh.duckdb"), "import", str(out)])
    assert result.exit_code == 0, result.output
    assert "Imported 1 custom tokens" in result.output

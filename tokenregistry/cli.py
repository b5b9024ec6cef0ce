"""Click CLI: list, lookup, add, remove, ban, unban, export, import."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path

import click

from tokenregistry.config import get_settings


@click.group()
@click.version_option(version="1.0.0")
@click.option("--db", "db_path", type=click.Path(path_type=Path), default=None, help="DuckDB file for custom tokens")
@click.option("--token-list", type=click.Path(exists=True, path_type=Path), default=None, help="Uniswap-format token list JSON")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, db_path: Path | None, token_list: Path | None, verbose: bool):
    """Token registry - default token catalog plus user-managed custom tokens."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path or settings.duckdb_path
    ctx.obj["token_list"] = token_list


def chain_option(f):
    return click.option(
        "--chain",
        default=None,
        help="Chain name or ID (ethereum, optimism, polygon, base, arbitrum, sepolia). Defaults to settings.",
    )(f)


@contextmanager
def open_registry(ctx: click.Context, chain: str | None):
    """Yield a registry connected to the resolved chain; closes the store afterwards."""
    from tokenregistry.chain.registry import resolve_chain
    from tokenregistry.registry.errors import TokenRegistryError
    from tokenregistry.registry.store import create_token_registry
    from tokenregistry.storage.database import DuckDBCustomTokenStore
    from tokenregistry.tokens.catalog import load_default_catalog

    try:
        chain_config = resolve_chain(chain or get_settings().default_chain)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--chain") from e

    store = DuckDBCustomTokenStore.open(ctx.obj["db_path"])
    try:
        registry = create_token_registry(store=store, catalog=load_default_catalog(ctx.obj["token_list"]))
        registry.connect(chain_config.chain_id)
        try:
            yield registry
        except TokenRegistryError as e:
            raise click.ClickException(str(e)) from e
        finally:
            registry.disconnect()
    finally:
        store.close()


def _entries_frame(entries):
    import pandas as pd

    rows = [
        {
            "source": e.source,
            "symbol": e.info.symbol,
            "address": e.info.address,
            "decimals": e.info.decimals,
            "name": e.info.name,
            "banned": getattr(e, "banned", False),
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=["source", "symbol", "address", "decimals", "name", "banned"])


@cli.command("list")
@chain_option
@click.option("--source", type=click.Choice(["all", "default", "custom"]), default="all")
@click.option("--include-banned/--hide-banned", default=False)
@click.pass_context
def list_tokens(ctx: click.Context, chain: str | None, source: str, include_banned: bool):
    """List tokens for a chain."""
    with open_registry(ctx, chain) as registry:
        entries = registry.entries.get() or []
        if source != "all":
            entries = [e for e in entries if e.source == source]
        if not include_banned:
            entries = [e for e in entries if not getattr(e, "banned", False)]

        if not entries:
            click.echo(f"No tokens on chain_id={registry.chain_id}.")
            return
        click.echo(_entries_frame(entries).to_string(index=False))


@cli.command()
@chain_option
@click.option("--address", default=None)
@click.option("--symbol", default=None)
@click.option("--asset-id", default=None, help="Protocol asset ID (decimal or 0x-hex)")
@click.pass_context
def lookup(ctx: click.Context, chain: str | None, address: str | None, symbol: str | None, asset_id: str | None):
    """Look up a single token by address, symbol or asset ID."""
    given = [v for v in (address, symbol, asset_id) if v is not None]
    if len(given) != 1:
        raise click.UsageError("Pass exactly one of --address, --symbol or --asset-id.")

    with open_registry(ctx, chain) as registry:
        if address is not None:
            entry = registry.get_by_address(address)
        elif symbol is not None:
            entry = registry.get_by_symbol(symbol)
        else:
            try:
                entry = registry.get_by_asset_id(asset_id)
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--asset-id") from e

        if entry is None:
            raise click.ClickException(f"Token not found on chain_id={registry.chain_id}.")
        click.echo(entry.model_dump_json(indent=2))


@cli.command()
@chain_option
@click.option("--address", required=True)
@click.option("--symbol", required=True)
@click.option("--decimals", required=True, type=int)
@click.option("--name", required=True)
@click.option("--logo-uri", default=None)
@click.pass_context
def add(ctx: click.Context, chain: str | None, address: str, symbol: str, decimals: int, name: str, logo_uri: str | None):
    """Add a custom token on the chain."""
    from pydantic import ValidationError
    from tokenregistry.models.schema import TokenDescriptor

    with open_registry(ctx, chain) as registry:
        try:
            info = TokenDescriptor(
                address=address,
                chain_id=registry.chain_id,
                symbol=symbol,
                decimals=decimals,
                name=name,
                logo_uri=logo_uri,
            )
        except ValidationError as e:
            raise click.BadParameter(str(e)) from e
        registry.add_custom_token(info)
        click.echo(f"Added custom token {symbol} ({address}) on chain_id={registry.chain_id}.")


@cli.command()
@chain_option
@click.option("--address", required=True)
@click.pass_context
def remove(ctx: click.Context, chain: str | None, address: str):
    """Remove a custom token."""
    with open_registry(ctx, chain) as registry:
        registry.remove_custom_token(address, registry.chain_id)
        click.echo(f"Removed custom token {address} from chain_id={registry.chain_id}.")


@cli.command()
@chain_option
@click.option("--address", required=True)
@click.pass_context
def ban(ctx: click.Context, chain: str | None, address: str):
    """Ban a custom token so it is hidden from normal listings."""
    with open_registry(ctx, chain) as registry:
        registry.set_custom_token_ban_status(address, registry.chain_id, True)
        click.echo(f"Banned {address} on chain_id={registry.chain_id}.")


@cli.command()
@chain_option
@click.option("--address", required=True)
@click.pass_context
def unban(ctx: click.Context, chain: str | None, address: str):
    """Lift a ban on a custom token."""
    with open_registry(ctx, chain) as registry:
        registry.set_custom_token_ban_status(address, registry.chain_id, False)
        click.echo(f"Unbanned {address} on chain_id={registry.chain_id}.")


@cli.command("export")
@click.argument("output", type=click.Path(path_type=Path))
@click.option("--chain", default=None, help="Only export this chain (name or ID)")
@click.pass_context
def export_cmd(ctx: click.Context, output: Path, chain: str | None):
    """Export stored custom tokens to Parquet."""
    from tokenregistry.chain.registry import resolve_chain
    from tokenregistry.storage.database import DuckDBCustomTokenStore
    from tokenregistry.storage.parquet import export_custom_tokens

    try:
        chain_id = resolve_chain(chain).chain_id if chain else None
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--chain") from e
    with DuckDBCustomTokenStore.open(ctx.obj["db_path"]) as store:
        export_custom_tokens(store, output, chain_id=chain_id)
        click.echo(f"Exported {store.count(chain_id)} custom tokens to {output}.")


@cli.command("import")
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def import_cmd(ctx: click.Context, input_path: Path):
    """Import custom tokens from a Parquet export."""
    from tokenregistry.storage.database import DuckDBCustomTokenStore
    from tokenregistry.storage.parquet import import_custom_tokens

    with DuckDBCustomTokenStore.open(ctx.obj["db_path"]) as store:
        n = import_custom_tokens(store, input_path)
        click.echo(f"Imported {n} custom tokens from {input_path}.")


if __name__ == "__main__":
    cli()

"""Parquet export/import of the custom token set."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from tokenregistry.models.schema import TokenDescriptor
from tokenregistry.storage.database import CUSTOM_TOKEN_COLUMNS, DuckDBCustomTokenStore


def export_custom_tokens(
    store: DuckDBCustomTokenStore,
    output_path: Path,
    chain_id: int | None = None,
) -> Path:
    """Export stored custom tokens (optionally one chain) to Parquet."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    query = f"SELECT {', '.join(CUSTOM_TOKEN_COLUMNS)} FROM custom_tokens"
    if chain_id is not None:
        query += f" WHERE chain_id = {int(chain_id)}"
    query += " ORDER BY position"
    target = str(output_path).replace("'", "''")
    store.conn.execute(f"COPY ({query}) TO '{target}' (FORMAT PARQUET)")
    return output_path


def import_custom_tokens(store: DuckDBCustomTokenStore, input_path: Path) -> int:
    """Import custom tokens from Parquet, skipping ones already stored. Returns rows imported."""
    if not input_path.exists():
        raise FileNotFoundError(f"Parquet file not found: {input_path}")
    df = pd.read_parquet(input_path)
    missing = set(CUSTOM_TOKEN_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"Parquet file {input_path} is missing columns: {sorted(missing)}")

    imported = 0
    for row in df.to_dict("records"):
        logo_uri = row["logo_uri"]
        info = TokenDescriptor(
            address=row["address"],
            chain_id=int(row["chain_id"]),
            symbol=row["symbol"],
            decimals=int(row["decimals"]),
            name=row["name"],
            logo_uri=None if pd.isna(logo_uri) else logo_uri,
        )
        if store.has_custom_token(info.address, info.chain_id):
            continue
        store.create_custom_token(info, banned=bool(row["banned"]))
        imported += 1
    return imported

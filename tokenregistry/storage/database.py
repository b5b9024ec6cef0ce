"""DuckDB storage for user-added custom tokens."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import duckdb

from tokenregistry.config import get_settings
from tokenregistry.models.schema import CustomTokenEntry, TokenDescriptor

logger = logging.getLogger(__name__)

IN_MEMORY = ":memory:"

CUSTOM_TOKEN_COLUMNS = [
    "chain_id", "address", "symbol", "decimals", "name", "logo_uri", "banned",
]


class CustomTokenStore(Protocol):
    """Durable keyed store backing custom token entries."""

    def read_custom_tokens_list(self) -> list[CustomTokenEntry]: ...

    def create_custom_token(self, info: TokenDescriptor, banned: bool = False) -> None: ...

    def delete_custom_token(self, entry: CustomTokenEntry) -> None: ...

    def update_custom_token(self, address: str, entry: CustomTokenEntry) -> None: ...

    def has_custom_token(self, address: str, chain_id: int) -> bool: ...


def get_connection(path: Path | str | None = None) -> duckdb.DuckDBPyConnection:
    """Get a DuckDB connection, creating tables if needed."""
    if path is None:
        path = get_settings().duckdb_path
    if str(path) != IN_MEMORY:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
    conn = duckdb.connect(str(path))
    _create_tables(conn)
    return conn


def _create_tables(conn: duckdb.DuckDBPyConnection) -> None:
    conn.execute("CREATE SEQUENCE IF NOT EXISTS custom_token_position")
    # address_key is the lower-cased address; address keeps the user's spelling
    conn.execute("""
        CREATE TABLE IF NOT EXISTS custom_tokens (
            chain_id INTEGER NOT NULL,
            address_key VARCHAR NOT NULL,
            address VARCHAR NOT NULL,
            symbol VARCHAR NOT NULL,
            decimals INTEGER NOT NULL,
            name VARCHAR NOT NULL,
            logo_uri VARCHAR,
            banned BOOLEAN NOT NULL DEFAULT FALSE,
            position BIGINT NOT NULL DEFAULT nextval('custom_token_position'),
            PRIMARY KEY (chain_id, address_key)
        )
    """)


class DuckDBCustomTokenStore:
    """CustomTokenStore backed by a DuckDB table. Rows keyed by (chain_id, lower(address))."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self.conn = conn

    @classmethod
    def open(cls, path: Path | str | None = None) -> DuckDBCustomTokenStore:
        return cls(get_connection(path))

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> DuckDBCustomTokenStore:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def read_custom_tokens_list(self) -> list[CustomTokenEntry]:
        """All stored custom tokens across every chain, in insertion order."""
        rows = self.conn.execute(f"""
            SELECT {", ".join(CUSTOM_TOKEN_COLUMNS)}
            FROM custom_tokens
            ORDER BY position
        """).fetchall()
        return [_row_to_entry(row) for row in rows]

    def create_custom_token(self, info: TokenDescriptor, banned: bool = False) -> None:
        self.conn.execute("""
            INSERT INTO custom_tokens
                (chain_id, address_key, address, symbol, decimals, name, logo_uri, banned)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """, [
            info.chain_id, info.address.lower(), info.address,
            info.symbol, info.decimals, info.name, info.logo_uri, banned,
        ])
        logger.debug(f"Stored custom token {info.address} on chain_id={info.chain_id}")

    def delete_custom_token(self, entry: CustomTokenEntry) -> None:
        self.conn.execute(
            "DELETE FROM custom_tokens WHERE chain_id = ? AND address_key = ?",
            [entry.info.chain_id, entry.info.address.lower()],
        )
        logger.debug(f"Deleted custom token {entry.info.address} on chain_id={entry.info.chain_id}")

    def update_custom_token(self, address: str, entry: CustomTokenEntry) -> None:
        """Overwrite the stored record for address on entry's chain."""
        info = entry.info
        result = self.conn.execute("""
            UPDATE custom_tokens
            SET symbol = ?, decimals = ?, name = ?, logo_uri = ?, banned = ?
            WHERE chain_id = ? AND address_key = ?
        """, [
            info.symbol, info.decimals, info.name, info.logo_uri, entry.banned,
            info.chain_id, address.lower(),
        ]).fetchone()
        if result and result[0] == 0:
            logger.warning(f"No stored custom token {address} on chain_id={info.chain_id} to update")

    def has_custom_token(self, address: str, chain_id: int) -> bool:
        result = self.conn.execute(
            "SELECT COUNT(*) FROM custom_tokens WHERE chain_id = ? AND address_key = ?",
            [chain_id, address.lower()],
        ).fetchone()
        return bool(result and result[0])

    def count(self, chain_id: int | None = None) -> int:
        query = "SELECT COUNT(*) FROM custom_tokens"
        params: list = []
        if chain_id is not None:
            query += " WHERE chain_id = ?"
            params.append(chain_id)
        result = self.conn.execute(query, params).fetchone()
        return result[0] if result else 0


def _row_to_entry(row: tuple) -> CustomTokenEntry:
    chain_id, address, symbol, decimals, name, logo_uri, banned = row
    info = TokenDescriptor(
        address=address,
        chain_id=chain_id,
        symbol=symbol,
        decimals=decimals,
        name=name,
        logo_uri=logo_uri,
    )
    return CustomTokenEntry(info=info, banned=bool(banned))

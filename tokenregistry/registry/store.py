"""Chain-scoped token registry merging the default catalog with stored custom tokens."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Sequence

from tokenregistry.models.schema import (
    CustomTokenEntry,
    DefaultTokenEntry,
    TokenDescriptor,
    TokenEntry,
)
from tokenregistry.registry.errors import AlreadyExistsError, NotFoundError
from tokenregistry.registry.observable import Observable, Readable, Subscriber, Unsubscribe
from tokenregistry.storage.database import CustomTokenStore, DuckDBCustomTokenStore
from tokenregistry.tokens.asset_id import address_from_asset_id
from tokenregistry.tokens.catalog import load_default_catalog

logger = logging.getLogger(__name__)

AssetIdResolver = Callable[[int | str], str]


def _key(info: TokenDescriptor) -> tuple[str, int]:
    return info.address.lower(), info.chain_id


def _merge(
    defaults: list[DefaultTokenEntry],
    customs: list[CustomTokenEntry],
) -> list[TokenEntry]:
    """Defaults first, then customs, keeping the first entry per (address, chain)."""
    merged: list[TokenEntry] = []
    seen: set[tuple[str, int]] = set()
    for entry in [*defaults, *customs]:
        key = _key(entry.info)
        if key in seen:
            logger.warning(
                f"Skipping duplicate {entry.source} token {entry.info.address} "
                f"on chain_id={entry.info.chain_id}"
            )
            continue
        seen.add(key)
        merged.append(entry)
    return merged


class TokenRegistry:
    """In-memory token list for one chain at a time.

    Must be connected to a chain before use. While disconnected, lookups
    return None and custom token operations are skipped.
    """

    def __init__(
        self,
        store: CustomTokenStore,
        catalog: Sequence[TokenDescriptor],
        asset_id_resolver: AssetIdResolver = address_from_asset_id,
    ):
        self._store = store
        self._catalog = tuple(catalog)
        self._resolve_asset_id = asset_id_resolver
        self._lock = threading.RLock()
        self._chain_id: int | None = None
        self._entries: Observable[list[TokenEntry] | None] = Observable(None)
        self._connected: Observable[bool] = Observable(False)

    @property
    def entries(self) -> Readable[list[TokenEntry] | None]:
        return self._entries.readonly()

    @property
    def connected(self) -> Readable[bool]:
        return self._connected.readonly()

    @property
    def chain_id(self) -> int | None:
        return self._chain_id

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Subscribe to the entry list. Called now and after every change."""
        return self._entries.subscribe(callback)

    # Lifecycle

    def connect(self, chain_id: int) -> None:
        """Load default and stored custom tokens for chain_id, replacing any current state."""
        with self._lock:
            # read everything before touching state so a failed read leaves it as it was
            customs = [
                t for t in self._store.read_custom_tokens_list()
                if t.info.chain_id == chain_id
            ]
            defaults = [
                DefaultTokenEntry(info=t) for t in self._catalog
                if t.chain_id == chain_id
            ]
            merged = _merge(defaults, customs)

            self._chain_id = chain_id
            self._entries.set(merged)
            self._connected.set(True)
            logger.info(
                f"Connected to chain_id={chain_id}: "
                f"{len(defaults)} default, {len(customs)} custom tokens"
            )

    def disconnect(self) -> None:
        """Clear the in-memory list. Stored custom tokens come back on the next connect."""
        with self._lock:
            self._chain_id = None
            self._entries.set(None)
            self._connected.set(False)
            logger.info("Disconnected token registry")

    # Lookups

    def get_by_address(self, address: str, chain_id: int | None = None) -> TokenEntry | None:
        """Find a token by contract address (case-insensitive) on chain_id, default active chain."""
        with self._lock:
            tokens = self._entries.get()
            if tokens is None:
                return None
            chain = self._chain_id if chain_id is None else chain_id
            needle = address.lower()
            return next(
                (t for t in tokens if t.info.address.lower() == needle and t.info.chain_id == chain),
                None,
            )

    def get_by_symbol(self, symbol: str, chain_id: int | None = None) -> TokenEntry | None:
        """Find a token by symbol (case-insensitive). Defaults win over customs on ties."""
        with self._lock:
            tokens = self._entries.get()
            if tokens is None:
                return None
            chain = self._chain_id if chain_id is None else chain_id
            needle = symbol.lower()
            return next(
                (t for t in tokens if t.info.symbol.lower() == needle and t.info.chain_id == chain),
                None,
            )

    def get_by_asset_id(self, asset_id: int | str, chain_id: int | None = None) -> TokenEntry | None:
        with self._lock:
            if self._entries.get() is None:
                return None
            return self.get_by_address(self._resolve_asset_id(asset_id), chain_id)

    # Custom tokens

    def add_custom_token(self, info: TokenDescriptor) -> CustomTokenEntry | None:
        """Persist a custom token and add it to the list if it belongs to the active chain.

        Raises AlreadyExistsError if the address is already listed or stored.
        """
        with self._lock:
            tokens = self._entries.get()
            if tokens is None:
                logger.debug(f"Not connected, skipping add of {info.address}")
                return None

            needle = info.address.lower()
            if any(t.info.address.lower() == needle for t in tokens):
                raise AlreadyExistsError(info.address, info.chain_id)
            if self._store.has_custom_token(info.address, info.chain_id):
                raise AlreadyExistsError(info.address, info.chain_id)

            self._store.create_custom_token(info)
            entry = CustomTokenEntry(info=info, banned=False)
            logger.info(f"Added custom token {info.symbol} ({info.address}) on chain_id={info.chain_id}")

            if info.chain_id != self._chain_id:
                return entry

            self._entries.set([*tokens, entry])
            return entry

    def remove_custom_token(self, address: str, chain_id: int) -> CustomTokenEntry | None:
        """Delete a custom token from the store and the list. Default tokens cannot be removed."""
        with self._lock:
            tokens = self._entries.get()
            if tokens is None:
                logger.debug(f"Not connected, skipping removal of {address}")
                return None

            token = self.get_by_address(address, chain_id)
            if not isinstance(token, CustomTokenEntry):
                raise NotFoundError(address, chain_id)

            self._store.delete_custom_token(token)

            removed = token.info.address.lower()
            self._entries.set([t for t in tokens if t.info.address.lower() != removed])
            logger.info(f"Removed custom token {token.info.address} on chain_id={chain_id}")
            return token

    def set_custom_token_ban_status(
        self,
        address: str,
        chain_id: int,
        banned: bool,
    ) -> CustomTokenEntry | None:
        """Ban or un-ban a custom token. Banned tokens stay stored but should be hidden."""
        with self._lock:
            tokens = self._entries.get()
            if tokens is None:
                logger.debug(f"Not connected, skipping ban update of {address}")
                return None

            token = self.get_by_address(address, chain_id)
            if not isinstance(token, CustomTokenEntry):
                raise NotFoundError(address, chain_id)

            updated = token.model_copy(update={"banned": banned})
            self._store.update_custom_token(address, updated)

            new_tokens = list(tokens)
            new_tokens[new_tokens.index(token)] = updated
            self._entries.set(new_tokens)
            logger.info(f"Set banned={banned} for custom token {token.info.address} on chain_id={chain_id}")
            return updated


def create_token_registry(
    store: CustomTokenStore | None = None,
    catalog: Sequence[TokenDescriptor] | None = None,
    asset_id_resolver: AssetIdResolver | None = None,
) -> TokenRegistry:
    """Build a disconnected registry, defaulting to the configured DuckDB store and catalog."""
    if store is None:
        store = DuckDBCustomTokenStore.open()
    if catalog is None:
        catalog = load_default_catalog()
    return TokenRegistry(store, catalog, asset_id_resolver or address_from_asset_id)

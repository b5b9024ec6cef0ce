"""Default token catalog provider: built-in list or a Uniswap-format token list file."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from tokenregistry.config import get_settings
from tokenregistry.models.schema import TokenDescriptor
from tokenregistry.tokens.constants import DEFAULT_TOKENS

logger = logging.getLogger(__name__)


def parse_token_list(payload: dict) -> tuple[TokenDescriptor, ...]:
    """Validate a token-list payload ({"tokens": [...]}) into descriptors."""
    if not isinstance(payload, dict) or not isinstance(payload.get("tokens"), list):
        raise ValueError("Token list must be an object with a 'tokens' array")
    return tuple(TokenDescriptor.model_validate(t) for t in payload["tokens"])


@lru_cache(maxsize=8)
def _load_catalog_cached(path: Path | None) -> tuple[TokenDescriptor, ...]:
    if path is None:
        tokens = parse_token_list({"tokens": DEFAULT_TOKENS})
        logger.debug(f"Loaded {len(tokens)} built-in catalog tokens")
        return tokens

    if not path.exists():
        raise FileNotFoundError(f"Token list not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Token list {path} is not valid JSON: {e}") from e

    tokens = parse_token_list(payload)
    logger.info(f"Loaded {len(tokens)} catalog tokens from {path}")
    return tokens


def load_default_catalog(path: str | Path | None = None) -> tuple[TokenDescriptor, ...]:
    """Return the default catalog for all chains. Loaded once per path per process.

    Falls back to settings.default_token_list_path, then to the built-in list.
    """
    if path is None:
        path = get_settings().default_token_list_path
    return _load_catalog_cached(Path(path).resolve() if path is not None else None)


load_default_catalog.cache_clear = _load_catalog_cached.cache_clear  # type: ignore[attr-defined]

"""Chain registry mapping chain_id to the networks the token catalog covers.

The catalog and custom tokens are keyed by numeric chain_id; these names let the
CLI accept `--chain polygon` as well as `--chain 137`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChainConfig:
    chain_id: int
    name: str
    native_token: str
    is_testnet: bool = False


CHAINS: dict[int, ChainConfig] = {
    1: ChainConfig(chain_id=1, name="ethereum", native_token="ETH"),
    10: ChainConfig(chain_id=10, name="optimism", native_token="ETH"),
    137: ChainConfig(chain_id=137, name="polygon", native_token="MATIC"),
    8453: ChainConfig(chain_id=8453, name="base", native_token="ETH"),
    42161: ChainConfig(chain_id=42161, name="arbitrum", native_token="ETH"),
    11155111: ChainConfig(chain_id=11155111, name="sepolia", native_token="ETH", is_testnet=True),
}

CHAIN_NAME_TO_ID: dict[str, int] = {c.name: c.chain_id for c in CHAINS.values()}


def get_chain_config(chain_id: int) -> ChainConfig:
    if chain_id not in CHAINS:
        raise ValueError(f"Unknown chain_id={chain_id}. Supported: {list(CHAINS.keys())}")
    return CHAINS[chain_id]


def resolve_chain(name_or_id: str | int) -> ChainConfig:
    """Resolve a chain name or numeric ID (int or digit string) to its config."""
    if isinstance(name_or_id, int):
        return get_chain_config(name_or_id)
    name = str(name_or_id).strip().lower()
    if name.isdigit():
        return get_chain_config(int(name))
    if name not in CHAIN_NAME_TO_ID:
        raise ValueError(f"Unknown chain '{name}'. Supported: {list(CHAIN_NAME_TO_ID.keys())}")
    return CHAINS[CHAIN_NAME_TO_ID[name]]

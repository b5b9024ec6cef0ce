"""Convert between protocol asset IDs and ERC-20 contract addresses.

An asset ID is the token's 20-byte contract address read as an unsigned integer.
"""

from __future__ import annotations

from web3 import Web3

MAX_ASSET_ID = 2**160


def _parse_asset_id(asset_id: int | str) -> int:
    if isinstance(asset_id, bool):
        raise TypeError("asset_id must be an int or a numeric string")
    if isinstance(asset_id, int):
        return asset_id
    value = str(asset_id).strip()
    if value.lower().startswith("0x"):
        return int(value, 16)
    if not value.isdigit():
        raise ValueError(f"Invalid asset id: {asset_id!r}")
    return int(value)


def address_from_asset_id(asset_id: int | str) -> str:
    """Return the checksum address encoded by an asset ID (int, decimal or 0x-hex string)."""
    value = _parse_asset_id(asset_id)
    if value < 0 or value >= MAX_ASSET_ID:
        raise ValueError(f"Asset id {value} is outside the 160-bit address range")
    return Web3.to_checksum_address("0x" + format(value, "040x"))


def asset_id_from_address(address: str) -> int:
    # checksum casing is not enforced
    if not Web3.is_address(address.lower()):
        raise ValueError(f"Invalid address: {address}")
    return int(address, 16)

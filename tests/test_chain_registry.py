import pytest

from tokenregistry.chain.registry import get_chain_config, resolve_chain


@pytest.mark.parametrize("value,expected", [
    ("ethereum", 1),
    ("Polygon", 137),
    (" base ", 8453),
    ("42161", 42161),
    (10, 10),
])
def test_resolve_chain(value, expected):
    assert resolve_chain(value).chain_id == expected


def test_sepolia_is_testnet():
    assert get_chain_config(11155111).is_testnet is True
    assert get_chain_config(1).is_testnet is False


@pytest.mark.parametrize("value", ["solana", "999", 5])
def test_unknown_chain(value):
    with pytest.raises(ValueError):
        resolve_chain(value)

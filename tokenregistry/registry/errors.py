"""Error kinds raised by the token registry."""


class TokenRegistryError(Exception):
    """Base class for registry precondition failures."""

    def __init__(self, message: str, address: str, chain_id: int):
        super().__init__(message)
        self.address = address
        self.chain_id = chain_id


class AlreadyExistsError(TokenRegistryError):
    def __init__(self, address: str, chain_id: int):
        super().__init__(f"Token {address} already exists on chain {chain_id}", address, chain_id)


class NotFoundError(TokenRegistryError):
    def __init__(self, address: str, chain_id: int):
        super().__init__(
            f"Unable to find custom token with address {address} on chain {chain_id}",
            address,
            chain_id,
        )

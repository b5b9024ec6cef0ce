"""Pydantic v2 data models for token metadata and registry entries."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TokenDescriptor(BaseModel):
    """Token metadata as it appears in a Uniswap-style token list.

    Accepts both snake_case names and the token-list spelling (chainId, logoURI).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    address: str
    chain_id: int = Field(alias="chainId", description="EVM chain ID")
    symbol: str
    decimals: int = Field(ge=0, le=255)
    name: str
    logo_uri: str | None = Field(default=None, alias="logoURI")


class DefaultTokenEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Literal["default"] = "default"
    info: TokenDescriptor


class CustomTokenEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Literal["custom"] = "custom"
    info: TokenDescriptor
    banned: bool = False


TokenEntry = Annotated[
    Union[DefaultTokenEntry, CustomTokenEntry],
    Field(discriminator="source"),
]

"""Service metadata contracts (chains, tokens, swappers)."""

from typing import Optional

from pydantic import Field

from rango_client.contracts.assets import Asset, Token
from rango_client.contracts.base import Decimals, WireModel
from rango_client.contracts.quotes import SwapperMeta


class BlockchainMeta(WireModel):
    """A blockchain supported by the service."""

    name: str = Field(..., description="Blockchain name (ETH, BSC, OSMOSIS, ...)")
    default_decimals: Decimals
    address_patterns: tuple[str, ...] = Field(default_factory=tuple)
    fee_assets: tuple[Asset, ...] = Field(default_factory=tuple)
    type: str = Field(..., description="Chain family: EVM, COSMOS, TRANSFER, ...")
    chain_id: Optional[str] = None
    enabled: Optional[bool] = None


class MetaResponse(WireModel):
    """Response of the meta endpoint."""

    blockchains: tuple[BlockchainMeta, ...] = Field(default_factory=tuple)
    tokens: tuple[Token, ...] = Field(default_factory=tuple)
    swappers: tuple[SwapperMeta, ...] = Field(default_factory=tuple)

    def get_blockchain(self, name: str) -> Optional[BlockchainMeta]:
        """Look up a blockchain by name (case-insensitive)."""
        for chain in self.blockchains:
            if chain.name.upper() == name.upper():
                return chain
        return None

    def tokens_on(self, blockchain: str) -> list[Token]:
        """All tokens listed on ``blockchain``."""
        return [t for t in self.tokens if t.blockchain.upper() == blockchain.upper()]

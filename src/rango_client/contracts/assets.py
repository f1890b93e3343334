"""Asset, token and amount contracts."""

import re
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from rango_client.contracts.base import Decimals, WireModel

# Unsigned integer or decimal, no exponent, separators or whitespace
AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")


class Asset(WireModel):
    """A fungible unit on a chain. No address means the native asset."""

    blockchain: str = Field(..., description="Blockchain name (ETH, BSC, COSMOS, etc.)")
    address: Optional[str] = Field(None, description="Contract address (None for native)")
    symbol: str = Field(..., description="Asset symbol")

    @property
    def is_native(self) -> bool:
        """Check if this is the chain's native asset."""
        return self.address is None

    def to_query(self) -> str:
        """Render as BLOCKCHAIN.SYMBOL or BLOCKCHAIN.SYMBOL--ADDRESS."""
        if self.address:
            return f"{self.blockchain}.{self.symbol}--{self.address}"
        return f"{self.blockchain}.{self.symbol}"

    def __str__(self) -> str:
        return self.to_query()


class AssetWithTicker(Asset):
    """Asset carrying the chain-specific ticker (e.g. uatom)."""

    ticker: str = Field(..., description="Chain ticker / denom")


class Token(Asset):
    """Asset with display and precision metadata."""

    decimals: Decimals = Field(..., description="Token decimals")
    image: str = Field(..., description="Token logo URL")
    name: Optional[str] = Field(None, description="Full token name")
    usd_price: Optional[float] = Field(None, description="USD price if known")


class Amount(WireModel):
    """Fixed-point amount kept as a decimal string."""

    amount: str = Field(..., description="Raw amount in smallest units")
    decimals: Decimals = Field(..., description="Fixed-point scale")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: str) -> str:
        """Reject strings that are not plain finite decimal numbers."""
        if not AMOUNT_PATTERN.fullmatch(v):
            raise ValueError(f"not a decimal string: {v!r}")
        return v

    def to_decimal(self) -> Decimal:
        """Amount in human-readable units."""
        return Decimal(self.amount).scaleb(-self.decimals)

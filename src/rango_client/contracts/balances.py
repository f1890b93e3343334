"""Wallet balance contracts.

A ``WalletDetail`` is one chain's balance snapshot for an address. When the
service could not read the chain it sets ``failed`` and whatever sits in
``balances`` must not be trusted.
"""

from typing import Optional

from pydantic import Field

from rango_client.contracts.assets import Amount, Asset
from rango_client.contracts.base import Flag, WireModel


class WalletBalance(WireModel):
    """Balance of a single asset."""

    asset: Asset
    amount: Amount


class WalletDetail(WireModel):
    """Balance snapshot of one address on one chain."""

    failed: Flag = Field(..., description="Whether the balance lookup failed")
    block_chain: str = Field(..., description="Blockchain name")
    address: str = Field(..., description="Wallet address")
    balances: Optional[tuple[WalletBalance, ...]] = Field(
        None, description="Asset balances (untrusted when failed)"
    )
    explorer_url: str = Field(..., description="Explorer link for the address")

    @property
    def available_balances(self) -> Optional[tuple[WalletBalance, ...]]:
        """Balances, or None when the lookup failed."""
        if self.failed:
            return None
        return self.balances

    def balance_of(self, asset: Asset) -> Optional[Amount]:
        """Find the amount held for ``asset`` (matched on chain, symbol, address)."""
        for balance in self.available_balances or []:
            held = balance.asset
            if (
                held.blockchain.upper() == asset.blockchain.upper()
                and held.symbol.upper() == asset.symbol.upper()
                and (held.address or "").lower() == (asset.address or "").lower()
            ):
                return balance.amount
        return None


class BalanceResponse(WireModel):
    """Response of the balance endpoint."""

    wallets: tuple[WalletDetail, ...] = Field(default_factory=tuple)

    @property
    def failed_chains(self) -> list[str]:
        """Chains whose lookup failed."""
        return [w.block_chain for w in self.wallets if w.failed]

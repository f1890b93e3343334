"""Quote and route contracts.

``QuoteSimulationResult`` is the priced route the service selected. It is
shared by the quote endpoint and the swap endpoint.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import Field

from rango_client.contracts.assets import Asset, Token
from rango_client.contracts.base import Seconds, WireModel


class ResultType(str, Enum):
    """Outcome of a quote/swap request."""

    OK = "OK"
    HIGH_IMPACT = "HIGH_IMPACT"
    INPUT_LIMIT_ISSUE = "INPUT_LIMIT_ISSUE"
    NO_ROUTE = "NO_ROUTE"

    @classmethod
    def _missing_(cls, value):
        # Accept "Ok", "HighImpact", "no_route", ...
        if isinstance(value, str):
            normalized = value if "_" in value else re.sub(r"(?<!^)(?=[A-Z])", "_", value)
            normalized = normalized.upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class RestrictionType(str, Enum):
    """Whether the amount bounds are inclusive."""

    EXCLUSIVE = "EXCLUSIVE"
    INCLUSIVE = "INCLUSIVE"


class SwapperMeta(WireModel):
    """A DEX / bridge the service can route through."""

    id: str
    title: str
    logo: str
    swapper_group: Optional[str] = None
    types: Optional[tuple[str, ...]] = None
    enabled: Optional[bool] = None


class SwapFee(WireModel):
    """One fee charged along the route."""

    name: str = Field(..., description="Fee name (network fee, swapper fee, ...)")
    token: Token
    expense_type: str = Field(..., description="FROM_SOURCE_WALLET or DECREASE_FROM_OUTPUT")
    amount: str = Field(..., description="Fee amount (decimal string)")
    price: Optional[float] = Field(None, description="USD price of the fee token")


class AmountRestriction(WireModel):
    """Input bounds imposed by the route."""

    min: Optional[str] = None
    max: Optional[str] = None
    type: RestrictionType = RestrictionType.EXCLUSIVE


class QuotePath(WireModel):
    """A single hop of the route."""

    from_token: Token = Field(..., alias="from")
    to_token: Token = Field(..., alias="to")
    swapper: SwapperMeta
    swapper_type: str
    expected_output: str
    estimated_time_in_seconds: Seconds


class QuoteSimulationResult(WireModel):
    """A priced route. ``path`` is absent for direct transfers."""

    output_amount: str = Field(..., description="Expected output (decimal string)")
    swapper: SwapperMeta
    path: Optional[tuple[QuotePath, ...]] = None
    fee: tuple[SwapFee, ...] = Field(default_factory=tuple)
    amount_restriction: Optional[AmountRestriction] = None
    estimated_time_in_seconds: Seconds

    @property
    def is_direct(self) -> bool:
        """True when the route is a plain transfer without hops."""
        return not self.path


class QuoteRequest(WireModel):
    """Parameters for the quote endpoint."""

    from_asset: Asset
    to_asset: Asset
    amount: str = Field(..., description="Input amount in smallest units")
    swappers: Optional[tuple[str, ...]] = None
    swappers_exclude: Optional[bool] = None
    contract_call: Optional[bool] = None

    def to_params(self) -> dict[str, str]:
        """Render as query parameters."""
        params = {
            "from": self.from_asset.to_query(),
            "to": self.to_asset.to_query(),
            "amount": self.amount,
        }
        if self.swappers:
            params["swappers"] = ",".join(self.swappers)
        if self.swappers_exclude is not None:
            params["swappersExclude"] = _flag(self.swappers_exclude)
        if self.contract_call is not None:
            params["contractCall"] = _flag(self.contract_call)
        return params


class SwapRequest(QuoteRequest):
    """Parameters for the swap endpoint."""

    from_address: str
    to_address: str
    slippage: str = Field(..., description="Slippage tolerance in percent")
    disable_estimate: Optional[bool] = None
    referrer_address: Optional[str] = None
    referrer_fee: Optional[str] = None

    def to_params(self) -> dict[str, str]:
        params = super().to_params()
        params["fromAddress"] = self.from_address
        params["toAddress"] = self.to_address
        params["slippage"] = self.slippage
        if self.disable_estimate is not None:
            params["disableEstimate"] = _flag(self.disable_estimate)
        if self.referrer_address:
            params["referrerAddress"] = self.referrer_address
        if self.referrer_fee:
            params["referrerFee"] = self.referrer_fee
        return params


class QuoteResponse(WireModel):
    """Response of the quote endpoint."""

    request_id: str
    result_type: ResultType
    route: Optional[QuoteSimulationResult] = None
    error: Optional[str] = None


def _flag(value: bool) -> str:
    return "true" if value else "false"

"""Request and response contracts for the Rango API.

These Pydantic models are immutable value objects; wire names are
camelCase.
"""

from rango_client.contracts.approvals import CheckApproval, ExplorerLink, TransactionStatus
from rango_client.contracts.assets import Amount, Asset, AssetWithTicker, Token
from rango_client.contracts.balances import BalanceResponse, WalletBalance, WalletDetail
from rango_client.contracts.meta import BlockchainMeta, MetaResponse
from rango_client.contracts.quotes import (
    AmountRestriction,
    QuotePath,
    QuoteRequest,
    QuoteResponse,
    QuoteSimulationResult,
    RestrictionType,
    ResultType,
    SwapFee,
    SwapperMeta,
    SwapRequest,
)
from rango_client.contracts.reports import ReportEventType, ReportTxRequest

__all__ = [
    # Asset contracts
    "Asset",
    "AssetWithTicker",
    "Token",
    "Amount",
    # Balance contracts
    "WalletBalance",
    "WalletDetail",
    "BalanceResponse",
    # Quote contracts
    "ResultType",
    "RestrictionType",
    "SwapperMeta",
    "SwapFee",
    "AmountRestriction",
    "QuotePath",
    "QuoteSimulationResult",
    "QuoteRequest",
    "SwapRequest",
    "QuoteResponse",
    # Meta contracts
    "BlockchainMeta",
    "MetaResponse",
    # Approval / status contracts
    "CheckApproval",
    "TransactionStatus",
    "ExplorerLink",
    # Reports
    "ReportEventType",
    "ReportTxRequest",
]

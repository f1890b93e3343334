"""Typed async client for the Rango cross-chain swap API."""

from rango_client.api import RangoApi
from rango_client.client import Client
from rango_client.errors import (
    DecodeError,
    MalformedJson,
    MissingField,
    RangoApiError,
    TypeMismatch,
    UnknownVariant,
)
from rango_client.response import (
    SwapResponse,
    TransactionStatusResponse,
    decode_status_response,
    decode_swap_response,
    encode_swap_response,
)
from rango_client.transactions import (
    CosmosTransaction,
    EvmTransaction,
    Transfer,
    TransactionType,
    TransactionVariant,
    decode_transaction,
    encode_transaction,
)

__version__ = "0.1.0"

__all__ = [
    "Client",
    "RangoApi",
    # Transactions
    "TransactionType",
    "TransactionVariant",
    "EvmTransaction",
    "CosmosTransaction",
    "Transfer",
    "decode_transaction",
    "encode_transaction",
    # Responses
    "SwapResponse",
    "TransactionStatusResponse",
    "decode_swap_response",
    "decode_status_response",
    "encode_swap_response",
    # Errors
    "DecodeError",
    "MalformedJson",
    "MissingField",
    "TypeMismatch",
    "UnknownVariant",
    "RangoApiError",
]

"""Transaction payloads returned by the swap endpoint.

The ``tx`` object of a swap response is a tagged union: its ``type`` field
says which shape the rest of the object has. Pydantic cannot pick the
variant case-insensitively and report an unknown tag the way we want, so
decoding is done in two phases:

1. peek at ``type`` on the generic JSON tree
2. validate the same tree against the matching variant model

Each variant is its own frozen model, so a decoded value only ever carries
the fields of its own shape.
"""

import json
import logging
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import AliasChoices, Field

from rango_client.contracts.assets import AssetWithTicker
from rango_client.contracts.base import Decimals, WireModel
from rango_client.decoding import (
    RawPayload,
    dump_wire,
    ensure_object,
    join_path,
    parse_json,
    validate_model,
)
from rango_client.errors import MissingField, TypeMismatch, UnknownVariant

logger = logging.getLogger(__name__)


class TransactionType(str, Enum):
    """Wire values of the ``type`` discriminator."""

    EVM = "EVM"
    COSMOS = "COSMOS"
    TRANSFER = "TRANSFER"


# ======================
# EVM
# ======================


class EvmTransaction(WireModel):
    """Unsigned EVM call (optionally preceded by an approve)."""

    tx_type: Literal["EVM"] = Field("EVM", alias="type")
    block_chain: str
    from_address: Optional[str] = Field(None, alias="from")
    approve_to: Optional[str] = None
    approve_data: Optional[str] = None
    tx_to: str
    tx_data: Optional[str] = None
    value: Optional[str] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None

    @property
    def needs_approval(self) -> bool:
        """Whether an approve transaction must be sent first."""
        return bool(self.approve_to and self.approve_data)


# ======================
# Cosmos
# ======================


class SignType(str, Enum):
    """Cosmos signing mode."""

    AMINO = "AMINO"
    DIRECT = "DIRECT"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None


class CosmosCoin(WireModel):
    amount: str
    denom: str


class CosmosStdFee(WireModel):
    amount: tuple[CosmosCoin, ...]
    gas: str


class CosmosMessage(WireModel):
    """Sign document metadata for a Cosmos transaction."""

    sign_type: SignType
    sequence: Optional[str] = None
    source: Optional[Decimals] = None
    account_number: Optional[Decimals] = None
    rpc_url: Optional[str] = None
    chain_id: Optional[str] = None
    msgs: Optional[tuple[Any, ...]] = None
    proto_msgs: Optional[tuple[Any, ...]] = None
    memo: Optional[str] = None
    fee: Optional[CosmosStdFee] = None


class CosmosRawTransferData(WireModel):
    """Plain transfer equivalent of the Cosmos message."""

    amount: str
    asset: AssetWithTicker
    decimals: Decimals
    memo: Optional[str] = None
    method: str
    recipient: str


class CosmosTransaction(WireModel):
    """Cosmos SDK transaction to be signed by the source wallet."""

    tx_type: Literal["COSMOS"] = Field("COSMOS", alias="type")
    block_chain: str
    from_wallet_address: str
    message: CosmosMessage = Field(
        ...,
        validation_alias=AliasChoices("data", "message"),
        serialization_alias="data",
    )
    raw_transfer: CosmosRawTransferData


# ======================
# Transfer
# ======================


class Transfer(WireModel):
    """Native / same-chain transfer (UTXO chains and the like)."""

    tx_type: Literal["TRANSFER"] = Field("TRANSFER", alias="type")
    method: str
    asset: AssetWithTicker
    amount: str
    decimals: Decimals
    from_wallet_address: str
    recipient_address: str
    memo: Optional[str] = None


TransactionVariant = Union[EvmTransaction, CosmosTransaction, Transfer]

VARIANTS: dict[TransactionType, type] = {
    TransactionType.EVM: EvmTransaction,
    TransactionType.COSMOS: CosmosTransaction,
    TransactionType.TRANSFER: Transfer,
}


def read_tag(tree: dict, path: str = "tx") -> TransactionType:
    """Read and resolve the ``type`` discriminator of a transaction object."""
    tag_path = join_path(path, "type")
    if "type" not in tree:
        raise MissingField(tag_path)

    tag = tree["type"]
    if not isinstance(tag, str):
        raise TypeMismatch(tag_path, "string", tag)

    try:
        return TransactionType(tag.upper())
    except ValueError:
        logger.warning(f"Unknown transaction type {tag!r} at {tag_path}")
        raise UnknownVariant(tag, tag_path) from None


def decode_transaction(payload: Union[RawPayload, dict], path: str = "tx") -> TransactionVariant:
    """Decode a transaction object into its variant.

    Args:
        payload: Raw JSON bytes/str, or an already parsed JSON object
        path: Location of the object, used in error messages

    Raises:
        MalformedJson: payload is not JSON
        MissingField: ``type`` or a mandatory variant field is absent
        TypeMismatch: a field has the wrong JSON type
        UnknownVariant: ``type`` is not EVM, COSMOS or TRANSFER
    """
    tree = payload if isinstance(payload, dict) else parse_json(payload)
    ensure_object(tree, path)

    tx_type = read_tag(tree, path)
    variant = VARIANTS[tx_type]
    logger.debug(f"Decoding {path} as {variant.__name__}")

    # Re-validate the same subtree with the canonical tag
    return validate_model(variant, {**tree, "type": tx_type.value}, path)


def encode_transaction(tx: TransactionVariant) -> bytes:
    """Encode a transaction back to its wire form (tag under ``type``)."""
    return json.dumps(dump_wire(tx), separators=(",", ":")).encode("utf-8")

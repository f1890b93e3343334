"""Swap and status responses.

Both responses embed a transaction object whose shape is chosen by its
``type`` field. The wrapper fields are validated by pydantic, the embedded
transaction goes through ``decode_transaction``; if either part fails the
whole response fails, nothing partially decoded is returned.
"""

import json
import logging
from typing import Optional, Union

from rango_client.contracts.approvals import ExplorerLink, TransactionStatus
from rango_client.contracts.base import WireModel
from rango_client.contracts.quotes import QuoteSimulationResult, ResultType
from rango_client.decoding import (
    RawPayload,
    dump_wire,
    ensure_object,
    parse_json,
    validate_model,
)
from rango_client.errors import MissingField
from rango_client.transactions import TransactionVariant, decode_transaction

logger = logging.getLogger(__name__)


class SwapResponse(WireModel):
    """Response of the swap endpoint.

    ``route`` and ``error`` are independent of ``result_type``; the service
    sends ``tx`` in every case.
    """

    request_id: str
    result_type: ResultType
    route: Optional[QuoteSimulationResult] = None
    error: Optional[str] = None
    tx: TransactionVariant

    @property
    def is_ok(self) -> bool:
        return self.result_type == ResultType.OK


class TransactionStatusResponse(WireModel):
    """Response of the status endpoint.

    ``new_tx`` is set when the swap needs another transaction signed
    (multi-step routes).
    """

    status: Optional[TransactionStatus] = None
    error: Optional[str] = None
    output_amount: Optional[str] = None
    explorer_url: Optional[tuple[ExplorerLink, ...]] = None
    new_tx: Optional[TransactionVariant] = None

    @property
    def is_final(self) -> bool:
        return self.status in (TransactionStatus.SUCCESS, TransactionStatus.FAILED)


def decode_swap_response(payload: Union[RawPayload, dict]) -> SwapResponse:
    """Decode a swap response body.

    Raises:
        DecodeError: on any malformed part of the body (see rango_client.errors)
    """
    root = payload if isinstance(payload, dict) else parse_json(payload)
    ensure_object(root, "$")

    if "tx" not in root:
        raise MissingField("tx")
    tx = decode_transaction(ensure_object(root["tx"], "tx"), path="tx")

    response = validate_model(SwapResponse, {**root, "tx": tx})
    logger.debug(
        f"Decoded swap response {response.request_id}: "
        f"{response.result_type.value}, tx={response.tx.tx_type}"
    )
    return response


def decode_status_response(payload: Union[RawPayload, dict]) -> TransactionStatusResponse:
    """Decode a status response body, dispatching ``newTx`` if present."""
    root = payload if isinstance(payload, dict) else parse_json(payload)
    ensure_object(root, "$")

    new_tx = root.get("newTx")
    if new_tx is not None:
        root = {**root, "newTx": decode_transaction(ensure_object(new_tx, "newTx"), path="newTx")}

    return validate_model(TransactionStatusResponse, root)


def encode_swap_response(response: SwapResponse) -> bytes:
    """Encode a swap response back to its wire form."""
    return json.dumps(dump_wire(response), separators=(",", ":")).encode("utf-8")

"""Contracts for reporting client-side failures back to the service."""

from enum import Enum
from typing import Optional

from pydantic import Field

from rango_client.contracts.base import WireModel


class ReportEventType(str, Enum):
    """Why a transaction never reached the chain."""

    TX_FAIL = "TX_FAIL"
    SEND_TX_FAILED = "SEND_TX_FAILED"
    SMART_CONTRACT_CALL_FAILED = "SMART_CONTRACT_CALL_FAILED"
    USER_REJECT = "USER_REJECT"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    UNKNOWN = "UNKNOWN"


class ReportTxRequest(WireModel):
    """Body of the report-tx endpoint."""

    request_id: str
    event_type: ReportEventType = ReportEventType.TX_FAIL
    reason: str = Field(..., description="Human-readable failure reason")
    data: Optional[dict[str, str]] = Field(None, description="Extra key/value context")

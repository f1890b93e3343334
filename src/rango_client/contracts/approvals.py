"""Approval and transaction status contracts."""

from enum import Enum
from typing import Optional

from pydantic import Field

from rango_client.contracts.base import Flag, WireModel


class CheckApproval(WireModel):
    """Whether the approve transaction of a request went through."""

    is_approved: Flag
    tx_status: Optional[str] = Field(None, description="running, success or failed")
    current_approved_amount: Optional[str] = None
    required_approved_amount: Optional[str] = None


class TransactionStatus(str, Enum):
    """Execution state of a submitted swap transaction."""

    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"


class ExplorerLink(WireModel):
    """Explorer link for one transaction of the swap."""

    url: str
    description: Optional[str] = None

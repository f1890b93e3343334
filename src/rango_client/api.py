"""Rango basic API over HTTP.

API docs: https://docs.rango.exchange/api-integration/basic-api-single-step
"""

import logging
from typing import Any, Optional

import httpx

from rango_client.config import DEFAULT_API_URL, Settings
from rango_client.contracts.approvals import CheckApproval
from rango_client.contracts.balances import BalanceResponse
from rango_client.contracts.meta import MetaResponse
from rango_client.contracts.quotes import QuoteRequest, QuoteResponse, SwapRequest
from rango_client.contracts.reports import ReportTxRequest
from rango_client.decoding import decode_model, dump_wire
from rango_client.errors import RangoApiError
from rango_client.response import (
    SwapResponse,
    TransactionStatusResponse,
    decode_status_response,
    decode_swap_response,
)

logger = logging.getLogger(__name__)

API_KEY_PARAM = "apiKey"


class RangoApi:
    """Thin async wrapper over the Rango basic API.

    Every method performs one HTTP call and decodes the body into a typed
    model. Transport failures raise ``RangoApiError``; bodies that do not
    match the expected shape raise a ``DecodeError``.
    """

    DEFAULT_URL = DEFAULT_API_URL

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the API wrapper.

        Args:
            base_url: Service root, e.g. https://api.rango.exchange/
            api_key: Key appended as apiKey query param (None = anonymous)
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid Rango API url {base_url!r}: {e}") from e
        if not url.scheme or not url.host:
            raise ValueError(f"Invalid Rango API url {base_url!r}")
        if not url.path.endswith("/"):
            url = url.copy_with(path=url.path + "/")

        self.base_url = url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def with_default_url(cls, api_key: Optional[str] = None) -> "RangoApi":
        """Create an API wrapper pointed at the public endpoint."""
        return cls(cls.DEFAULT_URL, api_key)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "RangoApi":
        """Create an API wrapper from client settings."""
        return cls(
            settings.api_url,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
            transport=transport,
        )

    def form_authenticated_url(self, path: str) -> httpx.URL:
        """Resolve ``path`` against the base URL and append the API key."""
        url = self.base_url.join(path.lstrip("/"))
        if self.api_key:
            url = url.copy_merge_params({API_KEY_PARAM: self.api_key})
        return url

    @staticmethod
    def redact(url: httpx.URL) -> str:
        """Render ``url`` for logs and errors with the API key masked."""
        if API_KEY_PARAM in url.params:
            url = url.copy_set_param(API_KEY_PARAM, "***")
        return str(url)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        json_body: Optional[dict[str, Any]] = None,
    ) -> bytes:
        """Perform one HTTP call and return the raw body."""
        # httpx replaces the URL query when params= is passed, so merge here
        url = self.form_authenticated_url(path)
        if params:
            url = url.copy_merge_params(params)
        safe_url = self.redact(url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=json_body,
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.warning(f"Rango API {method} {path} failed: {type(e).__name__}: {e}")
            raise RangoApiError(f"{method} {path} failed: {e}", url=safe_url) from e

        if not response.is_success:
            logger.warning(
                f"Rango API error: {method} {path} -> {response.status_code} - {response.text[:200]}"
            )
            raise RangoApiError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                url=safe_url,
            )

        logger.debug(f"Rango API {method} {path} -> {response.status_code} ({len(response.content)} bytes)")
        return response.content

    async def get_approval_status(self, request_id: str, transaction_id: str) -> CheckApproval:
        """Returns the approval status of a specific request for a transaction."""
        body = await self._request(
            "GET",
            "basic/is-approved",
            params={"requestId": request_id, "txId": transaction_id},
        )
        return decode_model(CheckApproval, body)

    async def get_balance(self, blockchain: str, address: str) -> BalanceResponse:
        """Get balances of ``address`` on ``blockchain``."""
        body = await self._request(
            "GET",
            "basic/balance",
            params={"blockchain": blockchain, "address": address},
        )
        return decode_model(BalanceResponse, body)

    async def get_meta(self) -> MetaResponse:
        """Get supported blockchains, tokens and swappers."""
        body = await self._request("GET", "basic/meta")
        return decode_model(MetaResponse, body)

    async def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """Get the best route for a swap without building a transaction."""
        logger.info(f"Requesting quote: {request.amount} {request.from_asset} -> {request.to_asset}")
        body = await self._request("GET", "basic/quote", params=request.to_params())
        return decode_model(QuoteResponse, body)

    async def swap(self, request: SwapRequest) -> SwapResponse:
        """Get the best route together with the transaction to sign."""
        logger.info(f"Requesting swap: {request.amount} {request.from_asset} -> {request.to_asset}")
        body = await self._request("GET", "basic/swap", params=request.to_params())
        response = decode_swap_response(body)
        logger.info(
            f"Swap {response.request_id}: {response.result_type.value} "
            f"({response.tx.tx_type} transaction)"
        )
        return response

    async def get_status(self, request_id: str, transaction_id: str) -> TransactionStatusResponse:
        """Check the execution status of a submitted swap transaction."""
        body = await self._request(
            "GET",
            "basic/status",
            params={"requestId": request_id, "txId": transaction_id},
        )
        return decode_status_response(body)

    async def report_failure(self, report: ReportTxRequest) -> None:
        """Tell the service a transaction failed before reaching the chain."""
        logger.info(f"Reporting {report.event_type.value} for {report.request_id}: {report.reason}")
        await self._request("POST", "basic/report-tx", json_body=dump_wire(report))

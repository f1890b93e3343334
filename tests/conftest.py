"""Pytest configuration and fixtures."""

import os
from typing import Callable

import httpx
import pytest

# Set test environment
os.environ["RANGO_ENVIRONMENT"] = "test"
os.environ["RANGO_DEBUG"] = "false"
os.environ.pop("RANGO_API_KEY", None)
os.environ.pop("RANGO_API_URL", None)

from rango_client.api import RangoApi
from rango_client.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so env changes in a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def evm_tx() -> dict:
    """EVM transaction with every optional field set."""
    return {
        "type": "EVM",
        "blockChain": "ETH",
        "from": "0x1111111111111111111111111111111111111111",
        "approveTo": "0x2222222222222222222222222222222222222222",
        "approveData": "0x095ea7b3",
        "txTo": "0x3333333333333333333333333333333333333333",
        "txData": "0x7ff36ab5",
        "value": "1000000000000000000",
        "gasLimit": "250000",
        "gasPrice": "30000000000",
    }


@pytest.fixture
def cosmos_tx() -> dict:
    """Cosmos transaction as sent by the swap endpoint."""
    return {
        "type": "COSMOS",
        "blockChain": "OSMOSIS",
        "fromWalletAddress": "osmo1sender",
        "data": {
            "signType": "AMINO",
            "sequence": "42",
            "source": 1,
            "accountNumber": 123456,
            "rpcUrl": "https://rpc.osmosis.zone",
            "chainId": "osmosis-1",
            "msgs": [{"typeUrl": "/ibc.applications.transfer.v1.MsgTransfer", "value": {"sender": "osmo1sender"}}],
            "protoMsgs": [],
            "memo": "swap",
            "fee": {"amount": [{"amount": "5000", "denom": "uosmo"}], "gas": "200000"},
        },
        "rawTransfer": {
            "amount": "1000000",
            "asset": {"blockchain": "OSMOSIS", "symbol": "OSMO", "ticker": "uosmo"},
            "decimals": 6,
            "memo": "swap",
            "method": "transfer",
            "recipient": "osmo1recipient",
        },
    }


@pytest.fixture
def transfer_tx() -> dict:
    """Native BTC transfer."""
    return {
        "type": "TRANSFER",
        "method": "transfer",
        "asset": {"blockchain": "BTC", "symbol": "BTC", "ticker": "BTC"},
        "amount": "150000",
        "decimals": 8,
        "fromWalletAddress": "bc1qsender",
        "recipientAddress": "bc1qvault",
        "memo": "=:ETH.ETH:0xabc",
    }


@pytest.fixture
def token_payload() -> Callable[..., dict]:
    def make(symbol: str = "USDT", blockchain: str = "ETH", address=None, decimals: int = 6) -> dict:
        return {
            "blockchain": blockchain,
            "symbol": symbol,
            "address": address,
            "decimals": decimals,
            "image": f"https://img.example/{symbol.lower()}.png",
        }

    return make


@pytest.fixture
def route_payload(token_payload) -> dict:
    """Priced route with one hop and one fee."""
    swapper = {"id": "UniSwapV3", "title": "Uniswap V3", "logo": "https://img.example/uni.png"}
    eth = token_payload("ETH", decimals=18)
    usdt = token_payload("USDT", address="0xdac17f958d2ee523a2206206994597c13d831ec7")
    return {
        "outputAmount": "3450120000",
        "swapper": swapper,
        "path": [
            {
                "from": eth,
                "to": usdt,
                "swapper": swapper,
                "swapperType": "DEX",
                "expectedOutput": "3450.12",
                "estimatedTimeInSeconds": 45,
            }
        ],
        "fee": [
            {
                "name": "Network Fee",
                "token": token_payload("ETH", decimals=18),
                "expenseType": "FROM_SOURCE_WALLET",
                "amount": "0.0042",
                "price": 3450.0,
            }
        ],
        "amountRestriction": {"min": "0.01", "max": "100", "type": "EXCLUSIVE"},
        "estimatedTimeInSeconds": 45,
    }


@pytest.fixture
def swap_body(route_payload, evm_tx) -> dict:
    return {
        "requestId": "967efbd7-797e-429b-a587-ac973d8c8bea",
        "resultType": "OK",
        "route": route_payload,
        "error": None,
        "tx": evm_tx,
    }


@pytest.fixture
def mock_api() -> Callable[..., tuple[RangoApi, list]]:
    """Build a RangoApi whose HTTP calls are answered by ``handler``.

    Returns the api and the list of requests it sent.
    """

    def make(handler: Callable[[httpx.Request], httpx.Response], api_key=None, base_url=RangoApi.DEFAULT_URL):
        sent: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        api = RangoApi(base_url, api_key=api_key, transport=httpx.MockTransport(record))
        return api, sent

    return make

"""Command line entry point: python -m rango_client

Usage:
    python -m rango_client decode response.json
    python -m rango_client approval <request_id> <tx_id>
    python -m rango_client status <request_id> <tx_id>
    python -m rango_client balance <blockchain> <address>
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from rango_client.client import Client
from rango_client.config import get_settings
from rango_client.decoding import dump_wire
from rango_client.errors import DecodeError, RangoApiError
from rango_client.response import decode_swap_response

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure root logging once for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rango-client", description="Rango swap API client")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    decode = commands.add_parser("decode", help="Decode a saved swap response")
    decode.add_argument("path", type=Path, help="JSON file with a swap response body")

    approval = commands.add_parser("approval", help="Check approval status of a request")
    approval.add_argument("request_id")
    approval.add_argument("tx_id")

    status = commands.add_parser("status", help="Check execution status of a swap")
    status.add_argument("request_id")
    status.add_argument("tx_id")

    balance = commands.add_parser("balance", help="Get wallet balances on a chain")
    balance.add_argument("blockchain")
    balance.add_argument("address")

    return parser


async def run(args: argparse.Namespace) -> BaseModel:
    """Execute the selected command and return its result model."""
    if args.command == "decode":
        return decode_swap_response(args.path.read_bytes())

    api = Client.from_settings().api
    if args.command == "approval":
        return await api.get_approval_status(args.request_id, args.tx_id)
    if args.command == "status":
        return await api.get_status(args.request_id, args.tx_id)
    return await api.get_balance(args.blockchain, args.address)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.debug or settings.debug)
    logger.debug(f"Settings: {settings.get_safe_dict()}")

    try:
        result = asyncio.run(run(args))
    except DecodeError as e:
        logger.error(f"Could not decode response: {e}")
        return 2
    except RangoApiError as e:
        logger.error(f"Rango API error: {e}")
        return 1

    print(json.dumps(dump_wire(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

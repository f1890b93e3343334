"""Top-level client object."""

from typing import Optional

import httpx

from rango_client.api import RangoApi
from rango_client.config import Settings, get_settings


class Client:
    """Entry point holding a configured ``RangoApi``."""

    def __init__(self, api_key: Optional[str] = None, api: Optional[RangoApi] = None):
        self.api = api or RangoApi.with_default_url(api_key)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "Client":
        """Build a client from environment settings."""
        settings = settings or get_settings()
        return cls(api=RangoApi.from_settings(settings, transport=transport))

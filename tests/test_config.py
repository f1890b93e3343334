"""Tests for settings, the client facade and the CLI."""

import json

import httpx
import pytest

from rango_client.__main__ import main
from rango_client.client import Client
from rango_client.config import DEFAULT_API_URL, Settings, get_settings


class TestSettings:
    """Tests for environment driven settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.api_url == DEFAULT_API_URL
        assert settings.api_key is None
        assert settings.has_api_key is False
        assert settings.environment == "test"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RANGO_API_KEY", "super-secret")
        monkeypatch.setenv("RANGO_REQUEST_TIMEOUT", "5")

        settings = get_settings()

        assert settings.api_key == "super-secret"
        assert settings.request_timeout == 5.0

    def test_safe_dict_redacts_key(self, monkeypatch):
        monkeypatch.setenv("RANGO_API_KEY", "super-secret")

        data = get_settings().get_safe_dict()

        assert data["api_key"] == "***"
        assert "super-secret" not in json.dumps(data)


class TestClient:
    """Tests for the Client facade."""

    def test_default_client(self):
        client = Client(api_key="k")

        assert client.api.api_key == "k"
        assert str(client.api.base_url) == DEFAULT_API_URL

    @pytest.mark.asyncio
    async def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("RANGO_API_URL", "https://staging.example/")
        monkeypatch.setenv("RANGO_API_KEY", "staging-key")
        sent = []

        def handler(request):
            sent.append(request)
            return httpx.Response(200, json={"isApproved": False})

        client = Client.from_settings(transport=httpx.MockTransport(handler))
        result = await client.api.get_approval_status("r1", "0x1")

        assert result.is_approved is False
        assert sent[0].url.host == "staging.example"
        assert sent[0].url.params["apiKey"] == "staging-key"


class TestCli:
    """Tests for python -m rango_client."""

    def test_decode_command(self, tmp_path, capsys, swap_body):
        path = tmp_path / "swap.json"
        path.write_text(json.dumps(swap_body))

        exit_code = main(["decode", str(path)])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["requestId"] == swap_body["requestId"]
        assert output["tx"]["type"] == "EVM"

    def test_decode_command_rejects_bad_payload(self, tmp_path, swap_body):
        swap_body["tx"]["type"] = "FOO"
        path = tmp_path / "swap.json"
        path.write_text(json.dumps(swap_body))

        assert main(["decode", str(path)]) == 2

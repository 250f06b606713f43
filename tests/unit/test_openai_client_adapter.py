from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from nyaya.gateway.exceptions import ModelTimeoutError, ModelTransportError
from nyaya.gateway.openai_client_adapter import OpenAIClientAdapter

_REQUEST = httpx.Request("POST", "https://api.example.test/v1/chat/completions")


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "nyaya.gateway.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


async def _complete(adapter: OpenAIClientAdapter) -> str:
    return await adapter.create_chat_completion(
        model="m",
        temperature=0.7,
        max_tokens=2000,
        system_prompt="system",
        user_prompt="user",
    )


class TestOpenAIClientAdapter:
    @pytest.mark.asyncio
    async def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_make_mock_response('{"ok": true}')
        )
        adapter = _make_adapter(mock_client)
        assert await _complete(adapter) == '{"ok": true}'

    @pytest.mark.asyncio
    async def test_passes_request_parameters(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=_make_mock_response("x"))
        adapter = _make_adapter(mock_client)
        await _complete(adapter)
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["max_tokens"] == 2000
        assert kwargs["temperature"] == 0.7
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_disables_sdk_retries(self) -> None:
        with patch("nyaya.gateway.openai_client_adapter.openai.AsyncOpenAI") as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=60, base_url="https://api.x.ai/v1")
        mock_cls.assert_called_once_with(
            api_key="k", timeout=60, base_url="https://api.x.ai/v1", max_retries=0
        )

    @pytest.mark.asyncio
    async def test_none_content_returns_empty_string(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=_make_mock_response(None))
        adapter = _make_adapter(mock_client)
        assert await _complete(adapter) == ""

    @pytest.mark.asyncio
    async def test_no_choices_raises_transport_error(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=response)
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelTransportError, match="no choices"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_timeout_maps_to_timeout_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.APITimeoutError(request=_REQUEST)
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelTimeoutError):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_connection_error_maps_to_transport_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.APIConnectionError(request=_REQUEST)
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelTransportError, match="network error"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_http_error_maps_to_transport_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=httpx.ConnectError("connection refused")
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelTransportError):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_status_error_maps_to_transport_error(self) -> None:
        response = httpx.Response(429, request=_REQUEST)
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.RateLimitError("rate limited", response=response, body=None)
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelTransportError, match="API error"):
            await _complete(adapter)

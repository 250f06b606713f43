import httpx
import openai

from nyaya.gateway.client_base import BaseModelClient
from nyaya.gateway.exceptions import ModelTimeoutError, ModelTransportError
from nyaya.logging.logger import Log


class OpenAIClientAdapter(BaseModelClient):
    """Model client built on the OpenAI-compatible chat completions API.

    SDK-level retries are disabled: one invocation is one HTTP call.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise ModelTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.HTTPError) as exc:
            raise ModelTransportError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelTransportError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelTransportError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            Log.warning("AI returned an empty message")
            return ""
        return content

from nyaya.gateway.client_base import BaseModelClient
from nyaya.gateway.exceptions import ModelUnavailableError
from nyaya.gateway.models import ModelRequest, ModelResponse
from nyaya.logging.logger import Log


class ModelGateway:
    """Sole integration point with the external generative model.

    Stateless per call: each invocation issues exactly one request and keeps
    no conversation state. A gateway without a client is "unconfigured" and
    fails every call with ModelUnavailableError.
    """

    def __init__(
        self,
        *,
        client: BaseModelClient | None,
        model: str,
        system_prompt: str = "",
        provider: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._system_prompt = system_prompt
        self._provider = provider

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    @property
    def provider(self) -> str:
        return self._provider

    async def invoke(self, request: ModelRequest) -> ModelResponse:
        """Send *request* to the model.

        Raises:
            ModelUnavailableError: if no credentials are configured.
            ModelTimeoutError: if the call timed out.
            ModelTransportError: on network or HTTP failure.
        """
        if self._client is None:
            raise ModelUnavailableError(
                f"Model provider '{self._provider}' is not configured"
            )
        Log.debug(f"Model prompt ({request.max_tokens} max tokens):\n{request.prompt_text}")
        raw_text = await self._client.create_chat_completion(
            model=self._model,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=request.prompt_text,
        )
        Log.debug(f"Model raw response:\n{raw_text}")
        return ModelResponse(raw_text=raw_text)

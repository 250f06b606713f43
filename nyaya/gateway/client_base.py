from abc import ABC, abstractmethod


class BaseModelClient(ABC):
    """Async chat completion contract behind ModelGateway.

    One call is one request with an explicit token budget. Implementations
    translate provider failures into the gateway's error classes and never
    retry on their own; retry policy belongs to the orchestrator.
    """

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider response as plain text.

        Raises:
            ModelTimeoutError: if the call timed out.
            ModelTransportError: on any other network or HTTP failure.
        """

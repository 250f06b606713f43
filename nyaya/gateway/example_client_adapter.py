"""Example model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelClient and register the provider in ModelGatewayFactory.
"""

import json
from typing import ClassVar

from nyaya.gateway.client_base import BaseModelClient


class ExampleClientAdapter(BaseModelClient):
    """Offline adapter that returns a fixed JSON reply.

    The reply carries an empty red flag list and a placeholder for every
    free-text task, so each task validates to its neutral result. Useful for
    local development and as a template for real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "redFlags": [],
        "simplifiedText": "Example response",
        "translatedText": "Example response",
        "advice": "Example response",
        "response": "Example response",
    }

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)

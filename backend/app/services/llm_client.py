import logging
from typing import Optional, Protocol, Type
from pydantic import BaseModel
from autogen_core.models import ChatCompletionClient, UserMessage
from autogen_ext.models.openai import AzureOpenAIChatCompletionClient
from backend.app.services.exceptions import ConfigurationError
from shared.config import settings

logger = logging.getLogger(__name__)


class CompletionBackend(Protocol):
    """The remote model as a black box: prompt in, text out."""

    @property
    def configured(self) -> bool: ...

    async def complete(self, prompt: str, schema: Optional[Type[BaseModel]] = None) -> str: ...


def _azure_client() -> AzureOpenAIChatCompletionClient:
    return AzureOpenAIChatCompletionClient(
        azure_deployment=settings.az_deployment,
        model=settings.az_model,
        api_version=settings.az_api_version,
        azure_endpoint=settings.az_endpoint,
        api_key=settings.az_api_key,
    )


class AzureCompletionClient:
    """
    Azure OpenAI completion backend.

    The underlying client is only built when a credential is configured, so a
    missing key is reported by `configured` instead of failing at startup.
    """

    def __init__(self, client: Optional[ChatCompletionClient] = None):
        self._client = client
        if self._client is None and settings.az_api_key:
            self._client = _azure_client()

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def complete(self, prompt: str, schema: Optional[Type[BaseModel]] = None) -> str:
        if self._client is None:
            raise ConfigurationError("AZURE_OPENAI_API_KEY is not configured")
        logger.info(f"Completion request: model={settings.az_model} prompt_len={len(prompt)} structured={schema is not None}")
        result = await self._client.create(
            [UserMessage(content=prompt, source="user")],
            json_output=schema,
        )
        content = result.content
        if not isinstance(content, str):
            # function-call results are never requested here
            raise TypeError(f"Unexpected completion content: {type(content).__name__}")
        logger.info(f"Completion done: output_len={len(content)}")
        return content

    async def close(self):
        if self._client is not None:
            await self._client.close()

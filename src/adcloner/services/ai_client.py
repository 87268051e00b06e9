"""
OpenAI client wrapper for structured listing generation.

One awaitable call per request: prompt + JSON schema in, raw JSON text out.
The SDK's own retries are turned off so a failed call fails once.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from openai import AsyncOpenAI, OpenAIError

from ..config import Config
from ..exceptions import ConfigurationError, MalformedResponseError, RemoteCallError
from ..logger import get_logger

logger = get_logger(__name__)


SYSTEM_PROMPT = """You are a precise e-commerce data assistant.
Output MUST be a single valid JSON object that conforms to the provided JSON Schema.
No markdown, no code fences, no commentary."""


class ListingAIClient:
    """
    Submit a prompt plus a structured-output schema to a named model.

    The credential is passed in by the caller; this class never reads the
    environment.
    """

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout_s: Optional[float] = None,
        base_url: Optional[str] = None,
        client_factory: Optional[Callable[[], Any]] = None,
    ):
        """
        Initialize the client.

        An SDK client is opened and closed around every call; its connection
        pool is bound to the event loop it was first used on.

        Args:
            api_key: OpenAI API key
            model: Model name (default from config)
            temperature: Sampling temperature (default from config)
            timeout_s: Per-request timeout in seconds (default from config)
            base_url: OpenAI-compatible endpoint (default from config, then SDK default)
            client_factory: Zero-argument callable returning an
                AsyncOpenAI-compatible async context manager (tests)

        Raises:
            ConfigurationError: If api_key is empty
        """
        if not api_key:
            raise ConfigurationError("An OpenAI API key is required")

        self.model = model or Config.OPENAI_MODEL
        self.temperature = Config.OPENAI_TEMPERATURE if temperature is None else temperature
        self.timeout_s = timeout_s or Config.OPENAI_TIMEOUT_S
        self.base_url = base_url or Config.OPENAI_BASE_URL

        self._api_key = api_key
        self._client_factory = client_factory or self._new_sdk_client
        logger.info(f"AI client initialized with model: {self.model}")

    def _new_sdk_client(self) -> AsyncOpenAI:
        """Build a fresh SDK client with retries disabled."""
        return AsyncOpenAI(
            api_key=self._api_key,
            base_url=self.base_url,
            timeout=self.timeout_s,
            max_retries=0,
        )

    @classmethod
    def from_config(cls) -> ListingAIClient:
        """Build a client from Config, failing fast without a credential."""
        return cls(api_key=Config.require_api_key())

    async def generate_json(
        self,
        prompt: str,
        schema: Dict[str, Any],
        schema_name: str,
    ) -> str:
        """
        Ask the model for a JSON object matching ``schema``.

        Args:
            prompt: User instruction
            schema: JSON Schema of the expected object
            schema_name: Identifier for the schema in the request

        Returns:
            Raw response text (expected, not guaranteed, to be valid JSON)

        Raises:
            RemoteCallError: If the provider call fails
            MalformedResponseError: If the provider returns no content
        """
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

        logger.info(f"Calling {self.model} (schema: {schema_name}, prompt: {len(prompt)} chars)")

        try:
            async with self._client_factory() as client:
                response = await client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.temperature,
                    response_format={
                        "type": "json_schema",
                        "json_schema": {
                            "name": schema_name,
                            "schema": schema,
                            "strict": False,
                        },
                    },
                )
        except OpenAIError as e:
            raise RemoteCallError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise MalformedResponseError("Empty response from LLM (no choices)")

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise MalformedResponseError("Empty response from LLM")

        logger.debug(f"LLM raw response: {content[:500]}")
        return content

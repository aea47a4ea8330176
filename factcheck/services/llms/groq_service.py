from typing import Any, Dict, Optional

import groq
from groq import AsyncGroq

from factcheck.core.config import settings
from factcheck.core.errors import (
    ProviderAuthError,
    ProviderConfigurationError,
    ProviderError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from factcheck.core.logger import get_logger

logger = get_logger(__name__)


class GroqService:
    """
    Black-box text generation through Groq chat completions.

    Provider failures are translated into typed errors so callers can tell an
    invalid key, a rate limit and a timeout apart. Nothing is retried here.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        api_key = api_key or settings.GROQ_API_KEY
        if not api_key:
            logger.error("[GroqService] GROQ_API_KEY missing from environment")
            raise ProviderConfigurationError()

        self.client = AsyncGroq(api_key=api_key)
        self.model = model or settings.LLM_MODEL_NAME
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature

    async def generate(self, prompt: str, schema: Optional[Dict[str, Any]] = None) -> str:
        """
        Run one completion and return the raw reply text.

        When ``schema`` is given the provider is asked for schema-guided JSON;
        the reply is still returned as text and parsed by the caller.
        """
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
        }

        if schema is not None:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {"name": "fact_check_response", "schema": schema},
            }

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except groq.AuthenticationError as e:
            logger.error(f"[GroqService] Authentication failed: {e}")
            raise ProviderAuthError() from e
        except groq.RateLimitError as e:
            logger.warning(f"[GroqService] Rate limit hit: {e}")
            raise ProviderRateLimitError() from e
        except groq.APITimeoutError as e:
            logger.warning(f"[GroqService] Request timed out: {e}")
            raise ProviderTimeoutError() from e
        except groq.APIError as e:
            logger.error(f"[GroqService] Groq call failed: {e}")
            raise ProviderError(f"AI model error: {e}") from e

        return response.choices[0].message.content or ""

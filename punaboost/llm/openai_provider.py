"""
OpenAI-compatible provider. Talks to OpenRouter unless LLM_BASE_URL says otherwise.
"""
import logging
from typing import Dict, List, Optional

from openai import APIError, OpenAI

from punaboost.core import config
from punaboost.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

APP_TITLE = "PunaBoost AI Job Matcher"


class OpenAIProvider(LLMProvider):
    """Chat completions through the official OpenAI SDK."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = api_key or config.LLM_API_KEY
        if not self.api_key:
            raise ValueError("OPENROUTER_API_KEY not configured")
        self.client = OpenAI(
            api_key=self.api_key,
            base_url=base_url or config.LLM_BASE_URL,
            # OpenRouter attributes traffic by these two headers
            default_headers={"HTTP-Referer": config.LLM_REFERER, "X-Title": APP_TITLE},
        )
        logger.info("OpenAI-compatible provider initialized")

    def chat(
        self,
        messages: List[Dict[str, str]],
        model: str = config.LLM_MODEL,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a chat completion."""
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens or 2000,
                **kwargs
            )
        except APIError as e:
            logger.error(f"LLM API error: {e}", exc_info=True)
            raise

        content = response.choices[0].message.content or ""
        usage = response.usage
        return LLMResponse(
            content=content,
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            model=model,
            metadata={"finish_reason": response.choices[0].finish_reason},
        )

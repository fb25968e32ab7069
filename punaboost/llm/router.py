"""
Model selection per feature, and the provider dependency used by the API.
"""
import logging
from typing import Optional

from punaboost.core import config
from punaboost.llm.openai_provider import OpenAIProvider
from punaboost.llm.provider import LLMProvider

logger = logging.getLogger(__name__)

# Feature -> model mapping
MODEL_ROUTING = {
    "job_recommendation": config.LLM_MODEL,
}


def get_model_for_feature(feature: str) -> str:
    return MODEL_ROUTING.get(feature, config.LLM_MODEL)


def is_model_available() -> bool:
    """Check if an LLM key is configured."""
    return bool(config.LLM_API_KEY)


def get_llm_provider() -> Optional[LLMProvider]:
    """
    FastAPI dependency. Returns None when no key is configured so callers can
    degrade to an empty result instead of failing.
    """
    if not is_model_available():
        logger.warning("LLM API key is not configured; AI features are disabled")
        return None

    return OpenAIProvider()

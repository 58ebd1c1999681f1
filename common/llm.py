# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
LLM Factory

Builds LangChain chat models backed by litellm so agents can target any
provider (gemini, anthropic, openai, groq, openrouter, mistral) by model name.
"""

import logging
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_community.chat_models import ChatLiteLLM

from config.config import LLM_MODEL, LLM_TEMPERATURE, LLM_TIMEOUT_SECONDS

logger = logging.getLogger("vacation.common.llm")


def get_llm(
    model: Optional[str] = None,
    streaming: bool = False,
    temperature: Optional[float] = None,
) -> BaseChatModel:
    """
    Create a chat model for the given litellm model name.

    Args:
        model: litellm model id (e.g. "gemini/gemini-2.0-flash"), defaults to LLM_MODEL
        streaming: Whether the model streams tokens
        temperature: Sampling temperature, defaults to LLM_TEMPERATURE

    Returns:
        BaseChatModel: Ready-to-use chat model
    """
    model_name = model or LLM_MODEL
    logger.debug(f"Creating chat model {model_name} (streaming={streaming})")
    return ChatLiteLLM(
        model=model_name,
        streaming=streaming,
        temperature=LLM_TEMPERATURE if temperature is None else temperature,
        request_timeout=LLM_TIMEOUT_SECONDS,
    )

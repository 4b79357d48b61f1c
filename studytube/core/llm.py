"""
Chat model construction.
"""

from typing import Optional, Union

from langchain.chat_models import init_chat_model
from langchain_core.language_models.chat_models import BaseChatModel

from studytube.config import LLMConfig, LLMDisabled
from studytube.utils.logger import logging


def build_chat_model(llm_config: Union[LLMConfig, LLMDisabled]) -> Optional[BaseChatModel]:
    """
    Create the chat model described by the configuration.

    Returns:
        A chat model, or None when the LLM is disabled
    """
    if isinstance(llm_config, LLMDisabled):
        logging.info(f"LLM disabled ({llm_config.reason}); using template generation")
        return None

    logging.info(f"Using {llm_config.provider} model {llm_config.model}")
    return init_chat_model(
        model=llm_config.model,
        model_provider=llm_config.provider,
        temperature=llm_config.temperature,
        max_tokens=llm_config.max_tokens,
        api_key=llm_config.api_key,
    )

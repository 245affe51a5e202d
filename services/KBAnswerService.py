# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-27
# Updated: 2026-10-17
# Description: KBAnswerService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Any, List

import settings
from chat.OpenAIChat import Message
from utility.logging_utils import get_class_logger

NOT_ENOUGH_INFORMATION = "I don't have enough information to answer this question."

ANSWER_ERROR_MESSAGE = "Sorry, I encountered an error while generating an answer."


@dataclass
class KBAnswerService:
    """
    Answer Service:
        - builds the instruction + context prompt
        - calls the chat client once
        - returns the answer text, or a fixed apology on any failure
    """
    chat_client: Any  # OpenAIChat or anything exposing chat(messages, temperature=, max_tokens=)
    logger: logging.Logger | None = None

    system_prompt: str = (
        "You are a helpful assistant that answers questions based on the provided context. "
        f"If the answer cannot be found in the context, just say '{NOT_ENOUGH_INFORMATION}'"
    )

    temperature: float = settings.ANSWER_TEMPERATURE
    max_tokens: int = settings.ANSWER_MAX_TOKENS

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.logger.info(
            "KBAnswerService initialised (chat_client=%s temperature=%s max_tokens=%s)",
            type(self.chat_client).__name__,
            self.temperature,
            self.max_tokens,
        )

    def build_messages(self, query: str, context: str) -> List[Message]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": f"Context: {context}\n\nQuestion: {query}\n\nAnswer:"},
        ]

    def generate_answer(self, query: str, context: str) -> str:
        self.logger.info("Generating answer (context_chars=%d)...", len(context))
        try:
            resp = self.chat_client.chat(
                self.build_messages(query, context),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            return resp.choices[0].message.content or ""
        except Exception as e:
            self.logger.error("Error generating answer: %s", e, exc_info=True)
            return ANSWER_ERROR_MESSAGE

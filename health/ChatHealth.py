# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-06
# Updated: 2026-10-17
# Description: ChatHealth
# -----------------------------------------------------------------------------

import time
import logging
from typing import Optional

from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from utility.logging_utils import get_logger


class ChatHealth:
    """
    Smoke test for chat-completion connectivity.
    """

    def __init__(self, cfg: Config, chat: Optional[OpenAIChat] = None, logger: Optional[logging.Logger] = None):
        self.cfg = cfg
        self.logger = logger or get_logger(__name__)
        self.chat = chat or OpenAIChat(cfg=cfg)

    def run(self) -> bool:
        self.logger.info("Starting chat healthcheck with model: %s", self.cfg.openai_chat_model)
        start = time.time()

        ok = self.chat.healthcheck()
        elapsed_ms = (time.time() - start) * 1000.0

        if ok:
            self.logger.info("Chat call succeeded in %.1f ms.", elapsed_ms)
        else:
            self.logger.error("Chat healthcheck FAILED after %.1f ms.", elapsed_ms)
        return ok

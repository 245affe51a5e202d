# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-10-17
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Optional

from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from embedding.JinaEmbedder import JinaEmbedder
from loader.KBDocumentLoader import KBDocumentLoader
from retrieval.KBRetriever import KBRetriever
from services.KBAnswerService import KBAnswerService
from services.KBAskService import KBAskService
from utility.logging_utils import get_class_logger


class AppContainer:
    """
    Owns object instantiation and application wiring for one CLI run.

    Release the embedder HTTP client with aclose() once done.
    """

    def __init__(self, cfg: Optional[Config] = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("Config: %s", self.cfg.summary())
        missing = self.cfg.missing()
        if missing:
            self.logger.warning("Missing environment variables (calls will fail): %s", missing)

        # Local documents
        self.document_loader = KBDocumentLoader(self.cfg.knowledge_base_dir)

        # One embedder for query and documents
        self.embedder = JinaEmbedder(cfg=self.cfg)
        self.retriever = KBRetriever(embedder=self.embedder)

        self.openai_chat = OpenAIChat(cfg=self.cfg)
        self.answer_service = KBAnswerService(chat_client=self.openai_chat)

        self.ask_service = KBAskService(
            retriever=self.retriever,
            answer_service=self.answer_service,
        )
        self.closed = False

    async def aclose(self) -> None:
        await self.embedder.aclose()
        self.closed = True

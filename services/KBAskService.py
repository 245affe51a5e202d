# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: KBAskService.py
# -----------------------------------------------------------------------------
import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from document.KBDocument import KBDocument, ScoredDocument
from retrieval.KBRetriever import KBRetriever
from services.KBAnswerService import KBAnswerService
from utility.logging_utils import get_class_logger

CONTEXT_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class AskResult:
    query: str
    sources: List[ScoredDocument] = field(default_factory=list)
    context: str = ""
    answer: Optional[str] = None  # None when nothing was relevant

    @property
    def source_names(self) -> List[str]:
        return [d.filename for d in self.sources]


@dataclass
class KBAskService:
    """
    One question, end to end: retrieve -> build context -> answer.

    No answer is generated when retrieval comes back empty.
    """
    retriever: KBRetriever
    answer_service: KBAnswerService
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    @staticmethod
    def build_context(sources: Sequence[ScoredDocument]) -> str:
        return CONTEXT_SEPARATOR.join(d.content for d in sources)

    async def ask(self, query: str, documents: Sequence[KBDocument]) -> AskResult:
        self.logger.info("ask: query='%s' documents=%d (start)", query[:120], len(documents))

        sources = await self.retriever.retrieve(query, documents)
        if not sources:
            self.logger.info("ask: no relevant documents")
            return AskResult(query=query)

        context = self.build_context(sources)
        answer = await asyncio.to_thread(self.answer_service.generate_answer, query, context)

        self.logger.info("ask: answered from %s (done)", ", ".join(d.filename for d in sources))
        return AskResult(query=query, sources=list(sources), context=context, answer=answer)

# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: KBRetriever
# -----------------------------------------------------------------------------
import asyncio
import contextlib
import logging
from typing import Any, List, Optional, Protocol, Sequence

import numpy as np

import settings
from document.KBDocument import KBDocument, ScoredDocument
from utility.VectorMath import cosine_similarity
from utility.logging_utils import get_class_logger


class Embedder(Protocol):
    async def embed(self, text: str) -> Optional[List[float]]:  # pragma: no cover - interface
        ...


class KBRetriever:
    """
    Embedding-based retriever over an in-memory document set.

    The query and every document go through the same embedder, so all
    vectors share one embedding space.

    retrieve():
      - embeds the query; an unusable query vector returns [] straight away
      - embeds all documents concurrently, one call each
      - scores by cosine similarity; a failure on one document scores it 0.0
      - keeps score > threshold (strict) and sorts by score, highest first
    """

    def __init__(
            self,
            embedder: Embedder,
            *,
            threshold: float = settings.RELEVANCE_THRESHOLD,
            max_concurrency: int = settings.EMBED_MAX_CONCURRENCY,
            logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.threshold = threshold
        self.max_concurrency = max_concurrency
        self.logger = logger or get_class_logger(self.__class__)
        self.logger.info(
            "KBRetriever initialised (embedder=%s, threshold=%s, max_concurrency=%s)",
            type(embedder).__name__,
            threshold,
            max_concurrency or "unbounded",
        )

    @staticmethod
    def _is_usable(vector: Any) -> bool:
        return isinstance(vector, (list, tuple, np.ndarray))

    async def _score_document(
            self,
            doc: KBDocument,
            query_embedding: Sequence[float],
            limiter: Optional[asyncio.Semaphore],
    ) -> ScoredDocument:
        try:
            async with limiter or contextlib.nullcontext():
                embedding = await self.embedder.embed(doc.content)
            score = cosine_similarity(query_embedding, embedding)
        except Exception as e:
            self.logger.error("Error processing document %s: %s", doc.filename, e)
            score = 0.0

        self.logger.debug("score %s = %.4f", doc.filename, score)
        return ScoredDocument.from_document(doc, score)

    async def score_documents(
            self,
            query_embedding: Sequence[float],
            documents: Sequence[KBDocument],
    ) -> List[ScoredDocument]:
        """Score every document against the query vector; order follows `documents`."""
        limiter = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency > 0 else None
        return list(await asyncio.gather(
            *(self._score_document(doc, query_embedding, limiter) for doc in documents)
        ))

    def rank(self, scored: Sequence[ScoredDocument]) -> List[ScoredDocument]:
        kept = [d for d in scored if d.score > self.threshold]
        # sorted() is stable: equal scores keep load order
        return sorted(kept, key=lambda d: d.score, reverse=True)

    async def retrieve(self, query: str, documents: Sequence[KBDocument]) -> List[ScoredDocument]:
        try:
            self.logger.info("Generating query embedding...")
            query_embedding = await self.embedder.embed(query)

            if not self._is_usable(query_embedding):
                self.logger.error("Failed to generate valid embedding for query")
                return []

            self.logger.info("Comparing with %d document embeddings...", len(documents))
            scored = await self.score_documents(query_embedding, documents)

            ranked = self.rank(scored)
            self.logger.info(
                "Retrieved %d/%d documents above threshold %s",
                len(ranked),
                len(scored),
                self.threshold,
            )
            return ranked

        except Exception as e:
            self.logger.exception("Error in retrieve: %s", e)
            return []

# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-06
# Updated: 2026-10-17
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import asyncio
import time
import logging
from typing import Optional

from config.Config import Config
from embedding.JinaEmbedder import JinaEmbedder
from utility.logging_utils import get_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding endpoint.

    Verifies:
      - The embedding call returns a vector at all
      - The vector is not the all-zero failure fallback
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        cfg: Config,
        expected_dim: Optional[int] = None,
        embedder_factory=JinaEmbedder,
        logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.expected_dim = expected_dim
        self.embedder_factory = embedder_factory
        self.logger = logger or get_logger(__name__)

        self.logger.info("Initialising EmbeddingHealth with model: %s", cfg.embedding_model)

    async def _embed_once(self, text: str):
        async with self.embedder_factory(cfg=self.cfg) as embedder:
            return await embedder.embed(text)

    def run(self) -> bool:
        """
        Run the embedding smoke test.

        Returns:
            True if the embedding call succeeds and (optionally) the dimension matches.
        """
        test_text = "Knowledge base embedding healthcheck"
        self.logger.info("Running embedding healthcheck using model: %s", self.cfg.embedding_model)

        try:
            start = time.time()
            embedding = asyncio.run(self._embed_once(test_text))
            elapsed_ms = (time.time() - start) * 1000.0
        except Exception as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False

        if embedding is None:
            self.logger.error("No embedding data returned in response.")
            return False

        if not any(embedding):
            self.logger.error("Embedding call fell back to the zero vector.")
            return False

        dim = len(embedding)
        self.logger.info(
            "Embedding call succeeded in %.1f ms. Returned dimension: %d",
            elapsed_ms,
            dim,
        )

        # Optional dimension validation
        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning(
                "Dimension mismatch: expected %d, got %d.",
                self.expected_dim,
                dim,
            )
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True

# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-10-17
# Description: JinaEmbedder
# -----------------------------------------------------------------------------
import logging
from typing import Any, List, Optional

import httpx

import settings
from config.Config import Config
from embedding.types import EmbeddingResponseModel
from utility.logging_utils import get_class_logger


class JinaEmbedder:
    """
    Async client for a Jina-style /v1/embeddings endpoint.

    embed() never raises for service failures: a non-2xx status, transport
    error or malformed body is logged and the all-zero fallback vector is
    returned. A well-formed response carrying no vector gives None.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            fallback_dim: int = settings.FALLBACK_EMBEDDING_DIM,
            transport: Optional[httpx.AsyncBaseTransport] = None,
            logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.fallback_dim = fallback_dim
        self.logger = logger or get_class_logger(self.__class__)

        self.url = cfg.embedding_url
        self.model = cfg.embedding_model

        if not cfg.embedding_verify_tls:
            self.logger.warning(
                "TLS certificate verification is DISABLED for embedding calls to %s",
                self.url,
            )

        self.client = httpx.AsyncClient(
            verify=cfg.embedding_verify_tls,
            timeout=httpx.Timeout(cfg.embedding_timeout),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {cfg.jina_api_key}",
            },
            transport=transport,
        )
        self.logger.info("JinaEmbedder initialised (model=%s, url=%s)", self.model, self.url)

    async def __aenter__(self) -> "JinaEmbedder":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def fallback_vector(self) -> List[float]:
        return [0.0] * self.fallback_dim

    def build_payload(self, text: str) -> dict:
        return {
            "model": self.model,
            "input": [{"text": text}],
        }

    async def embed(self, text: str) -> Optional[List[float]]:
        self.logger.debug("Embedding text (%d chars): %r", len(text), text[:120])

        try:
            resp = await self.client.post(self.url, json=self.build_payload(text))
            if not resp.is_success:
                raise RuntimeError(f"API request failed with status {resp.status_code}")

            parsed = EmbeddingResponseModel.model_validate_json(resp.content)
            embedding = parsed.data[0].embedding

        except Exception as e:
            self.logger.error("Error generating embeddings: %s", e)
            return self.fallback_vector()

        if embedding is None:
            self.logger.warning("Embedding response carried no vector")
            return None

        self.logger.debug("Embedding generated successfully (dim=%d)", len(embedding))
        return embedding

# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-08
# Updated: 2026-10-17
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from typing import List, Optional

# Importing settings loads .env once globally
import settings


@dataclass(frozen=True)
class Config:
    # Jina (embeddings)
    jina_api_key: str
    embedding_url: str = settings.EMBEDDING_URL_DEFAULT
    embedding_model: str = settings.EMBEDDING_MODEL_DEFAULT
    embedding_verify_tls: bool = True
    embedding_timeout: Optional[float] = None

    # OpenAI-compatible chat endpoint (Azure style api-version / api-key)
    openai_api_key: str = ""
    openai_base_url: str = ""
    openai_azure_api_key: str = ""
    openai_api_version: str = settings.OPENAI_API_VERSION_DEFAULT
    openai_chat_model: str = settings.OPENAI_CHAT_MODEL_DEFAULT

    # Local documents
    knowledge_base_dir: str = settings.KNOWLEDGE_BASE_DIR

    # ---- Single source of truth: credential field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Jina
        "jina_api_key": "JINA_API_KEY",
        "embedding_url": "KB_EMBEDDING_URL",
        "embedding_model": "KB_EMBEDDING_MODEL",

        # Chat
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "VITE_OPENAI_BASE_URL",  # falls back to OPENAI_BASE_URL
        "openai_azure_api_key": "VITE_OPENAI_API_KEY",
        "openai_api_version": "OPENAI_API_VERSION",
        "openai_chat_model": "OPENAI_CHAT_MODEL",
    }

    # Convenient *groups* for use in tests / health checks
    EMBEDDING_ENV_VARS = (
        "JINA_API_KEY",
    )

    CHAT_ENV_VARS = (
        "OPENAI_API_KEY",
        "VITE_OPENAI_BASE_URL",
    )

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        defaults = {
            "embedding_url": settings.EMBEDDING_URL_DEFAULT,
            "embedding_model": settings.EMBEDDING_MODEL_DEFAULT,
            "openai_api_version": settings.OPENAI_API_VERSION_DEFAULT,
            "openai_chat_model": settings.OPENAI_CHAT_MODEL_DEFAULT,
        }
        kwargs = {
            field_name: (os.getenv(env_name) or defaults.get(field_name, "")).strip()
            for field_name, env_name in Config.ENV_VARS.items()
        }
        if not kwargs["openai_base_url"]:
            kwargs["openai_base_url"] = (os.getenv("OPENAI_BASE_URL") or "").strip()

        return Config(
            **kwargs,
            embedding_verify_tls=settings.EMBEDDING_VERIFY_TLS,
            embedding_timeout=settings.EMBEDDING_TIMEOUT,
            knowledge_base_dir=settings.KNOWLEDGE_BASE_DIR,
        )

    def missing(self) -> List[str]:
        """
        Names of required env vars that resolved empty.

        Nothing is enforced here. A missing key surfaces later as a failed
        call, handled by the embedding / answer fallbacks.
        """
        required = {
            "jina_api_key": self.jina_api_key,
            "openai_api_key": self.openai_api_key,
            "openai_base_url": self.openai_base_url,
        }
        return [self.ENV_VARS[k] for k, v in required.items() if not v]

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "embedding_url": self.embedding_url,
            "embedding_model": self.embedding_model,
            "embedding_verify_tls": self.embedding_verify_tls,
            "embedding_timeout": self.embedding_timeout,
            "openai_base_url": self.openai_base_url,
            "openai_api_version": self.openai_api_version,
            "openai_chat_model": self.openai_chat_model,
            "knowledge_base_dir": self.knowledge_base_dir,
        }

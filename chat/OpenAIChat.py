# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-22
# Updated: 2026-10-17
# Description: OpenAIChat
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from openai import OpenAI

from utility.logging_utils import get_class_logger

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}


@dataclass
class OpenAIChat:
    """
        Chat wrapper for an OpenAI-compatible endpoint (Azure style gateway).

        Expected Config fields:
          cfg.openai_api_key: str
          cfg.openai_base_url: str
          cfg.openai_azure_api_key: str  (sent as the "api-key" header when set)
          cfg.openai_api_version: str    (sent as the "api-version" query param)
          cfg.openai_chat_model: str

        The SDK client is built on first use, so missing credentials show up
        as a failed call rather than a failed construction. SDK retries are off.
    """

    cfg: Any
    logger: Any = None
    http_client: Any = None  # optional httpx.Client, passed through to the SDK

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        self.model = getattr(self.cfg, "openai_chat_model", None)
        if not self.model:
            raise ValueError("Config missing openai_chat_model.")

        self._client: Optional[OpenAI] = None
        self.logger.info(
            "OpenAIChat initialised (base_url=%s, model=%s)",
            getattr(self.cfg, "openai_base_url", None),
            self.model,
        )

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            default_headers: Dict[str, str] = {}
            azure_key = getattr(self.cfg, "openai_azure_api_key", None)
            if azure_key:
                default_headers["api-key"] = azure_key

            default_query: Dict[str, str] = {}
            api_version = getattr(self.cfg, "openai_api_version", None)
            if api_version:
                default_query["api-version"] = api_version

            self._client = OpenAI(
                api_key=getattr(self.cfg, "openai_api_key", None) or None,
                base_url=getattr(self.cfg, "openai_base_url", None) or None,
                default_query=default_query or None,
                default_headers=default_headers or None,
                max_retries=0,
                http_client=self.http_client,
            )
        return self._client

    # Standard chat call
    def chat(
            self,
            messages: List[Message],
            temperature: float = 0.0,
            max_tokens: int = 512,
    ) -> Any:
        if not messages:
            raise ValueError("messages must be non-empty.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        self.logger.debug(
            "Chat request: model=%s temp=%s max_tokens=%s",
            self.model, temperature, max_tokens
        )

        resp = self.client.chat.completions.create(**params)

        # Log raw response for debugging
        self.logger.debug("Raw ChatCompletion response: %r", resp)

        # Return the full response object (NOT just the content)
        return resp

    # Convenience helper functions
    def simple_chat(
            self,
            user_text: str,
            system_text: Optional[str] = None,
            **kwargs: Any,
    ) -> dict:
        messages: List[Message] = []
        if system_text:
            messages.append({"role": "system", "content": system_text})
        messages.append({"role": "user", "content": user_text})

        resp = self.chat(messages, **kwargs)

        try:
            content = resp.choices[0].message.content or ""
        except Exception as e:
            self.logger.error("Unexpected chat response format: %s", e, exc_info=True)
            raise RuntimeError(f"Unexpected chat response format: {e}")

        self.logger.info("Chat answer generated (model=%s)", getattr(resp, "model", None))
        self.logger.debug("Token usage: %r", getattr(resp, "usage", None))

        return {
            "answer": content,
            "raw": resp,
            "usage": getattr(resp, "usage", None),
            "model": getattr(resp, "model", None),
        }

    def healthcheck(self) -> bool:
        try:
            _ = self.simple_chat("ping", max_tokens=5, temperature=0.0)
            return True
        except Exception as e:
            self.logger.warning("Chat healthcheck failed: %s", e)
            return False

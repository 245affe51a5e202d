# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-09
# Updated: 2026-10-17
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Optional, Tuple

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True))


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_optional_float(name: str) -> Optional[float]:
    v = _env(name, "")
    if v == "":
        return None
    return _env_float(name, 0.0)


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


def _env_suffixes(name: str, default: str) -> Tuple[str, ...]:
    raw = _env(name, default)
    suffixes = []
    for part in raw.split(","):
        part = part.strip().lower()
        if not part:
            continue
        suffixes.append(part if part.startswith(".") else f".{part}")
    return tuple(suffixes)


# -----------------------------------------------------------------------------
# Knowledge base
# -----------------------------------------------------------------------------
KNOWLEDGE_BASE_DIR = _env("KB_KNOWLEDGE_BASE_DIR", "./knowledge-base")
DOCUMENT_EXTENSIONS = _env_suffixes("KB_DOCUMENT_EXTENSIONS", ".json")


# -----------------------------------------------------------------------------
# Embeddings
# -----------------------------------------------------------------------------
EMBEDDING_URL_DEFAULT = "https://api.jina.ai/v1/embeddings"
EMBEDDING_MODEL_DEFAULT = "jina-clip-v2"

# Length of the all-zero vector returned when an embedding call fails
FALLBACK_EMBEDDING_DIM = _env_int("KB_FALLBACK_EMBEDDING_DIM", 512)

# Verification stays on unless explicitly disabled
EMBEDDING_VERIFY_TLS = _env_bool("KB_EMBEDDING_VERIFY_TLS", True)

# Seconds; empty means no timeout
EMBEDDING_TIMEOUT = _env_optional_float("KB_EMBEDDING_TIMEOUT")

# 0 means every document is embedded at once
EMBED_MAX_CONCURRENCY = _env_int("KB_EMBED_MAX_CONCURRENCY", 0)


# -----------------------------------------------------------------------------
# Retrieval
# -----------------------------------------------------------------------------
# Strict: documents must score above this value to be kept
RELEVANCE_THRESHOLD = _env_float("KB_RELEVANCE_THRESHOLD", 0.5)


# -----------------------------------------------------------------------------
# Answer generation
# -----------------------------------------------------------------------------
OPENAI_API_VERSION_DEFAULT = "2025-01-01-preview"
OPENAI_CHAT_MODEL_DEFAULT = "Proton"

ANSWER_TEMPERATURE = _env_float("KB_ANSWER_TEMPERATURE", 0.7)
ANSWER_MAX_TOKENS = _env_int("KB_ANSWER_MAX_TOKENS", 500)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if FALLBACK_EMBEDDING_DIM <= 0:
    raise RuntimeError("KB_FALLBACK_EMBEDDING_DIM must be a positive int")

if EMBED_MAX_CONCURRENCY < 0:
    raise RuntimeError("KB_EMBED_MAX_CONCURRENCY must be >= 0")

if not DOCUMENT_EXTENSIONS:
    raise RuntimeError("KB_DOCUMENT_EXTENSIONS resolved to empty value")

# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-12
# Updated: 2026-10-17
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
from pathlib import Path

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.Config import Config  # noqa: E402


@pytest.fixture()
def cfg(tmp_path) -> Config:
    return Config(
        jina_api_key="jina-test-key",
        embedding_url="https://embeddings.test/v1/embeddings",
        embedding_model="jina-clip-v2",
        openai_api_key="openai-test-key",
        openai_base_url="https://chat.test/openai",
        openai_azure_api_key="azure-test-key",
        openai_chat_model="Proton",
        knowledge_base_dir=str(tmp_path / "knowledge-base"),
    )

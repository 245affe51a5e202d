# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: types.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel, Field


class EmbeddingItemModel(BaseModel):
    embedding: Optional[List[float]] = None


class EmbeddingResponseModel(BaseModel):
    """Subset of the /v1/embeddings response we rely on: {data: [{embedding: [...]}]}"""
    data: List[EmbeddingItemModel] = Field(min_length=1)

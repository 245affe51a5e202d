# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-28
# Updated: 2026-10-17
# Description: KBDocument
# -----------------------------------------------------------------------------
from dataclasses import dataclass


@dataclass(frozen=True)
class KBDocument:
    """One knowledge-base file, identified by its filename."""
    filename: str
    content: str


@dataclass(frozen=True)
class ScoredDocument:
    """A KBDocument plus its cosine similarity to the query."""
    filename: str
    content: str
    score: float

    @classmethod
    def from_document(cls, doc: KBDocument, score: float) -> "ScoredDocument":
        return cls(filename=doc.filename, content=doc.content, score=score)

# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-10-17
# Description: types.py
# -----------------------------------------------------------------------------
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class KBRecordModel(BaseModel):
    """On-disk knowledge-base record. Only `data` is read; other keys are ignored."""
    model_config = ConfigDict(extra="ignore")

    data: str = ""

    @field_validator("data", mode="before")
    @classmethod
    def _empty_when_falsy(cls, v: Any) -> Any:
        # null / missing / empty all mean "no content"
        return v or ""

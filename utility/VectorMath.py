# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: VectorMath
# -----------------------------------------------------------------------------
from typing import Any

import numpy as np

from utility.logging_utils import get_logger

logger = get_logger(__name__)


def _is_vector(v: Any) -> bool:
    return isinstance(v, (list, tuple, np.ndarray))


def cosine_similarity(vec_a: Any, vec_b: Any) -> float:
    """
    Cosine similarity over the common prefix of two vectors.

    Invalid input (None, non-sequences, non-numeric values), an empty common
    prefix, or a zero norm on either side all give 0.0 instead of raising.
    Lengths may differ; both vectors are truncated to the shorter one and the
    norms are taken over that same prefix.
    """
    if not _is_vector(vec_a) or not _is_vector(vec_b):
        logger.warning("Invalid vectors provided to cosine_similarity")
        return 0.0

    length = min(len(vec_a), len(vec_b))
    if length == 0:
        return 0.0

    try:
        a = np.asarray(vec_a[:length], dtype=np.float64)
        b = np.asarray(vec_b[:length], dtype=np.float64)
    except (TypeError, ValueError) as e:
        logger.warning("Non-numeric vectors provided to cosine_similarity: %s", e)
        return 0.0

    if a.ndim != 1 or b.ndim != 1:
        logger.warning("cosine_similarity expects flat vectors, got ndim=%d/%d", a.ndim, b.ndim)
        return 0.0

    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))

    # Avoid division by zero
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))

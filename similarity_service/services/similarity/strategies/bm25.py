"""Okapi BM25 similarity (type "BM25")."""

from pydantic import Field

from similarity_service.services.similarity.base import Similarity, validate_parameters
from similarity_service.services.similarity.params import ParameterBag

DEFAULT_K1 = 1.2
DEFAULT_B = 0.75


class BM25Similarity(Similarity):
    """
    k1 controls term-frequency saturation, b the strength of document length normalization.
    Both are finite and non-negative; b above 1 over-normalizes length but is accepted.
    """

    type_name = "BM25"

    k1: float = Field(default=DEFAULT_K1, ge=0, allow_inf_nan=False)
    b: float = Field(default=DEFAULT_B, ge=0, allow_inf_nan=False)
    discount_overlaps: bool = True


def build_bm25(bag: ParameterBag) -> BM25Similarity:
    return validate_parameters(BM25Similarity, bag, "k1", "b", "discount_overlaps")

"""Similarity family implementations, keyed by the `type` used in index settings."""

from collections.abc import Mapping

from similarity_service.services.similarity.base import SimilarityFactory
from similarity_service.services.similarity.strategies.bm25 import BM25Similarity, build_bm25
from similarity_service.services.similarity.strategies.default import DefaultSimilarity, build_default
from similarity_service.services.similarity.strategies.dfr import DFRSimilarity, build_dfr
from similarity_service.services.similarity.strategies.ib import IBSimilarity, build_ib
from similarity_service.services.similarity.strategies.lm_dirichlet import (
    LMDirichletSimilarity,
    build_lm_dirichlet,
)
from similarity_service.services.similarity.strategies.lm_jelinek_mercer import (
    LMJelinekMercerSimilarity,
    build_lm_jelinek_mercer,
)

STRATEGY_REGISTRY: dict[str, SimilarityFactory] = {
    DefaultSimilarity.type_name: build_default,
    BM25Similarity.type_name: build_bm25,
    DFRSimilarity.type_name: build_dfr,
    IBSimilarity.type_name: build_ib,
    LMDirichletSimilarity.type_name: build_lm_dirichlet,
    LMJelinekMercerSimilarity.type_name: build_lm_jelinek_mercer,
}


def get_similarity_factory(
    type_name: str,
    registry: Mapping[str, SimilarityFactory] = STRATEGY_REGISTRY,
) -> SimilarityFactory | None:
    """Return the factory for the given similarity type from registry, or None."""
    return registry.get(type_name)

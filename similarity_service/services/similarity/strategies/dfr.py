"""Divergence-from-randomness similarity (type "DFR"), composed of three independently chosen sub-models."""

from similarity_service.services.similarity.base import Similarity
from similarity_service.services.similarity.params import ParameterBag
from similarity_service.services.similarity.submodels import (
    AFTER_EFFECT,
    BASIC_MODEL,
    NORMALIZATION,
    SUB_MODELS,
    SubModelRegistry,
)
from similarity_service.services.similarity.submodels.dfr import AfterEffect, BasicModel
from similarity_service.services.similarity.submodels.normalization import Normalization


class DFRSimilarity(Similarity):
    type_name = "DFR"

    basic_model: BasicModel
    after_effect: AfterEffect
    normalization: Normalization


def build_dfr(bag: ParameterBag, sub_models: SubModelRegistry = SUB_MODELS) -> DFRSimilarity:
    return DFRSimilarity(
        basic_model=sub_models.resolve_selected(BASIC_MODEL, bag),
        after_effect=sub_models.resolve_selected(AFTER_EFFECT, bag),
        normalization=sub_models.resolve_selected(NORMALIZATION, bag),
    )

"""Information-based similarity (type "IB"): distribution + lambda + normalization."""

from pydantic import Field

from similarity_service.services.similarity.base import Similarity
from similarity_service.services.similarity.params import ParameterBag
from similarity_service.services.similarity.submodels import (
    DISTRIBUTION,
    LAMBDA,
    NORMALIZATION,
    SUB_MODELS,
    SubModelRegistry,
)
from similarity_service.services.similarity.submodels.ib import Distribution, Lambda
from similarity_service.services.similarity.submodels.normalization import Normalization


class IBSimilarity(Similarity):
    type_name = "IB"

    distribution: Distribution
    # "lambda" is a keyword; the settings name is kept through the alias
    lambda_: Lambda = Field(alias="lambda")
    normalization: Normalization


def build_ib(bag: ParameterBag, sub_models: SubModelRegistry = SUB_MODELS) -> IBSimilarity:
    return IBSimilarity(
        distribution=sub_models.resolve_selected(DISTRIBUTION, bag),
        lambda_=sub_models.resolve_selected(LAMBDA, bag),
        normalization=sub_models.resolve_selected(NORMALIZATION, bag),
    )

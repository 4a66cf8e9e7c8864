"""Language model with Dirichlet-prior smoothing (type "LMDirichlet")."""

from pydantic import Field

from similarity_service.services.similarity.base import Similarity, validate_parameters
from similarity_service.services.similarity.params import ParameterBag

DEFAULT_MU = 2000.0


class LMDirichletSimilarity(Similarity):
    type_name = "LMDirichlet"

    mu: float = Field(default=DEFAULT_MU, ge=0, allow_inf_nan=False)


def build_lm_dirichlet(bag: ParameterBag) -> LMDirichletSimilarity:
    return validate_parameters(LMDirichletSimilarity, bag, "mu")

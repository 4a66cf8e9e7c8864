"""Language model with Jelinek-Mercer smoothing (type "LMJelinekMercer")."""

from pydantic import Field

from similarity_service.services.similarity.base import Similarity, validate_parameters
from similarity_service.services.similarity.params import ParameterBag


class LMJelinekMercerSimilarity(Similarity):
    """
    lambda weights the collection model against the document model. Small values (around 0.1)
    suit short title queries, larger ones (around 0.7) long queries. There is no default.
    """

    type_name = "LMJelinekMercer"

    lambda_: float = Field(alias="lambda", gt=0, le=1, allow_inf_nan=False)


def build_lm_jelinek_mercer(bag: ParameterBag) -> LMJelinekMercerSimilarity:
    return validate_parameters(LMJelinekMercerSimilarity, bag, "lambda")

"""Classic TF/IDF similarity, the process default (type "default")."""

from similarity_service.services.similarity.base import Similarity, validate_parameters
from similarity_service.services.similarity.params import ParameterBag


class DefaultSimilarity(Similarity):
    """Vector-space TF/IDF scoring. Overlap tokens (position increment 0) are ignored in length norms when discount_overlaps is set."""

    type_name = "default"

    discount_overlaps: bool = True


def build_default(bag: ParameterBag) -> DefaultSimilarity:
    return validate_parameters(DefaultSimilarity, bag, "discount_overlaps")

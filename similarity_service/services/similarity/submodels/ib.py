"""Information-based sub-models: probabilistic distributions and their lambda estimators."""

from similarity_service.services.similarity.base import SubModel, fixed_sub_model


class Distribution(SubModel):
    """ll (log-logistic) or spl (smoothed power-law)."""

    axis = "distribution"


class Lambda(SubModel):
    """df (document frequency) or ttf (total term frequency) estimate of the distribution's lambda."""

    axis = "lambda"


DISTRIBUTIONS = {code: fixed_sub_model(Distribution, code) for code in ("ll", "spl")}

LAMBDAS = {code: fixed_sub_model(Lambda, code) for code in ("df", "ttf")}

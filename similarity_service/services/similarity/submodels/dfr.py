"""Divergence-from-randomness sub-models: basic models and first normalizations (after effects)."""

from similarity_service.services.similarity.base import SubModel, fixed_sub_model


class BasicModel(SubModel):
    """
    Basic model of information content: be (Bose-Einstein), d (divergence approximation of the
    binomial), g (geometric approximation of Bose-Einstein), if (inverse term frequency),
    in (inverse document frequency), ine (inverse expected document frequency), p (Poisson).
    """

    axis = "basic_model"


class AfterEffect(SubModel):
    """First normalization of information gain: no, b (Bernoulli), l (Laplace)."""

    axis = "after_effect"


BASIC_MODELS = {code: fixed_sub_model(BasicModel, code) for code in ("be", "d", "g", "if", "in", "ine", "p")}

AFTER_EFFECTS = {code: fixed_sub_model(AfterEffect, code) for code in ("no", "b", "l")}

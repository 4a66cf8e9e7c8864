"""Term-frequency normalization sub-models shared by DFR and IB (axis "normalization")."""

from typing import Literal

from pydantic import Field

from similarity_service.services.similarity.base import SubModel, validate_parameters
from similarity_service.services.similarity.params import ParameterBag


class Normalization(SubModel):
    """Normalization selected by code; "no" disables normalization."""

    axis = "normalization"


class NormalizationH1(Normalization):
    code: Literal["h1"] = "h1"
    c: float = Field(default=1.0, gt=0, allow_inf_nan=False)


class NormalizationH2(Normalization):
    code: Literal["h2"] = "h2"
    c: float = Field(default=1.0, gt=0, allow_inf_nan=False)


class NormalizationH3(Normalization):
    """Dirichlet-prior normalization; its smoothing parameter is configured as `c`."""

    code: Literal["h3"] = "h3"
    c: float = Field(default=800.0, gt=0, allow_inf_nan=False)


class NormalizationZ(Normalization):
    code: Literal["z"] = "z"
    z: float = Field(default=0.30, gt=0, allow_inf_nan=False)


def no_normalization(bag: ParameterBag) -> Normalization:
    return Normalization(code="no")


def normalization_h1(bag: ParameterBag) -> NormalizationH1:
    return validate_parameters(NormalizationH1, bag, "c")


def normalization_h2(bag: ParameterBag) -> NormalizationH2:
    return validate_parameters(NormalizationH2, bag, "c")


def normalization_h3(bag: ParameterBag) -> NormalizationH3:
    return validate_parameters(NormalizationH3, bag, "c")


def normalization_z(bag: ParameterBag) -> NormalizationZ:
    return validate_parameters(NormalizationZ, bag, "z")


NORMALIZATIONS = {
    "no": no_normalization,
    "h1": normalization_h1,
    "h2": normalization_h2,
    "h3": normalization_h3,
    "z": normalization_z,
}

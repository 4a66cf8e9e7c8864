"""
Base similarity and sub-model contracts.

Instances are frozen pydantic models: immutable, compared and hashed by their resolved
parameters, and introspectable after construction. They describe a scoring configuration;
they do not score.
"""

from collections.abc import Callable
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from similarity_service.services.similarity.params import ParameterBag, parameter_error


class SubModel(BaseModel):
    """
    One pluggable piece of a composite similarity, identified by (axis, code).
    Subclasses add fields for the sub-model's own parameters.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    axis: ClassVar[str]

    code: str

    def parameters(self) -> dict[str, Any]:
        """Own parameters, without the code."""
        return self.model_dump(exclude={"code"})

    def effective_parameters(self) -> dict[str, Any]:
        return {"code": self.code, **self.parameters()}

    def to_settings(self) -> dict[str, Any]:
        """Flat settings that select and configure this sub-model on its parent."""
        out: dict[str, Any] = {self.axis: self.code}
        for key, value in self.parameters().items():
            out[f"{self.axis}.{self.code}.{key}"] = value
        return out


class Similarity(BaseModel):
    """
    A resolved similarity. `type_name` is the identifier used in `index.similarity.<name>.type`.
    Fields are the effective parameters; sub-model fields hold exclusively owned SubModels.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type_name: ClassVar[str]

    def effective_parameters(self) -> dict[str, Any]:
        """Resolved parameters keyed by their settings names; sub-models expand to dicts."""
        params: dict[str, Any] = {}
        for field_name, field in type(self).model_fields.items():
            value = getattr(self, field_name)
            key = field.alias or field_name
            params[key] = value.effective_parameters() if isinstance(value, SubModel) else value
        return params

    def sub_models(self) -> dict[str, SubModel]:
        return {m.axis: m for m in (getattr(self, f) for f in type(self).model_fields) if isinstance(m, SubModel)}

    def to_settings(self) -> dict[str, Any]:
        """Flat settings section that rebuilds an equal instance through its factory."""
        out: dict[str, Any] = {"type": self.type_name}
        for field_name, field in type(self).model_fields.items():
            value = getattr(self, field_name)
            if isinstance(value, SubModel):
                out.update(value.to_settings())
            else:
                out[field.alias or field_name] = value
        return out


SimilarityFactory = Callable[[ParameterBag], Similarity]
SubModelFactory = Callable[[ParameterBag], SubModel]


def fixed_sub_model(cls: type[SubModel], code: str) -> SubModelFactory:
    """Factory for a sub-model code that takes no parameters of its own."""

    def build(bag: ParameterBag) -> SubModel:
        return cls(code=code)

    build.__name__ = f"{cls.axis}_{code}"
    return build


M = TypeVar("M", bound=BaseModel)


def validate_parameters(cls: type[M], bag: ParameterBag, *keys: str) -> M:
    """
    Build cls from the given keys of bag with pydantic validation. Absent keys take the field
    defaults; type and domain violations raise the matching SimilarityConfigError.
    """
    try:
        return cls.model_validate(bag.pick(*keys))
    except ValidationError as e:
        expected = {field.alias or name: field.annotation for name, field in cls.model_fields.items()}
        raise parameter_error(bag.scope, e, expected) from e

"""Similarity configuration models. Read-only; no business logic."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from similarity_service.services.similarity.params import ParameterBag


class SimilarityDefinition(BaseModel):
    """One user-declared similarity: the `type` selecting its family plus opaque family parameters."""

    model_config = ConfigDict(frozen=True)

    type: str | None = Field(default=None, description="default|BM25|DFR|IB|LMDirichlet|LMJelinekMercer")
    parameters: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_section(cls, name: str, section: Mapping[str, Any]) -> "SimilarityDefinition":
        """Split an `index.similarity.<name>.*` section into type and parameters."""
        params = dict(section)
        type_name = ParameterBag(name, params).get("type", str)
        params.pop("type", None)
        return cls(type=type_name, parameters=params)


class SimilarityProfile(BaseModel):
    """Named block of index settings declaring similarities (static.json profiles)."""

    description: str = Field(default="")
    settings: dict[str, Any] = Field(default_factory=dict, description="Flat or nested index settings")
